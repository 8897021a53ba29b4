"""
Dice duel entry point.

Starts the GUI with asyncio running on Qt's event loop, so roll
animations can await between draws without blocking clicks.
"""

import sys
import asyncio
import logging

import qasync
from PyQt6.QtWidgets import QApplication

from client.config import settings
from client.gui import MainWindow


def setup_logging() -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main() -> int:
    """Main entry point."""
    setup_logging()
    
    # Create Qt application
    app = QApplication(sys.argv)
    app.setApplicationName("Dice Duel")
    app.setOrganizationName("Dice Duel")
    
    # Set up async event loop with Qt
    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)
    
    # Create and show main window
    window = MainWindow()
    window.show()
    app.lastWindowClosed.connect(loop.stop)
    
    # Run the event loop
    with loop:
        try:
            loop.run_forever()
        except KeyboardInterrupt:
            pass
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
