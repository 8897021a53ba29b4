"""
Event log widget.

Shows rolls, results and errors in a scrolling log.
"""

from datetime import datetime
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QTextEdit
from PyQt6.QtGui import QFont, QTextCursor

from shared.constants import DICE_POSITION_NAMES
from shared.enums import GameEventType, GameOutcome


class EventLog(QWidget):
    """Scrolling log of game events."""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        
        # Title
        title = QLabel("Game Log")
        title.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        title.setStyleSheet("color: white;")
        layout.addWidget(title)
        
        # Log text area
        self._log = QTextEdit()
        self._log.setReadOnly(True)
        self._log.setFont(QFont("Consolas", 9))
        self._log.setStyleSheet("""
            QTextEdit {
                background-color: #1A252F;
                color: #ECF0F1;
                border: 1px solid #34495E;
                border-radius: 4px;
            }
        """)
        layout.addWidget(self._log)
    
    def add_message(self, text: str, color: str = "#ECF0F1") -> None:
        """Add a message to the log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        html = f'<span style="color: #7F8C8D;">[{timestamp}]</span> '
        html += f'<span style="color: {color};">{text}</span><br>'
        
        self._log.moveCursor(QTextCursor.MoveOperation.End)
        self._log.insertHtml(html)
        self._log.moveCursor(QTextCursor.MoveOperation.End)
    
    def add_system_message(self, text: str) -> None:
        """Add a system message."""
        self.add_message(f"⚙️ {text}", "#3498DB")
    
    def add_error_message(self, text: str) -> None:
        """Add an error message."""
        self.add_message(f"❌ {text}", "#E74C3C")
    
    def add_game_event(self, event_type: str, data: dict) -> None:
        """Add a game event reported by the controller."""
        text = ""
        color = "#ECF0F1"
        
        if event_type == GameEventType.DIE_ROLLED.value:
            player = data.get("player_name", "Someone")
            index = data.get("dice_index", 0)
            position = DICE_POSITION_NAMES[index] if 0 <= index < len(DICE_POSITION_NAMES) else str(index)
            text = f"🎲 {player} rolled a {data.get('value', '?')} with the {position} die"
            total = data.get("total")
            if total is not None:
                text += f" (total {total})"
                color = "#F1C40F"
        
        elif event_type == GameEventType.DICE_RESET.value:
            text = "🔄 All dice reset"
            color = "#3498DB"
        
        elif event_type == GameEventType.EVALUATED.value:
            text = data.get("message", "")
            outcome = data.get("outcome")
            if outcome == GameOutcome.IN_PROGRESS.value:
                text = f"⏳ {text}"
                color = "#95A5A6"
            elif outcome == GameOutcome.TIE.value:
                text = f"🤝 {text}"
                color = "#E67E22"
            else:
                text = f"🏆 {text}"
                color = "#27AE60"
        
        else:
            # Unknown event type
            text = f"📩 {event_type}: {data}"
            color = "#7F8C8D"
        
        if text:
            self.add_message(text, color)
    