"""Shared test setup: one QApplication for the whole session.

QApplication must exist before any test module creates a bare
QCoreApplication, otherwise widget construction in the GUI tests aborts.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

_app = QApplication.instance() or QApplication([])
