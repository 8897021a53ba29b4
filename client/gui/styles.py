"""
Styles and colors for the dice duel GUI.
"""

from PyQt6.QtGui import QColor

# Player colors, left then right
PLAYER_COLORS = [
    QColor(220, 20, 60),    # Red
    QColor(30, 144, 255),   # Blue
]

# Result colors
WIN_COLOR = QColor(39, 174, 96)
TIE_COLOR = QColor(230, 126, 34)
PENDING_COLOR = QColor(149, 165, 166)

# Stylesheet
MAIN_STYLESHEET = """
QMainWindow {
    background-color: #2C3E50;
}

QWidget#centralWidget {
    background-color: #2C3E50;
}

QLabel {
    color: white;
}

QLabel#resultLabel {
    font-size: 18px;
    font-weight: bold;
    color: #F1C40F;
}

QPushButton {
    background-color: #3498DB;
    color: white;
    border: none;
    padding: 8px 16px;
    border-radius: 4px;
    font-weight: bold;
}

QPushButton:hover {
    background-color: #2980B9;
}

QPushButton:pressed {
    background-color: #1F618D;
}

QPushButton:disabled {
    background-color: #7F8C8D;
    color: #BDC3C7;
}

QPushButton#dieButton {
    background-color: #ECF0F1;
    color: #2C3E50;
    border-radius: 12px;
    padding: 0;
}

QPushButton#dieButton:hover {
    background-color: #D5DBDB;
}

QPushButton#dieButton:disabled {
    background-color: #BDC3C7;
    color: #2C3E50;
}

QPushButton#actionButton {
    background-color: #27AE60;
    font-size: 14px;
    padding: 12px 24px;
}

QPushButton#actionButton:hover {
    background-color: #229954;
}

QPushButton#dangerButton {
    background-color: #E74C3C;
}

QPushButton#dangerButton:hover {
    background-color: #C0392B;
}

QFrame {
    color: #3498DB;
}

QTextEdit {
    background-color: #34495E;
    color: white;
    border: 1px solid #3498DB;
    border-radius: 4px;
}
"""
