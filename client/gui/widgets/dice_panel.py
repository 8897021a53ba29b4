"""
Dice widgets.

A clickable button per die and a panel holding one player's three dice.
"""

from typing import Optional
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont

from client.gui.styles import PLAYER_COLORS
from shared.constants import (
    DEFAULT_FACE_COUNT, DICE_PER_PLAYER, DICE_POSITION_NAMES,
    DIE_FACE_GLYPHS, UNSET_FACE_TEXT
)


def face_text(face_value: Optional[int], face_count: int = DEFAULT_FACE_COUNT) -> str:
    """Text shown on a die: '?' when unset, a die glyph for d6, else the number."""
    if face_value is None:
        return UNSET_FACE_TEXT
    if face_count == 6 and face_value in DIE_FACE_GLYPHS:
        return DIE_FACE_GLYPHS[face_value]
    return str(face_value)


class DieButton(QPushButton):
    """Button showing a single die's face."""
    
    def __init__(self, dice_index: int, face_count: int = DEFAULT_FACE_COUNT, parent=None):
        super().__init__(UNSET_FACE_TEXT, parent)
        
        self.dice_index = dice_index
        self._face_count = face_count
        self._face_value: Optional[int] = None
        
        self.setObjectName("dieButton")
        self.setProperty("position", DICE_POSITION_NAMES[dice_index])
        self.setFont(QFont("Arial", 36, QFont.Weight.Bold))
        self.setFixedSize(88, 88)
    
    @property
    def face_value(self) -> Optional[int]:
        return self._face_value
    
    def set_face(self, face_value: Optional[int]) -> None:
        """Show a face value, or the unset marker for None."""
        self._face_value = face_value
        self.setText(face_text(face_value, self._face_count))


class PlayerDicePanel(QFrame):
    """
    One player's three dice and running total.
    
    Signals:
        roll_requested: A die was clicked (dice_index)
    """
    
    roll_requested = pyqtSignal(int)
    
    def __init__(self, player_index: int, face_count: int = DEFAULT_FACE_COUNT, parent=None):
        super().__init__(parent)
        
        self.player_index = player_index
        
        self.setFrameStyle(QFrame.Shape.Box | QFrame.Shadow.Raised)
        self.setLineWidth(2)
        
        layout = QVBoxLayout(self)
        layout.setSpacing(8)
        
        color = PLAYER_COLORS[player_index % len(PLAYER_COLORS)]
        self._name_label = QLabel(f"Player {player_index + 1}")
        self._name_label.setFont(QFont("Arial", 14, QFont.Weight.Bold))
        self._name_label.setStyleSheet(f"color: {color.name()};")
        self._name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._name_label)
        
        dice_row = QHBoxLayout()
        self._buttons: list[DieButton] = []
        for dice_index in range(DICE_PER_PLAYER):
            button = DieButton(dice_index, face_count)
            button.clicked.connect(lambda checked=False, i=dice_index: self.roll_requested.emit(i))
            dice_row.addWidget(button)
            self._buttons.append(button)
        layout.addLayout(dice_row)
        
        self._total_label = QLabel()
        self._total_label.setFont(QFont("Arial", 12))
        self._total_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._total_label)
        self._update_total()
    
    @property
    def buttons(self) -> list[DieButton]:
        return list(self._buttons)
    
    def set_face(self, dice_index: int, face_value: Optional[int]) -> None:
        self._buttons[dice_index].set_face(face_value)
        self._update_total()
    
    def set_die_enabled(self, dice_index: int, enabled: bool) -> None:
        self._buttons[dice_index].setEnabled(enabled)
    
    def _update_total(self) -> None:
        values = [button.face_value for button in self._buttons]
        if any(value is None for value in values):
            self._total_label.setText(f"Total: {UNSET_FACE_TEXT}")
        else:
            self._total_label.setText(f"Total: {sum(values)}")
