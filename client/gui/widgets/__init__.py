"""
GUI widgets for the dice duel.
"""

from .dice_panel import DieButton, PlayerDicePanel, face_text
from .event_log import EventLog

__all__ = [
    "DieButton",
    "PlayerDicePanel",
    "face_text",
    "EventLog",
]
