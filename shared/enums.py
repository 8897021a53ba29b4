"""
Enumerations used throughout the game.
"""
from enum import Enum


class GameOutcome(str, Enum):
    """Outcome of evaluating the table."""
    PLAYER1_WINS = "PLAYER1_WINS"
    PLAYER2_WINS = "PLAYER2_WINS"
    TIE = "TIE"
    IN_PROGRESS = "IN_PROGRESS"


class DieState(str, Enum):
    """Lifecycle state of a single die."""
    UNSET = "UNSET"
    ROLLING = "ROLLING"
    SETTLED = "SETTLED"


class GameEventType(str, Enum):
    """Events reported by the controller for logging."""
    DIE_ROLLED = "die_rolled"
    DICE_RESET = "dice_reset"
    EVALUATED = "evaluated"
