"""
Game engine package.
"""
from .errors import GameError, InvalidFaceCountError, DieIndexError
from .dice import Die
from .player import Player
from .session import GameSession, EvaluationResult, SessionListener

__all__ = [
    "GameError",
    "InvalidFaceCountError",
    "DieIndexError",
    "Die",
    "Player",
    "GameSession",
    "EvaluationResult",
    "SessionListener",
]
