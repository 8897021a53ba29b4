"""
Exceptions raised by the game engine.
"""


class GameError(Exception):
    """Base class for all dice game errors."""


class InvalidFaceCountError(GameError, ValueError):
    """A die was constructed with an unsupported number of faces."""


class DieIndexError(GameError, IndexError):
    """A player or die index is outside the table."""
