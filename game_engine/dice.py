"""
Dice rolling mechanics.
"""
import random
from typing import Optional

from shared.constants import DEFAULT_FACE_COUNT, MIN_FACE_COUNT, MAX_FACE_COUNT
from .errors import InvalidFaceCountError


class Die:
    """A single die with a fixed number of faces."""
    
    def __init__(self, face_count: int = DEFAULT_FACE_COUNT, rng: Optional[random.Random] = None):
        """
        Initialize a die.
        
        Args:
            face_count: Number of faces, between 2 and 100
            rng: Random source exposing randint(); a private
                random.Random is used when omitted
        
        Raises:
            InvalidFaceCountError: If face_count is out of range
        """
        if (
            isinstance(face_count, bool)
            or not isinstance(face_count, int)
            or not MIN_FACE_COUNT <= face_count <= MAX_FACE_COUNT
        ):
            raise InvalidFaceCountError(
                f"Face count must be an integer between {MIN_FACE_COUNT} "
                f"and {MAX_FACE_COUNT}, got {face_count!r}"
            )
        
        self._face_count = face_count
        self._face_value: Optional[int] = None
        self._random = rng if rng is not None else random.Random()
    
    @property
    def face_count(self) -> int:
        """Number of faces."""
        return self._face_count
    
    @property
    def face_value(self) -> Optional[int]:
        """Current face, or None if not rolled since the last reset."""
        return self._face_value
    
    @property
    def is_settled(self) -> bool:
        return self._face_value is not None
    
    def roll(self) -> int:
        """
        Roll the die.
        
        Returns:
            The new face value, in [1, face_count]
        """
        self._face_value = self._random.randint(1, self._face_count)
        return self._face_value
    
    def reset(self) -> None:
        """Clear the face value."""
        self._face_value = None
    
    def __repr__(self) -> str:
        return f"Die(face_count={self._face_count}, face_value={self._face_value})"
