"""
Player seat at the dice table.
"""
import random
from typing import Optional

from shared.constants import DEFAULT_FACE_COUNT, DICE_PER_PLAYER
from .dice import Die
from .errors import DieIndexError


class Player:
    """
    One side of the table, holding three dice.
    
    A player has no identity beyond its seat index.
    """
    
    def __init__(
        self,
        index: int,
        face_count: int = DEFAULT_FACE_COUNT,
        rng: Optional[random.Random] = None,
    ):
        self.index = index
        self._dice = tuple(Die(face_count, rng) for _ in range(DICE_PER_PLAYER))
    
    @property
    def name(self) -> str:
        return f"Player {self.index + 1}"
    
    @property
    def dice(self) -> tuple[Die, ...]:
        return self._dice
    
    def get_die(self, dice_index: int) -> Die:
        """Get a die by position, raising DieIndexError when out of range."""
        if (
            isinstance(dice_index, bool)
            or not isinstance(dice_index, int)
            or not 0 <= dice_index < len(self._dice)
        ):
            raise DieIndexError(
                f"Dice index must be between 0 and {len(self._dice) - 1}, got {dice_index!r}"
            )
        return self._dice[dice_index]
    
    @property
    def face_values(self) -> list[Optional[int]]:
        return [die.face_value for die in self._dice]
    
    @property
    def is_settled(self) -> bool:
        """Whether every die holds a value."""
        return all(die.is_settled for die in self._dice)
    
    @property
    def total(self) -> Optional[int]:
        """Sum of all dice, or None while any die is unset."""
        if not self.is_settled:
            return None
        return sum(die.face_value for die in self._dice)
    
    def reset(self) -> None:
        for die in self._dice:
            die.reset()
    
    def __repr__(self) -> str:
        return f"Player(index={self.index}, dice={self.face_values})"
