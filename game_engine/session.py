"""
Game session - two players, six dice, and the rules that tie them together.
"""
import asyncio
import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from shared.constants import (
    PLAYER_COUNT, DEFAULT_FACE_COUNT, ANIMATION_ROLLS,
    ANIMATION_BASE_DELAY, ANIMATION_DELAY_FACTOR
)
from shared.enums import GameOutcome, DieState

from .dice import Die
from .errors import GameError, DieIndexError
from .player import Player


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of comparing both players' totals."""
    outcome: GameOutcome
    total: Optional[int] = None

    @property
    def is_finished(self) -> bool:
        return self.outcome != GameOutcome.IN_PROGRESS

    @property
    def message(self) -> str:
        """Human readable result."""
        if self.outcome == GameOutcome.PLAYER1_WINS:
            return f"Player 1 wins with {self.total} points!"
        if self.outcome == GameOutcome.PLAYER2_WINS:
            return f"Player 2 wins with {self.total} points!"
        if self.outcome == GameOutcome.TIE:
            return f"Tie at {self.total} points!"
        return "Game in progress - roll all dice first."

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "total": self.total,
            "message": self.message,
        }


class SessionListener:
    """
    Receives state changes the UI has to render.

    All methods are no-ops; override the ones you need.
    """

    def die_face_changed(self, player_index: int, dice_index: int, face_value: Optional[int]) -> None:
        pass

    def die_enabled_changed(self, player_index: int, dice_index: int, enabled: bool) -> None:
        pass

    def controls_enabled_changed(self, enabled: bool) -> None:
        """Evaluate and reset controls."""
        pass

    def message_changed(self, text: str) -> None:
        pass


class GameSession:
    """
    A two-player dice duel.

    Each player rolls three dice; evaluate() compares the sums. Rolls are
    animated: a die is drawn repeatedly with a growing pause between draws,
    and only the last draw counts.
    """

    def __init__(
        self,
        face_count: int = DEFAULT_FACE_COUNT,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        listener: Optional[SessionListener] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        animation_rolls: int = ANIMATION_ROLLS,
        base_delay: float = ANIMATION_BASE_DELAY,
        delay_factor: float = ANIMATION_DELAY_FACTOR,
    ):
        """
        Create a session.

        Args:
            face_count: Faces on every die
            seed: Seed for the shared random source (ignored if rng is given)
            rng: Random source shared by all dice
            listener: Receives rendering updates
            sleep: Awaitable delay used between animation draws
            animation_rolls: Draws per roll, the last one settles the die
            base_delay: First pause in seconds
            delay_factor: Growth of each pause, must be above 1
        """
        if (
            isinstance(animation_rolls, bool)
            or not isinstance(animation_rolls, int)
            or animation_rolls < 1
        ):
            raise GameError(f"Animation needs at least one roll, got {animation_rolls}")
        if base_delay <= 0:
            raise GameError(f"Base delay must be positive, got {base_delay}")
        if delay_factor <= 1:
            raise GameError(f"Delay factor must be greater than 1, got {delay_factor}")

        self._random = rng if rng is not None else random.Random(seed)
        self._players = tuple(
            Player(index, face_count, self._random) for index in range(PLAYER_COUNT)
        )
        self._listener = listener or SessionListener()
        self._sleep = sleep
        self.animation_rolls = animation_rolls
        self.base_delay = base_delay
        self.delay_factor = delay_factor

        self._rolling: Counter = Counter()
        self.last_result: Optional[EvaluationResult] = None

        logger.info(f"Session created with {face_count}-faced dice")

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def listener(self) -> SessionListener:
        return self._listener

    @listener.setter
    def listener(self, listener: Optional[SessionListener]) -> None:
        self._listener = listener or SessionListener()

    def get_player(self, player_index: int) -> Player:
        """Get a player by seat, raising DieIndexError when out of range."""
        if (
            isinstance(player_index, bool)
            or not isinstance(player_index, int)
            or not 0 <= player_index < len(self._players)
        ):
            raise DieIndexError(
                f"Player index must be between 0 and {len(self._players) - 1}, got {player_index!r}"
            )
        return self._players[player_index]

    def get_die(self, player_index: int, dice_index: int) -> Die:
        return self.get_player(player_index).get_die(dice_index)

    def is_rolling(self, player_index: int, dice_index: int) -> bool:
        return (player_index, dice_index) in self._rolling

    @property
    def any_rolling(self) -> bool:
        return bool(self._rolling)

    def get_die_state(self, player_index: int, dice_index: int) -> DieState:
        die = self.get_die(player_index, dice_index)
        if self.is_rolling(player_index, dice_index):
            return DieState.ROLLING
        return DieState.SETTLED if die.is_settled else DieState.UNSET

    # =========== Rolling ===========

    def animation_delays(self) -> list[float]:
        """Pauses (seconds) taken after each draw of a roll."""
        delays = []
        delay = self.base_delay
        for _ in range(self.animation_rolls):
            delays.append(delay)
            delay *= self.delay_factor
        return delays

    async def roll_die(self, player_index: int, dice_index: int) -> int:
        """
        Roll one die with a decelerating spin.

        Every intermediate draw is reported to the listener. The die's
        control and the evaluate/reset controls are reported disabled for
        the duration; the latter come back once no die is rolling. The die
        itself stays disabled until reset_all().

        Returns:
            The settled face value

        Raises:
            DieIndexError: If either index is out of range
        """
        die = self.get_die(player_index, dice_index)
        key = (player_index, dice_index)

        self._rolling[key] += 1
        self._listener.die_enabled_changed(player_index, dice_index, False)
        self._listener.controls_enabled_changed(False)

        try:
            value = die.face_value
            for delay in self.animation_delays():
                value = die.roll()
                logger.debug(f"Player {player_index + 1} die {dice_index + 1} spun {value}")
                self._listener.die_face_changed(player_index, dice_index, value)
                await self._sleep(delay)
        finally:
            self._rolling[key] -= 1
            if self._rolling[key] <= 0:
                del self._rolling[key]
            if not self._rolling:
                self._listener.controls_enabled_changed(True)

        logger.info(f"Player {player_index + 1} die {dice_index + 1} settled on {value}")
        return value

    # =========== Reset ===========

    def reset_all(self) -> None:
        """
        Clear every die and the last result, and re-enable all controls.

        Raises:
            GameError: If a die is still rolling
        """
        if self.any_rolling:
            raise GameError("Cannot reset while dice are rolling")

        for player in self._players:
            player.reset()
        self.last_result = None

        for player in self._players:
            for dice_index in range(len(player.dice)):
                self._listener.die_face_changed(player.index, dice_index, None)
                self._listener.die_enabled_changed(player.index, dice_index, True)
        self._listener.controls_enabled_changed(True)
        self._listener.message_changed("")

        logger.info("All dice reset")

    # =========== Evaluation ===========

    def evaluate(self) -> EvaluationResult:
        """
        Compare both players' totals.

        Never changes any die; a tie is left on the table until the
        players reset it. A spinning die counts as unset.
        """
        first, second = (player.total for player in self._players)

        if first is None or second is None or self.any_rolling:
            result = EvaluationResult(GameOutcome.IN_PROGRESS)
        elif first > second:
            result = EvaluationResult(GameOutcome.PLAYER1_WINS, first)
        elif second > first:
            result = EvaluationResult(GameOutcome.PLAYER2_WINS, second)
        else:
            result = EvaluationResult(GameOutcome.TIE, first)

        self.last_result = result
        self._listener.message_changed(result.message)
        logger.info(f"Evaluated: {result.outcome.value} ({first} vs {second})")
        return result

    # =========== Serialization ===========

    def get_state(self) -> dict:
        """Snapshot of the table for rendering and debugging."""
        return {
            "players": [
                {
                    "index": player.index,
                    "name": player.name,
                    "dice": player.face_values,
                    "total": player.total,
                    "rolling": [
                        self.is_rolling(player.index, dice_index)
                        for dice_index in range(len(player.dice))
                    ],
                }
                for player in self._players
            ],
            "any_rolling": self.any_rolling,
            "last_result": self.last_result.to_dict() if self.last_result else None,
        }
