"""
Dice game controller.

Wraps the game engine session and turns its updates into Qt signals.
"""

import asyncio
import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from client.config import settings
from game_engine import GameSession, GameError, SessionListener, EvaluationResult
from shared.enums import GameEventType


logger = logging.getLogger(__name__)


class _SignalListener(SessionListener):
    """Forwards session updates to the controller's signals."""

    def __init__(self, controller: "DiceGameController"):
        self._controller = controller

    def die_face_changed(self, player_index: int, dice_index: int, face_value: Optional[int]) -> None:
        self._controller.die_face_changed.emit(player_index, dice_index, face_value)

    def die_enabled_changed(self, player_index: int, dice_index: int, enabled: bool) -> None:
        self._controller.die_enabled_changed.emit(player_index, dice_index, enabled)

    def controls_enabled_changed(self, enabled: bool) -> None:
        self._controller.controls_enabled_changed.emit(enabled)

    def message_changed(self, text: str) -> None:
        self._controller.message_changed.emit(text)


def create_session(sleep=asyncio.sleep) -> GameSession:
    """Build a session from the client settings."""
    return GameSession(
        face_count=settings.face_count,
        seed=settings.seed,
        sleep=sleep,
        animation_rolls=settings.animation_rolls,
        base_delay=settings.animation_base_delay,
        delay_factor=settings.animation_delay_factor,
    )


class DiceGameController(QObject):
    """
    Controller for the two-player dice duel.

    Owns a GameSession and emits Qt signals for UI updates. Rolls run as
    asyncio tasks on the running event loop (qasync in the app).

    Signals:
        die_face_changed: A die shows a new face (player_index, dice_index, value or None)
        die_enabled_changed: A die button is enabled/disabled (player_index, dice_index, enabled)
        controls_enabled_changed: Evaluate and reset are enabled/disabled (enabled)
        message_changed: Result text changed (text)
        game_event: Something worth logging happened (event_type, event_data)
        error_occurred: An error happened (error_message)
    """

    die_face_changed = pyqtSignal(int, int, object)
    die_enabled_changed = pyqtSignal(int, int, bool)
    controls_enabled_changed = pyqtSignal(bool)
    message_changed = pyqtSignal(str)
    game_event = pyqtSignal(str, dict)
    error_occurred = pyqtSignal(str)

    def __init__(self, session: Optional[GameSession] = None, parent=None):
        super().__init__(parent)

        self._session = session if session is not None else create_session()
        self._session.listener = _SignalListener(self)
        self._tasks: set[asyncio.Task] = set()

    @property
    def session(self) -> GameSession:
        """The game session driven by this controller."""
        return self._session

    @property
    def pending_rolls(self) -> set[asyncio.Task]:
        """Roll animations still in flight."""
        return set(self._tasks)

    def get_state(self) -> dict:
        return self._session.get_state()

    def _emit_event(self, event_type: str, data: dict) -> None:
        self.game_event.emit(event_type, data)

    # =========================================================================
    # Game Actions
    # =========================================================================

    def roll_die(self, player_index: int, dice_index: int) -> Optional[asyncio.Task]:
        """
        Start rolling a die.

        Returns:
            The animation task, or None if the roll was refused.
        """
        try:
            die = self._session.get_die(player_index, dice_index)
        except GameError as e:
            self.error_occurred.emit(str(e))
            return None

        if self._session.is_rolling(player_index, dice_index):
            self.error_occurred.emit("That die is still rolling")
            return None

        if die.is_settled:
            self.error_occurred.emit("That die has already been rolled - reset to roll again")
            return None

        task = asyncio.ensure_future(self._run_roll(player_index, dice_index))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_roll(self, player_index: int, dice_index: int) -> Optional[int]:
        try:
            value = await self._session.roll_die(player_index, dice_index)
        except GameError as e:
            logger.warning(f"Roll failed: {e}")
            self.error_occurred.emit(str(e))
            return None

        player = self._session.get_player(player_index)
        self._emit_event(GameEventType.DIE_ROLLED.value, {
            "player_index": player_index,
            "player_name": player.name,
            "dice_index": dice_index,
            "value": value,
            "total": player.total,
        })
        return value

    def reset_all(self) -> bool:
        """Clear all dice and the result."""
        try:
            self._session.reset_all()
        except GameError as e:
            self.error_occurred.emit(str(e))
            return False

        self._emit_event(GameEventType.DICE_RESET.value, {})
        return True

    def evaluate(self) -> EvaluationResult:
        """Compare both players' totals and publish the result."""
        result = self._session.evaluate()
        first, second = (player.total for player in self._session.players)
        self._emit_event(GameEventType.EVALUATED.value, {
            "outcome": result.outcome.value,
            "total": result.total,
            "message": result.message,
            "player1_total": first,
            "player2_total": second,
        })
        return result
