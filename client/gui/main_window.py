"""
Main application window.

Lays out both players' dice and coordinates between the controller and UI.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
)
from PyQt6.QtCore import Qt

from client.config import settings
from client.controller import DiceGameController
from client.gui.styles import MAIN_STYLESHEET, WIN_COLOR, TIE_COLOR, PENDING_COLOR
from client.gui.widgets import PlayerDicePanel, EventLog
from shared.constants import PLAYER_COUNT
from shared.enums import GameEventType, GameOutcome


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    Renders the controller's signals and forwards clicks back to it.
    """

    def __init__(self, controller: Optional[DiceGameController] = None):
        super().__init__()

        self.setWindowTitle("Dice Duel")
        self.setMinimumSize(settings.window_width, settings.window_height)
        self.setStyleSheet(MAIN_STYLESHEET)

        self._controller = controller if controller is not None else DiceGameController(parent=self)

        self._setup_ui()
        self._connect_controller_signals()

    @property
    def controller(self) -> DiceGameController:
        return self._controller

    def _setup_ui(self) -> None:
        """Set up the main UI."""
        central = QWidget()
        central.setObjectName("centralWidget")
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        # Dice, left player then right player
        table = QHBoxLayout()
        face_count = self._controller.session.players[0].dice[0].face_count
        self._panels: list[PlayerDicePanel] = []
        for player_index in range(PLAYER_COUNT):
            panel = PlayerDicePanel(player_index, face_count)
            panel.roll_requested.connect(
                lambda dice_index, p=player_index: self._on_roll_requested(p, dice_index)
            )
            table.addWidget(panel)
            self._panels.append(panel)
        layout.addLayout(table)

        # Controls
        controls = QHBoxLayout()

        self._evaluate_btn = QPushButton("🏆 Evaluate")
        self._evaluate_btn.setObjectName("actionButton")
        self._evaluate_btn.clicked.connect(self._on_evaluate)
        controls.addWidget(self._evaluate_btn)

        self._reset_btn = QPushButton("🔄 Reset")
        self._reset_btn.setObjectName("dangerButton")
        self._reset_btn.clicked.connect(self._on_reset)
        controls.addWidget(self._reset_btn)

        layout.addLayout(controls)

        # Result
        self._result_label = QLabel()
        self._result_label.setObjectName("resultLabel")
        self._result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._result_label)

        # Log
        self._event_log = EventLog()
        layout.addWidget(self._event_log, 1)
        self._event_log.add_system_message("Click a die to roll it")

    def _connect_controller_signals(self) -> None:
        """Connect controller signals."""
        self._controller.die_face_changed.connect(self._on_die_face_changed)
        self._controller.die_enabled_changed.connect(self._on_die_enabled_changed)
        self._controller.controls_enabled_changed.connect(self._on_controls_enabled_changed)
        self._controller.message_changed.connect(self._result_label.setText)
        self._controller.game_event.connect(self._on_game_event)
        self._controller.error_occurred.connect(self._on_error)

    # =========================================================================
    # Controller -> UI
    # =========================================================================

    def _on_die_face_changed(self, player_index: int, dice_index: int, face_value) -> None:
        self._panels[player_index].set_face(dice_index, face_value)

    def _on_die_enabled_changed(self, player_index: int, dice_index: int, enabled: bool) -> None:
        self._panels[player_index].set_die_enabled(dice_index, enabled)

    def _on_controls_enabled_changed(self, enabled: bool) -> None:
        self._evaluate_btn.setEnabled(enabled)
        self._reset_btn.setEnabled(enabled)

    def _on_game_event(self, event_type: str, data: dict) -> None:
        self._event_log.add_game_event(event_type, data)

        if event_type == GameEventType.EVALUATED.value:
            outcome = data.get("outcome")
            if outcome == GameOutcome.IN_PROGRESS.value:
                color = PENDING_COLOR
            elif outcome == GameOutcome.TIE.value:
                color = TIE_COLOR
            else:
                color = WIN_COLOR
            self._result_label.setStyleSheet(f"color: {color.name()};")

    def _on_error(self, message: str) -> None:
        logger.warning(message)
        self._event_log.add_error_message(message)

    # =========================================================================
    # UI -> Controller
    # =========================================================================

    def _on_roll_requested(self, player_index: int, dice_index: int) -> None:
        self._controller.roll_die(player_index, dice_index)

    def _on_evaluate(self) -> None:
        self._controller.evaluate()

    def _on_reset(self) -> None:
        self._controller.reset_all()
