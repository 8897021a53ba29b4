"""
GUI tests for the dice duel client.

Builds the real window on Qt's offscreen platform - no display required.

Run from project root: python -m pytest tests/test_gui -v
"""

import asyncio
import os
import sys
import unittest
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from client.controller import DiceGameController
from client.gui import MainWindow
from client.gui.widgets import PlayerDicePanel, face_text
from game_engine import GameSession


class ScriptedRandom:
    """Random source that returns a fixed sequence of values."""

    def __init__(self, values):
        self._values = list(values)

    def randint(self, low: int, high: int) -> int:
        return self._values.pop(0)


async def no_sleep(delay: float) -> None:
    pass


async def yielding_sleep(delay: float) -> None:
    await asyncio.sleep(0)


class GuiTestCase(unittest.TestCase):
    """Base test case with a QApplication."""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.app = QApplication.instance() or QApplication([])

    def make_window(self, values) -> MainWindow:
        session = GameSession(rng=ScriptedRandom(values), sleep=no_sleep, animation_rolls=1)
        window = MainWindow(DiceGameController(session))
        self.addCleanup(window.deleteLater)
        return window

    def roll_all(self, window: MainWindow) -> None:
        async def run():
            for player_index in range(2):
                for dice_index in range(3):
                    await window.controller.session.roll_die(player_index, dice_index)
        asyncio.run(run())


class TestFaceText(unittest.TestCase):
    """Die face rendering."""

    def test_unset_shows_question_mark(self):
        self.assertEqual(face_text(None), "?")

    def test_six_sided_uses_glyphs(self):
        self.assertEqual(face_text(1), "⚀")
        self.assertEqual(face_text(6), "⚅")

    def test_other_dice_show_numbers(self):
        self.assertEqual(face_text(17, 20), "17")
        self.assertEqual(face_text(2, 4), "2")


class TestPlayerDicePanel(GuiTestCase):
    """One player's dice."""

    def test_clicking_a_die_requests_roll(self):
        panel = PlayerDicePanel(1)
        self.addCleanup(panel.deleteLater)
        requested = []
        panel.roll_requested.connect(requested.append)

        panel.buttons[2].click()

        self.assertEqual(requested, [2])

    def test_total_shown_once_all_dice_set(self):
        panel = PlayerDicePanel(0, face_count=20)
        self.addCleanup(panel.deleteLater)
        panel.set_face(0, 10)
        panel.set_face(1, 5)
        self.assertEqual(panel._total_label.text(), "Total: ?")
        panel.set_face(2, 1)
        self.assertEqual(panel._total_label.text(), "Total: 16")
        self.assertEqual(panel.buttons[0].text(), "10")


class TestMainWindow(GuiTestCase):
    """Window wiring."""

    def test_rolled_dice_render_and_disable(self):
        window = self.make_window([3, 3, 4, 2, 3, 3])
        self.roll_all(window)

        left, right = window._panels
        self.assertEqual([b.text() for b in left.buttons], ["⚂", "⚂", "⚃"])
        self.assertFalse(any(b.isEnabled() for b in left.buttons + right.buttons))
        self.assertTrue(window._evaluate_btn.isEnabled())
        self.assertTrue(window._reset_btn.isEnabled())

    def test_evaluate_shows_winner(self):
        window = self.make_window([3, 3, 4, 2, 3, 3])
        self.roll_all(window)

        window._evaluate_btn.click()

        self.assertEqual(window._result_label.text(), "Player 1 wins with 10 points!")

    def test_reset_clears_table(self):
        window = self.make_window([1, 1, 1, 1, 1, 1])
        self.roll_all(window)
        window._evaluate_btn.click()

        window._reset_btn.click()

        self.assertEqual(window._result_label.text(), "")
        for panel in window._panels:
            self.assertEqual([b.text() for b in panel.buttons], ["?", "?", "?"])
            self.assertTrue(all(b.isEnabled() for b in panel.buttons))


class TestMainWindowClicks(unittest.IsolatedAsyncioTestCase):
    """Clicking dice drives the real controller tasks."""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.app = QApplication.instance() or QApplication([])

    async def test_click_disables_controls_until_roll_finishes(self):
        session = GameSession(seed=8, sleep=yielding_sleep)
        window = MainWindow(DiceGameController(session))
        self.addCleanup(window.deleteLater)
        die_button = window._panels[1].buttons[0]

        die_button.click()
        await asyncio.sleep(0)

        self.assertTrue(session.is_rolling(1, 0))
        self.assertFalse(die_button.isEnabled())
        self.assertFalse(window._evaluate_btn.isEnabled())
        self.assertFalse(window._reset_btn.isEnabled())

        await asyncio.gather(*window.controller.pending_rolls)

        self.assertTrue(window._evaluate_btn.isEnabled())
        self.assertTrue(window._reset_btn.isEnabled())
        self.assertFalse(die_button.isEnabled())
        self.assertNotEqual(die_button.text(), "?")
        self.assertEqual(die_button.face_value, session.get_die(1, 0).face_value)

    async def test_evaluate_while_rolling_shows_in_progress(self):
        session = GameSession(seed=8, sleep=yielding_sleep)
        window = MainWindow(DiceGameController(session))
        self.addCleanup(window.deleteLater)

        window._panels[0].buttons[2].click()
        await asyncio.sleep(0)
        self.assertFalse(window._evaluate_btn.isEnabled())

        window.controller.evaluate()

        self.assertEqual(window._result_label.text(), "Game in progress - roll all dice first.")
        await asyncio.gather(*window.controller.pending_rolls)


if __name__ == "__main__":
    unittest.main()
