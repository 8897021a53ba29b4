"""
GUI for the dice duel.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
