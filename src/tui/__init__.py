"""
Terminal front end for Minesweeper.

Provides curses rendering, key handling and the command-line entry point.
"""
from .controls import Action, KEY_MAP, action_for_key, dispatch
from .renderer import Style, cell_style

__all__ = [
    "Action",
    "KEY_MAP",
    "action_for_key",
    "dispatch",
    "Style",
    "cell_style",
]
