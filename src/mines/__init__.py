"""
Minesweeper engine package.

Provides the board engine (cell state, mine placement, neighbor counts,
reveal and flag logic), the cursor, the game session and a text view.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    BoardStatus,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    default_mine_count,
)
from .cursor import Cursor, Direction
from .session import GameSession
from .text import cell_symbol, render_text, status_text
from .environment import CursorMinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BoardStatus",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "default_mine_count",
    "Cursor",
    "Direction",
    "GameSession",
    "cell_symbol",
    "render_text",
    "status_text",
    "CursorMinesweeperEnv",
]
