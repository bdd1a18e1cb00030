"""
Plain-text view of a Minesweeper board.

Each cell is drawn as a spacer column followed by its symbol, with the
status line underneath. Mines only show once they have exploded.
"""
from typing import Optional

from .board import Board, BoardStatus
from .cell import Cell, CellState
from .cursor import Cursor


COVERED_SYMBOL = "#"
FLAGGED_SYMBOL = "F"
EXPLODED_SYMBOL = "*"
EMPTY_SYMBOL = " "
CURSOR_MARK = ">"

# Each cell takes two columns: a spacer and the symbol
CELL_WIDTH = 2


def cell_symbol(cell: Cell) -> str:
    """Character shown for a cell."""
    if cell.state == CellState.COVERED:
        return COVERED_SYMBOL
    if cell.state == CellState.FLAGGED:
        return FLAGGED_SYMBOL
    if cell.state == CellState.EXPLODED:
        return EXPLODED_SYMBOL
    if cell.neighbor_count == 0:
        return EMPTY_SYMBOL
    return str(cell.neighbor_count)


def status_text(status: BoardStatus) -> str:
    """Status line shown under the board."""
    if status.is_lost:
        return "Game Over"
    if status.is_won:
        return "You Win!"
    return f"Unflagged Mines: {status.mines_remaining}"


def render_text(board: Board, cursor: Optional[Cursor] = None) -> str:
    """
    Render the board and status line as a string.

    The cursor cell, if given, has ``>`` in its spacer column.
    """
    selected = cursor.position if cursor is not None else None
    lines = []
    for y, row in enumerate(board.rows()):
        line = ""
        for x, cell in enumerate(row):
            spacer = CURSOR_MARK if (x, y) == selected else " "
            line += spacer + cell_symbol(cell)
        lines.append(line)
    lines.append("")
    lines.append(status_text(board.compute_status()))
    return "\n".join(lines)
