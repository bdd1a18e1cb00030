"""
Renderer for the terminal Minesweeper.

Maps each cell to a symbol and a display style, draws the board with
curses and writes the status line underneath. Symbols and the status
text come from ``mines.text``.
"""
import curses
from enum import Enum, auto
from typing import Dict, Tuple

from mines.board import Board
from mines.cell import Cell, CellState
from mines.cursor import Cursor
from mines.text import CELL_WIDTH, cell_symbol, status_text


# ============================================================================
# Styles
# ============================================================================

STATUS_WIDTH = 24


class Style(Enum):
    """Display styles, one curses color pair each."""

    UNSELECTED = auto()
    SELECTED = auto()
    EXPLODED = auto()
    FLAGGED = auto()
    FLAGGED_SELECTED = auto()
    ONE = auto()
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    ONE_SELECTED = auto()
    TWO_SELECTED = auto()
    THREE_SELECTED = auto()
    FOUR_SELECTED = auto()
    FIVE_SELECTED = auto()
    SIX_SELECTED = auto()
    SEVEN_SELECTED = auto()
    EIGHT_SELECTED = auto()


NUMBER_STYLES = {
    1: Style.ONE,
    2: Style.TWO,
    3: Style.THREE,
    4: Style.FOUR,
    5: Style.FIVE,
    6: Style.SIX,
    7: Style.SEVEN,
    8: Style.EIGHT,
}

SELECTED_NUMBER_STYLES = {
    1: Style.ONE_SELECTED,
    2: Style.TWO_SELECTED,
    3: Style.THREE_SELECTED,
    4: Style.FOUR_SELECTED,
    5: Style.FIVE_SELECTED,
    6: Style.SIX_SELECTED,
    7: Style.SEVEN_SELECTED,
    8: Style.EIGHT_SELECTED,
}

# Foreground/background per style; selected numbers sit on white
NUMBER_COLORS = {
    1: "COLOR_BLUE",
    2: "COLOR_GREEN",
    3: "COLOR_RED",
    4: "COLOR_BLUE",
    5: "COLOR_MAGENTA",
    6: "COLOR_CYAN",
    7: "COLOR_YELLOW",
    8: "COLOR_RED",
}

COLOR_SCHEME: Dict[Style, Tuple[str, str]] = {
    Style.UNSELECTED: ("COLOR_WHITE", "COLOR_BLACK"),
    Style.SELECTED: ("COLOR_GREEN", "COLOR_WHITE"),
    Style.EXPLODED: ("COLOR_WHITE", "COLOR_RED"),
    Style.FLAGGED: ("COLOR_RED", "COLOR_BLACK"),
    Style.FLAGGED_SELECTED: ("COLOR_RED", "COLOR_WHITE"),
}
COLOR_SCHEME.update(
    {NUMBER_STYLES[n]: (color, "COLOR_BLACK") for n, color in NUMBER_COLORS.items()}
)
COLOR_SCHEME.update(
    {SELECTED_NUMBER_STYLES[n]: (color, "COLOR_WHITE")
     for n, color in NUMBER_COLORS.items()}
)


def cell_style(cell: Cell, selected: bool) -> Style:
    """Display style for a cell, given whether the cursor is on it."""
    if cell.state == CellState.EXPLODED:
        return Style.EXPLODED
    if cell.state == CellState.FLAGGED:
        return Style.FLAGGED_SELECTED if selected else Style.FLAGGED
    if cell.state == CellState.UNCOVERED and cell.neighbor_count > 0:
        if selected:
            return SELECTED_NUMBER_STYLES[cell.neighbor_count]
        return NUMBER_STYLES[cell.neighbor_count]
    return Style.SELECTED if selected else Style.UNSELECTED


# ============================================================================
# Curses
# ============================================================================

def init_colors() -> Dict[Style, int]:
    """
    Register one curses color pair per style.

    Must run after ``curses.start_color()``.

    Returns:
        Mapping of style to curses attribute.
    """
    attrs = {}
    for pair_number, style in enumerate(Style, start=1):
        foreground, background = COLOR_SCHEME[style]
        curses.init_pair(
            pair_number,
            getattr(curses, foreground),
            getattr(curses, background),
        )
        attrs[style] = curses.color_pair(pair_number)
    return attrs


def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """addstr that ignores curses errors when writing past the screen edge."""
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def draw(window, board: Board, cursor: Cursor, attrs: Dict[Style, int]) -> None:
    """
    Draw the board and status line onto a curses window.

    Args:
        window: Curses window to draw on.
        board: Board to draw.
        cursor: Current cursor.
        attrs: Style to attribute mapping from ``init_colors``.
    """
    spacer_attr = attrs[Style.UNSELECTED]
    for y, row in enumerate(board.rows()):
        for x, cell in enumerate(row):
            selected = (x, y) == cursor.position
            column = CELL_WIDTH * x
            safe_addstr(window, y, column, " ", spacer_attr)
            safe_addstr(
                window, y, column + 1, cell_symbol(cell),
                attrs[cell_style(cell, selected)],
            )

    # Padding overwrites a longer status from the previous frame
    status = status_text(board.compute_status())
    width = max(board.width * CELL_WIDTH, STATUS_WIDTH)
    safe_addstr(window, board.height + 1, 0, status.ljust(width), spacer_attr)
