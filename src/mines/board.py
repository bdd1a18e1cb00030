"""
Board module for the Minesweeper engine.

Implements the grid of cells, mine placement, neighbor counts,
the reveal/chord/flag transitions and the derived game status.
"""
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20

# Without an explicit count, one cell in six holds a mine
MINE_RATIO = 6


def default_mine_count(width: int, height: int) -> int:
    """Mine count used when the caller does not supply one."""
    return (width * height) // MINE_RATIO


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place (default: one sixth of the cells).
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    num_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Fill in the default mine count and validate."""
        self._validate_dimensions()
        if self.num_mines is None:
            self.num_mines = default_mine_count(self.width, self.height)
        self._validate_mines()

    def _validate_dimensions(self) -> None:
        """Ensure width and height are positive integers."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Board {name} must be an integer, got {value!r}")
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")

    def _validate_mines(self) -> None:
        """Ensure the mine count leaves at least one safe cell."""
        if isinstance(self.num_mines, bool) or not isinstance(self.num_mines, int):
            raise ValueError(
                f"Number of mines must be an integer, got {self.num_mines!r}"
            )
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


@dataclass(frozen=True)
class BoardStatus:
    """
    Snapshot of the derived game status.

    Attributes:
        mines_remaining: Mines minus flags placed (may go negative).
        cells_remaining: Safe cells still to uncover.
        exploded_present: Whether any mine has exploded.
    """

    mines_remaining: int
    cells_remaining: int
    exploded_present: bool

    @property
    def is_won(self) -> bool:
        """All safe cells uncovered and nothing exploded."""
        return self.cells_remaining == 0 and not self.exploded_present

    @property
    def is_lost(self) -> bool:
        """A mine has exploded."""
        return self.exploded_present

    @property
    def is_over(self) -> bool:
        """Game has been won or lost."""
        return self.is_won or self.is_lost


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Mines are not placed at construction time:
    the owner calls ``generate_mines`` and ``calculate_neighbors`` once
    the first reveal position is known.

    Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_generated: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of default cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def reset(self) -> None:
        """Return every cell to its default state and re-arm generation."""
        for row in self._grid:
            for cell in row:
                cell.clear()
        self._mines_generated = False

    def generate_mines(self, exclude_x: int, exclude_y: int) -> None:
        """
        Place mines at random, never on the excluded position.

        Positions are drawn uniformly and redrawn when they hit the
        excluded cell or an existing mine. Must be called once per game,
        on a freshly reset board.

        Args:
            exclude_x: Column to keep mine-free.
            exclude_y: Row to keep mine-free.

        Raises:
            ValueError: If the mines cannot fit around the excluded cell.
        """
        self._require_position(exclude_x, exclude_y)
        if self.config.num_mines >= self.config.total_cells:
            raise ValueError(
                f"Cannot place {self.config.num_mines} mines on "
                f"{self.config.total_cells} cells with one cell excluded"
            )

        placed = 0
        while placed < self.config.num_mines:
            x = self.rng.randrange(self.config.width)
            y = self.rng.randrange(self.config.height)
            if (x, y) == (exclude_x, exclude_y):
                continue
            cell = self._grid[y][x]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1
        self._mines_generated = True

    def calculate_neighbors(self) -> None:
        """Set every cell's neighbor count from the current mine layout."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                self._grid[y][x].neighbor_count = self._count_neighbors(
                    x, y, lambda cell: cell.is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for the up to 8 surrounding cells.
        """
        result = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.is_valid_position(new_x, new_y):
                    result.append((new_x, new_y))
        return result

    def _count_neighbors(self, x: int, y: int, predicate) -> int:
        """Count neighbors of (x, y) matching a predicate."""
        return sum(
            1 for nx, ny in self.neighbors(x, y) if predicate(self._grid[ny][nx])
        )

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _require_position(self, x: int, y: int) -> None:
        """Raise IndexError for coordinates outside the board."""
        if not self.is_valid_position(x, y):
            raise IndexError(
                f"Position ({x}, {y}) outside "
                f"{self.config.width}x{self.config.height} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> int:
        """
        Reveal the cell at the given position.

        A covered cell is uncovered (or explodes if it is a mine), and a
        zero cell cascades into its neighbors. An uncovered cell is
        chorded: if the flags around it match its count, every covered
        neighbor is revealed. Flagged and exploded cells are left alone.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Number of cells whose state changed.
        """
        self._require_position(x, y)
        cell = self._grid[y][x]
        if cell.state == CellState.COVERED:
            return self._uncover_region(x, y)
        if cell.state == CellState.UNCOVERED:
            return self._chord(x, y)
        return 0

    def _uncover_region(self, x: int, y: int) -> int:
        """Uncover a covered cell, flooding through zero-count cells."""
        changed = 0
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            cell = self._grid[cy][cx]
            if not cell.is_covered:
                continue
            cell.uncover()
            changed += 1
            if cell.is_uncovered and cell.neighbor_count == 0:
                pending.extend(
                    (nx, ny) for nx, ny in self.neighbors(cx, cy)
                    if self._grid[ny][nx].is_covered
                )
        return changed

    def _chord(self, x: int, y: int) -> int:
        """Reveal covered neighbors when adjacent flags match the count."""
        cell = self._grid[y][x]
        flags = self._count_neighbors(x, y, lambda neighbor: neighbor.is_flagged)
        if flags != cell.neighbor_count:
            return 0

        # Flags are trusted as placed; a wrong flag can uncover a mine here
        changed = 0
        for nx, ny in self.neighbors(x, y):
            if self._grid[ny][nx].is_covered:
                changed += self._uncover_region(nx, ny)
        return changed

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False otherwise.
        """
        self._require_position(x, y)
        return self._grid[y][x].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def num_mines(self) -> int:
        """Total mines on the board."""
        return self.config.num_mines

    @property
    def mines_generated(self) -> bool:
        """Whether mines have been placed for the current game."""
        return self._mines_generated

    def compute_status(self) -> BoardStatus:
        """
        Derive the game status from a full scan of the grid.

        Returns:
            BoardStatus with remaining mines, remaining safe cells and
            whether a mine has exploded.
        """
        flagged = 0
        uncovered = 0
        exploded = False
        for cell in self.iter_cells():
            if cell.state == CellState.FLAGGED:
                flagged += 1
            elif cell.state == CellState.UNCOVERED:
                uncovered += 1
            elif cell.state == CellState.EXPLODED:
                exploded = True
        return BoardStatus(
            mines_remaining=self.config.num_mines - flagged,
            cells_remaining=self.config.safe_cells - uncovered,
            exploded_present=exploded,
        )

    def get_cell(self, x: int, y: int) -> Cell:
        """Get cell at position."""
        self._require_position(x, y)
        return self._grid[y][x]

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        """Iterate over rows of cells, top to bottom."""
        for row in self._grid:
            yield tuple(row)

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._grid:
            yield from row

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = covered
                -2 = flagged
                0-8 = uncovered with neighbor count
                9 = exploded mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                obs[y, x] = cell.to_observation()
        return obs
