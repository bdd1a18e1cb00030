"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible mine layouts."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 20x20 board with 66 mines."""
    return Board(BoardConfig(), rng=rng)


@pytest.fixture
def small_board(rng: random.Random) -> Board:
    """Create a small 3x3 board with 1 mine for testing."""
    return Board(BoardConfig(3, 3, 1), rng=rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    board = Board(BoardConfig(5, 5, 0))
    board.generate_mines(0, 0)
    board.calculate_neighbors()
    return board


@pytest.fixture
def planted_board() -> Callable[..., Board]:
    """
    Factory for boards with mines at fixed positions.

    The board's mine count matches the planted positions and
    neighbor counts are already calculated.
    """
    def make(
        width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> Board:
        mines = list(mines)
        board = Board(BoardConfig(width, height, len(mines)))
        for x, y in mines:
            board.get_cell(x, y).is_mine = True
        board.calculate_neighbors()
        return board

    return make


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(rng: random.Random) -> GameSession:
    """Create a 9x9 session with 10 mines."""
    return GameSession(BoardConfig(9, 9, 10), rng=rng)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an uncovered cell with neighboring mines."""
    cell = Cell(neighbor_count=3)
    cell.uncover()
    return cell
