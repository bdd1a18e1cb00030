"""
Unit tests for Cell class.

Tests cell defaults, the allowed state transitions and observation values.
"""
import pytest
from mines import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_covered(self) -> None:
        """New cell should be covered by default."""
        cell = Cell()
        assert cell.state == CellState.COVERED
        assert cell.is_covered is True

    def test_default_cell_has_zero_neighbors(self) -> None:
        """New cell should have no neighboring mines by default."""
        assert Cell().neighbor_count == 0


# ============================================================================
# Cell Uncover Tests
# ============================================================================

class TestCellUncover:
    """Test cell uncover behavior."""

    def test_uncover_safe_cell(self, covered_cell: Cell) -> None:
        """Uncovering a safe cell makes it uncovered."""
        assert covered_cell.uncover() == CellState.UNCOVERED
        assert covered_cell.is_uncovered is True

    def test_uncover_mine_explodes(self, mine_cell: Cell) -> None:
        """Uncovering a mine makes it exploded."""
        assert mine_cell.uncover() == CellState.EXPLODED
        assert mine_cell.is_exploded is True

    def test_uncover_twice_raises(self, numbered_cell: Cell) -> None:
        """Uncovered is terminal."""
        with pytest.raises(ValueError, match="UNCOVERED"):
            numbered_cell.uncover()

    def test_uncover_flagged_raises(self, covered_cell: Cell) -> None:
        """A flagged cell must be unflagged before uncovering."""
        covered_cell.toggle_flag()
        with pytest.raises(ValueError, match="FLAGGED"):
            covered_cell.uncover()


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flag toggling."""

    def test_flag_then_unflag(self, covered_cell: Cell) -> None:
        """Flag toggles between covered and flagged."""
        assert covered_cell.toggle_flag() is True
        assert covered_cell.is_flagged is True
        assert covered_cell.toggle_flag() is True
        assert covered_cell.is_covered is True

    def test_flag_uncovered_cell_fails(self, numbered_cell: Cell) -> None:
        """Uncovered cells cannot be flagged."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_uncovered is True

    def test_flag_exploded_cell_fails(self, mine_cell: Cell) -> None:
        """Exploded cells cannot be flagged."""
        mine_cell.uncover()
        assert mine_cell.toggle_flag() is False
        assert mine_cell.is_exploded is True


# ============================================================================
# Cell Clear and Observation Tests
# ============================================================================

class TestCellClear:
    """Test returning a cell to defaults."""

    def test_clear_resets_everything(self) -> None:
        cell = Cell(is_mine=True, neighbor_count=4)
        cell.uncover()
        cell.clear()
        assert cell == Cell()


class TestCellObservation:
    """Test observation values."""

    def test_covered_mine_is_hidden(self, mine_cell: Cell) -> None:
        """A covered mine looks like any covered cell."""
        assert mine_cell.to_observation() == -1

    def test_flagged_observation(self, covered_cell: Cell) -> None:
        covered_cell.toggle_flag()
        assert covered_cell.to_observation() == -2

    def test_uncovered_shows_count(self, numbered_cell: Cell) -> None:
        assert numbered_cell.to_observation() == 3

    def test_exploded_observation(self, mine_cell: Cell) -> None:
        mine_cell.uncover()
        assert mine_cell.to_observation() == 9
