"""
Cell module for the Minesweeper engine.

A cell knows whether it holds a mine, how many of its neighbors do,
and which of the four display states it is in.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell."""

    COVERED = auto()
    UNCOVERED = auto()
    FLAGGED = auto()
    EXPLODED = auto()


# Observation codes shared by the board and the environment
OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_EXPLODED = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        neighbor_count: Count of mines in neighboring cells (0-8).
        state: Current state (covered, uncovered, flagged or exploded).

    Legal transitions are COVERED -> UNCOVERED, COVERED -> EXPLODED,
    COVERED -> FLAGGED and FLAGGED -> COVERED. UNCOVERED and EXPLODED
    stay put until ``clear()``.
    """

    is_mine: bool = False
    neighbor_count: int = 0
    state: CellState = CellState.COVERED

    def uncover(self) -> CellState:
        """
        Uncover this covered cell.

        Returns:
            The new state: EXPLODED for a mine, UNCOVERED otherwise.

        Raises:
            ValueError: If the cell is not covered.
        """
        if self.state != CellState.COVERED:
            raise ValueError(f"Cannot uncover a {self.state.name} cell")
        self.state = CellState.EXPLODED if self.is_mine else CellState.UNCOVERED
        return self.state

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered or exploded.
        """
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
        else:
            return False
        return True

    def clear(self) -> None:
        """Return the cell to its default state."""
        self.is_mine = False
        self.neighbor_count = 0
        self.state = CellState.COVERED

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.state == CellState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_exploded(self) -> bool:
        """Check if cell is an exploded mine."""
        return self.state == CellState.EXPLODED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Uncovered cell with neighbor mine count
            9: Exploded mine

        Covered and flagged cells never reveal whether they hold a mine.
        """
        if self.state == CellState.COVERED:
            return OBS_COVERED
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state == CellState.EXPLODED:
            return OBS_EXPLODED
        return self.neighbor_count
