"""
Cursor module for the Minesweeper engine.

The cursor is the single selected position that reveal and flag
actions apply to. It never leaves the board.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cursor movement directions as (dx, dy) offsets."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


@dataclass
class Cursor:
    """
    Selected board position.

    Attributes:
        x: Column, in [0, width).
        y: Row, in [0, height).
    """

    x: int = 0
    y: int = 0

    def move(self, direction: Direction, width: int, height: int) -> bool:
        """
        Move one cell in a direction, stopping at the board edge.

        Returns:
            True if the cursor moved, False if it was already at the edge.
        """
        dx, dy = direction.delta
        new_x = min(max(self.x + dx, 0), width - 1)
        new_y = min(max(self.y + dy, 0), height - 1)
        moved = (new_x, new_y) != (self.x, self.y)
        self.x, self.y = new_x, new_y
        return moved

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y
