"""
Game session for Minesweeper.

Ties a board to a cursor and drives the per-game lifecycle: mines are
generated on the first reveal, and a new game re-arms generation.
"""
import logging
import random
from typing import Optional

from .board import Board, BoardConfig, BoardStatus
from .cursor import Cursor, Direction

logger = logging.getLogger(__name__)


class GameSession:
    """
    One player's game: a board, a cursor and the first-reveal trigger.

    Every user action is a method call here. Once the game is won or
    lost, reveal and flag are ignored until ``new_game``.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or BoardConfig()
        self.board = Board(self.config, rng=rng or random.Random())
        self.cursor = Cursor()
        logger.info(
            "New %dx%d game with %d mines",
            self.config.width, self.config.height, self.config.num_mines,
        )

    # ========================================================================
    # Actions
    # ========================================================================

    def move_cursor(self, direction: Direction) -> bool:
        """Move the cursor one cell, clamped at the edges."""
        return self.cursor.move(direction, self.board.width, self.board.height)

    def reveal(self) -> int:
        """
        Reveal the cell under the cursor.

        Returns:
            Number of cells whose state changed.
        """
        if self.is_over:
            return 0

        x, y = self.cursor.position
        if not self.board.mines_generated:
            self.board.generate_mines(x, y)
            self.board.calculate_neighbors()
            logger.debug("Generated %d mines avoiding (%d, %d)",
                         self.board.num_mines, x, y)

        changed = self.board.reveal(x, y)
        logger.debug("Reveal at (%d, %d) changed %d cells", x, y, changed)
        if changed:
            self._log_outcome()
        return changed

    def flag(self) -> bool:
        """Toggle the flag under the cursor."""
        if self.is_over:
            return False
        x, y = self.cursor.position
        toggled = self.board.flag(x, y)
        logger.debug("Flag toggle at (%d, %d): %s", x, y, toggled)
        return toggled

    def new_game(self) -> None:
        """Clear the board; mines are regenerated on the next reveal."""
        self.board.reset()
        logger.info("Board reset for a new game")

    # ========================================================================
    # State
    # ========================================================================

    @property
    def status(self) -> BoardStatus:
        return self.board.compute_status()

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    def _log_outcome(self) -> None:
        status = self.status
        if status.is_lost:
            logger.info("Mine exploded revealing %s, game lost",
                        self.cursor.position)
        elif status.is_won:
            logger.info("All safe cells uncovered, game won")
