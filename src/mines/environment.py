"""
Gymnasium environment wrapper for Minesweeper.

Exposes the same cursor-driven actions a keyboard player has, so the
game can be driven programmatically.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import OBS_EXPLODED, OBS_FLAGGED
from .cursor import Cursor, Direction
from .session import GameSession
from .text import render_text


# ============================================================================
# Constants
# ============================================================================

ACTION_UP = 0
ACTION_DOWN = 1
ACTION_LEFT = 2
ACTION_RIGHT = 3
ACTION_REVEAL = 4
ACTION_FLAG = 5

MOVE_ACTIONS = {
    ACTION_UP: Direction.UP,
    ACTION_DOWN: Direction.DOWN,
    ACTION_LEFT: Direction.LEFT,
    ACTION_RIGHT: Direction.RIGHT,
}

WIN_REWARD = 10.0
LOSS_REWARD = -10.0
NO_EFFECT_PENALTY = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class CursorMinesweeperEnv(gym.Env):
    """
    Gymnasium environment for cursor-driven Minesweeper.

    Observation:
        Dict with
        - "board": 2D int8 array, -1 covered, -2 flagged,
          0-8 uncovered count, 9 exploded mine
        - "cursor": (x, y) of the cursor

    Actions:
        0-3 move the cursor up/down/left/right, 4 reveals and
        5 toggles a flag at the cursor.

    Rewards:
        - +1 per cell uncovered by a reveal
        - +10 extra for winning the game
        - -10 for exploding a mine
        - -0.1 for a reveal or flag that changed nothing
        - 0 for cursor moves
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 20x20, one sixth mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Dict({
            "board": spaces.Box(
                low=OBS_FLAGGED,
                high=OBS_EXPLODED,
                shape=(self.config.height, self.config.width),
                dtype=np.int8,
            ),
            "cursor": spaces.Box(
                low=0,
                high=np.array(
                    [self.config.width - 1, self.config.height - 1],
                    dtype=np.int64,
                ),
                shape=(2,),
                dtype=np.int64,
            ),
        })
        self.action_space = spaces.Discrete(6)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.board.rng = random.Random(
            int(self.np_random.integers(2**32))
        )
        self.session.new_game()
        self.session.cursor = Cursor()
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")
        self._steps += 1

        reward = self._apply(int(action))
        terminated = self.session.is_over

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _apply(self, action: int) -> float:
        """Perform an action and compute its reward."""
        if action in MOVE_ACTIONS:
            self.session.move_cursor(MOVE_ACTIONS[action])
            return 0.0

        if action == ACTION_FLAG:
            return 0.0 if self.session.flag() else NO_EFFECT_PENALTY

        changed = self.session.reveal()
        if changed == 0:
            return NO_EFFECT_PENALTY
        status = self.session.status
        if status.is_lost:
            return LOSS_REWARD
        if status.is_won:
            return float(changed) + WIN_REWARD
        return float(changed)

    def _get_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.session.board.get_observation(),
            "cursor": np.array(self.session.cursor.position, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        status = self.session.status
        return {
            "steps": self._steps,
            "mines_remaining": status.mines_remaining,
            "cells_remaining": status.cells_remaining,
            "exploded": status.exploded_present,
            "won": status.is_won,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board, cursor and status line as text."""
        return render_text(self.session.board, self.session.cursor)
