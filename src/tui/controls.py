"""
Keyboard controls for the terminal Minesweeper.

Arrow keys or vim keys move, space or z reveals, f or x flags,
n starts a new game and q quits.
"""
import curses
from enum import Enum, auto
from typing import Dict, Optional

from mines.cursor import Direction
from mines.session import GameSession


class Action(Enum):
    """User actions a key can map to."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    REVEAL = auto()
    FLAG = auto()
    NEW_GAME = auto()
    QUIT = auto()


MOVES = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}

KEY_MAP: Dict[int, Action] = {
    curses.KEY_UP: Action.MOVE_UP,
    ord("k"): Action.MOVE_UP,
    curses.KEY_DOWN: Action.MOVE_DOWN,
    ord("j"): Action.MOVE_DOWN,
    curses.KEY_LEFT: Action.MOVE_LEFT,
    ord("h"): Action.MOVE_LEFT,
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    ord("l"): Action.MOVE_RIGHT,
    ord(" "): Action.REVEAL,
    ord("z"): Action.REVEAL,
    ord("f"): Action.FLAG,
    ord("x"): Action.FLAG,
    ord("n"): Action.NEW_GAME,
    ord("q"): Action.QUIT,
}


def action_for_key(key: int) -> Optional[Action]:
    """Look up the action bound to a key code, or None."""
    return KEY_MAP.get(key)


def dispatch(session: GameSession, action: Action) -> bool:
    """
    Apply an action to the session.

    Returns:
        False when the action is QUIT, True otherwise.
    """
    if action == Action.QUIT:
        return False
    if action in MOVES:
        session.move_cursor(MOVES[action])
    elif action == Action.REVEAL:
        session.reveal()
    elif action == Action.FLAG:
        session.flag()
    elif action == Action.NEW_GAME:
        session.new_game()
    return True
