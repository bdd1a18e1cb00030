"""
Curses application loop.

Reads one key at a time (blocking), applies it to the session and
redraws. Each key is handled to completion before the next is read.
"""
import curses
import logging

from mines.session import GameSession

from .controls import action_for_key, dispatch
from .renderer import draw, init_colors

logger = logging.getLogger(__name__)


def _setup_screen(stdscr) -> None:
    """Configure the terminal for the game."""
    curses.start_color()
    curses.use_default_colors()
    stdscr.keypad(True)
    stdscr.timeout(-1)
    stdscr.leaveok(True)
    stdscr.scrollok(False)
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")


def play(stdscr, session: GameSession) -> None:
    """
    Run the input, update, render loop until the player quits.

    Args:
        stdscr: Screen provided by ``curses.wrapper``.
        session: Game session to drive.
    """
    _setup_screen(stdscr)
    attrs = init_colors()

    draw(stdscr, session.board, session.cursor, attrs)
    stdscr.refresh()

    while True:
        key = stdscr.getch()
        action = action_for_key(key)
        if action is None:
            continue
        if not dispatch(session, action):
            logger.info("Player quit")
            break
        draw(stdscr, session.board, session.cursor, attrs)
        stdscr.refresh()


def run(session: GameSession) -> None:
    """Play a session in the terminal, restoring it on exit."""
    curses.wrapper(play, session)
