"""
Command-line interface for the terminal Minesweeper.

Usage:
    minesweeper [--height H] [--width W] [--mines M] [--seed S]
                [--log-file PATH] [--log-level LEVEL]
"""
import argparse
import logging
import random
from typing import List, Optional

from mines.board import DEFAULT_HEIGHT, DEFAULT_WIDTH, BoardConfig
from mines.session import GameSession

from .app import run

DESCRIPTION = (
    "A simple in-terminal minesweeper game. "
    "Uncover all the tiles that don't have a mine under them!"
)

CONTROLS = """\
Controls:
  arrow keys or h/j/k/l  move the cursor
  space or z             uncover a tile (or chord an uncovered number)
  f or x                 flag a tile
  n                      new game
  q                      quit

If you do not specify the number of mines, one sixth of the tiles will
contain mines. The first tile you uncover is never a mine. Once a game is
won or lost the board is frozen; press n to start a new one."""


def positive_int(text: str) -> int:
    """argparse type for integers greater than zero."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not a valid integer")
    if value < 1:
        raise argparse.ArgumentTypeError(f"{value} must be a positive integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description=DESCRIPTION,
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-H", "--height", type=positive_int, default=DEFAULT_HEIGHT,
        help="height of the game board in tiles",
    )
    parser.add_argument(
        "-w", "--width", type=positive_int, default=DEFAULT_WIDTH,
        help="width of the game board in tiles",
    )
    parser.add_argument(
        "-m", "--mines", type=positive_int, default=None,
        help="number of mines on the game board",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="seed for mine placement (default: random every run)",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="write log messages to this file",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="log level used with --log-file",
    )
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    """
    Send log records to a file, or nowhere.

    Curses owns the terminal, so nothing is logged to stderr.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def parse_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> BoardConfig:
    """Build a board config, exiting through the parser when invalid."""
    try:
        return BoardConfig(args.width, args.height, args.mines)
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and start the game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = parse_config(parser, args)

    configure_logging(args.log_file, args.log_level)
    session = GameSession(config, rng=random.Random(args.seed))
    run(session)


if __name__ == "__main__":
    main()
