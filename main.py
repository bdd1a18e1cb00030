#!/usr/bin/env python3
"""
Terminal Minesweeper - main entry point.

Usage:
    python main.py [--height H] [--width W] [--mines M] [--seed S]
"""
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tui.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
