#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py easy
    python main.py medium
    python main.py hard
    python main.py custom SIZE MINES [--seed N] [--no-color]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
