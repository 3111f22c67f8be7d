"""
Command line interface for Minesweeper.

Usage:
    minesweeper easy
    minesweeper medium
    minesweeper hard
    minesweeper custom SIZE MINES [--seed N] [--no-color]

Coordinates are typed as ``row col``, 1-based, matching the labels
printed around the board.
"""
import argparse
from typing import Callable, List, Optional, Tuple

from .board import DIFFICULTIES, BoardConfig, GameState
from .errors import BoardError
from .renderer import (
    ANSI_CLEAR,
    format_banner,
    format_board,
    format_progress,
    paint,
)
from .session import Session

ANSI_PROMPT = "\033[33m"
QUIT_COMMANDS = ("q", "quit", "exit")


class InputError(ValueError):
    """User typed something that is not a usable coordinate pair."""


# ============================================================================
# Input Parsing
# ============================================================================

def parse_coordinates(text: str, size: int) -> Tuple[int, int]:
    """
    Parse a ``row col`` line into 0-based board coordinates.

    Args:
        text: Raw input line, 1-based and whitespace separated.
        size: Board size the coordinates must fit.

    Returns:
        (row, col) tuple, 0-based.

    Raises:
        InputError: If the line is empty, malformed or out of range.
    """
    parts = text.split()
    if not parts:
        raise InputError("No input")
    if len(parts) == 1:
        raise InputError("Not enough co-ords")
    if len(parts) > 2:
        raise InputError("Too many co-ords")

    row = _parse_number(parts[0], "row")
    col = _parse_number(parts[1], "col")

    if not (1 <= row <= size and 1 <= col <= size):
        raise InputError("co-ord values must be within the size of the grid!")

    return row - 1, col - 1


def _parse_number(text: str, name: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InputError(f"{name} value was not a valid number") from None


# ============================================================================
# Session Loop
# ============================================================================

def play(
    session: Session,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    color: bool = True,
) -> GameState:
    """
    Run the interactive loop until the game ends or input runs out.

    Args:
        session: Game to play.
        read_line: Function returning the next input line.
        write: Function printing one block of output.
        color: If True, add ANSI colour codes to the output.

    Returns:
        The game state when the loop stopped.
    """
    size = session.board.size
    write(paint("Enter row and column to reveal that cell", ANSI_PROMPT, color))
    write(paint(f"e.g: {size} {size}", ANSI_PROMPT, color))

    while not session.is_over:
        write(format_board(session.board, color=color))

        try:
            line = read_line("> ")
        except EOFError:
            break
        if line.strip().lower() in QUIT_COMMANDS:
            break

        try:
            row, col = parse_coordinates(line, size)
        except InputError as e:
            write(f"Whoops!: {e}")
            continue

        state = session.reveal(row, col)
        if state == GameState.PLAYING:
            if color:
                write(ANSI_CLEAR)
            write(format_progress(session.cells_revealed, session.cells_to_reveal))

    if session.is_over:
        write(format_board(
            session.board,
            reveal_mines=session.state == GameState.LOST,
            color=color,
        ))
        write(format_banner(session.state, color))

    return session.state


# ============================================================================
# Argument Parsing
# ============================================================================

def _add_common_options(
    parser: argparse.ArgumentParser, seed=None, no_color=False
) -> None:
    """Add the options accepted both before and after the subcommand."""
    parser.add_argument(
        "--seed", type=int, default=seed, help="Seed for mine placement"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=no_color,
        help="Disable coloured output",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per difficulty."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Minesweeper in the terminal",
    )
    _add_common_options(parser)

    # Suppressed defaults keep values given before the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, argparse.SUPPRESS, argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="difficulty", help="Board to play")

    for name, config in DIFFICULTIES.items():
        subparsers.add_parser(
            name,
            parents=[common],
            help=f"{config.size}x{config.size} board with {config.num_mines} mines",
        )

    custom_parser = subparsers.add_parser(
        "custom", parents=[common], help="SIZE x SIZE board with MINES mines"
    )
    custom_parser.add_argument("size", type=int, help="Rows and columns")
    custom_parser.add_argument("num_mines", type=int, help="Number of mines")

    return parser


def config_from_args(args: argparse.Namespace) -> BoardConfig:
    """
    Get the board configuration selected on the command line.

    Raises:
        BoardError: If the custom size or mine count is invalid.
    """
    if args.difficulty == "custom":
        return BoardConfig(args.size, args.num_mines)
    return DIFFICULTIES[args.difficulty]


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run a game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.difficulty is None:
        parser.print_help()
        return 2

    try:
        config = config_from_args(args)
    except BoardError as e:
        parser.error(str(e))

    session = Session(config, seed=args.seed)
    play(session, color=not args.no_color)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
