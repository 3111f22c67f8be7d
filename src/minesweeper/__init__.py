"""
Minesweeper game module.

Provides core game logic including board management, cell content and
the game session, plus text rendering for the terminal.
"""
from .cell import Cell, CellContent, ContentKind
from .board import (
    Board,
    BoardConfig,
    GameState,
    RevealOutcome,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
    game_state,
    new_board,
)
from .errors import BoardError, InvalidSizeError, OutOfBoundsError, TooManyMinesError
from .session import Session

__all__ = [
    "Cell",
    "CellContent",
    "ContentKind",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealOutcome",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "game_state",
    "new_board",
    "BoardError",
    "InvalidSizeError",
    "OutOfBoundsError",
    "TooManyMinesError",
    "Session",
]
