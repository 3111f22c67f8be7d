"""
Exceptions raised by the board engine.

All of them derive from ValueError so that callers validating a
configuration can keep catching ValueError.
"""


class BoardError(ValueError):
    """Base class for invalid board construction or access."""


class InvalidSizeError(BoardError):
    """Board size is smaller than 1."""


class TooManyMinesError(BoardError):
    """Mine count leaves no safe cell on the board (or is negative)."""


class OutOfBoundsError(BoardError, IndexError):
    """Coordinates fall outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {size}x{size} board"
        )
        self.row = row
        self.col = col
        self.size = size
