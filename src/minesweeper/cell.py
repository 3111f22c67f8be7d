"""
Cell module for Minesweeper game.

Represents individual cells on the game board: whether they have been
revealed and what they contain (a mine, nothing, or a neighbour count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MAX_NEIGHBOURS = 8


class ContentKind(Enum):
    """Possible kinds of cell content."""

    MINE = auto()
    EMPTY = auto()
    NEAR_MINE = auto()


# ============================================================================
# Cell Content
# ============================================================================

@dataclass(frozen=True)
class CellContent:
    """
    What lies under a cell.

    A closed variant over Mine, Empty and NearMine(count). Build values
    with the ``mine()``, ``empty()`` and ``near_mine()`` constructors.

    Attributes:
        kind: Which variant this is.
        count: Neighbouring mine count, 1-8 for NEAR_MINE and 0 otherwise.
    """

    kind: ContentKind = ContentKind.EMPTY
    count: int = 0

    def __post_init__(self) -> None:
        """Validate the count against the kind."""
        if self.kind == ContentKind.NEAR_MINE:
            if not 1 <= self.count <= MAX_NEIGHBOURS:
                raise ValueError(
                    f"NearMine count must be 1-{MAX_NEIGHBOURS}, got {self.count}"
                )
        elif self.count != 0:
            raise ValueError(f"{self.kind.name} content cannot carry a count")

    @classmethod
    def mine(cls) -> "CellContent":
        return cls(ContentKind.MINE)

    @classmethod
    def empty(cls) -> "CellContent":
        return cls(ContentKind.EMPTY)

    @classmethod
    def near_mine(cls, count: int) -> "CellContent":
        return cls(ContentKind.NEAR_MINE, count)

    @classmethod
    def from_count(cls, count: int) -> "CellContent":
        """Empty for a zero count, NearMine otherwise."""
        if count == 0:
            return cls.empty()
        return cls.near_mine(count)

    @property
    def is_mine(self) -> bool:
        return self.kind == ContentKind.MINE

    @property
    def is_empty(self) -> bool:
        return self.kind == ContentKind.EMPTY

    @property
    def is_near_mine(self) -> bool:
        return self.kind == ContentKind.NEAR_MINE


MINE = CellContent.mine()
EMPTY = CellContent.empty()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        content: What the cell holds (mine, empty or a neighbour count).
        revealed: Whether the player has uncovered this cell.
    """

    content: CellContent = EMPTY
    revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden and is now revealed, False if it
            was already revealed.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return not self.revealed

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content.is_mine

    @property
    def adjacent_mines(self) -> int:
        """Count of mines in neighbouring cells (0 for mines and empty cells)."""
        return self.content.count

    def to_observation(self) -> int:
        """
        Convert cell to the value shown to the player.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self.revealed:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
