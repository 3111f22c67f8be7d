"""
Board module for Minesweeper game.

Implements the square game board with mine placement, adjacency
counting, flood-fill revealing and completion queries.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellContent, MINE
from .errors import BoardError, InvalidSizeError, OutOfBoundsError, TooManyMinesError

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealOutcome(Enum):
    """Result of revealing a single position."""

    HIT_MINE = auto()
    REVEALED = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        _check_size(self.size)
        _check_mine_count(self.num_mines, self.total_cells)

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def cells_to_reveal(self) -> int:
        """Number of safe cells the player has to uncover."""
        return self.total_cells - self.num_mines


def _check_size(size: int) -> None:
    if size < 1:
        raise InvalidSizeError(f"Board size must be positive, got {size}")


def _check_mine_count(num_mines: int, total_cells: int) -> None:
    if num_mines < 0:
        raise TooManyMinesError("Number of mines cannot be negative")
    max_mines = total_cells - 1
    if num_mines > max_mines:
        raise TooManyMinesError(f"Too many mines (max {max_mines})")


# Preset difficulty levels
EASY = BoardConfig(10, 10)
MEDIUM = BoardConfig(16, 40)
HARD = BoardConfig(30, 99)

DIFFICULTIES = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def game_state(
    revealed: int, total_cells: int, mine_count: int, mine_found: bool
) -> GameState:
    """
    Derive the game state from the board counters.

    Args:
        revealed: Number of revealed cells.
        total_cells: Number of cells on the board.
        mine_count: Number of mines on the board.
        mine_found: Whether the last reveal hit a mine.

    Returns:
        LOST if a mine was found, WON once every safe cell is revealed,
        PLAYING otherwise.
    """
    if mine_found:
        return GameState.LOST
    if revealed == total_cells - mine_count:
        return GameState.WON
    return GameState.PLAYING


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Holds a ``size`` x ``size`` grid of cells. Mines are placed once,
    adjacency counts are computed once, and afterwards only the revealed
    flags change.
    """

    size: int = 10
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mine_count: int = 0
    _mines_placed: bool = False
    _adjacency_done: bool = False
    _last_revealed: List[Position] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        _check_size(self.size)
        self._init_grid()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board with adjacency computed from a text layout.

        Each row is a string of ``*`` (mine) and any other character
        (safe), e.g. ``["...", ".*.", "..."]``.
        """
        board = cls(len(rows))
        for row in rows:
            if len(row) != board.size:
                raise InvalidSizeError("Board layout must be square")
        board.place_mines_at(
            (row, col)
            for row, line in enumerate(rows)
            for col, char in enumerate(line)
            if char == "*"
        )
        board.compute_adjacency()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of empty hidden cells."""
        self._grid = [
            [Cell() for _ in range(self.size)]
            for _ in range(self.size)
        ]

    def place_mines(
        self, mine_count: int, rng: Optional[np.random.Generator] = None
    ) -> None:
        """
        Place mines at uniformly random distinct positions.

        Args:
            mine_count: Number of mines, at most ``size * size - 1``.
            rng: Random generator to draw from; a fresh unseeded one is
                used when omitted.

        Raises:
            TooManyMinesError: If no safe cell would remain.
            BoardError: If mines, adjacency or reveals already happened.
        """
        _check_mine_count(mine_count, self.total_cells)
        self._check_no_mines()
        rng = rng if rng is not None else np.random.default_rng()
        indices = rng.choice(self.total_cells, size=mine_count, replace=False)
        self._set_mines(divmod(int(index), self.size) for index in indices)

    def place_mines_at(self, positions: Iterable[Position]) -> None:
        """
        Place mines at the given positions.

        Args:
            positions: (row, col) pairs; duplicates count once.

        Raises:
            OutOfBoundsError: If a position is outside the board.
            TooManyMinesError: If no safe cell would remain.
            BoardError: If mines, adjacency or reveals already happened.
        """
        unique = set(positions)
        for row, col in unique:
            self._check_position(row, col)
        _check_mine_count(len(unique), self.total_cells)
        self._check_no_mines()
        self._set_mines(unique)

    def _check_no_mines(self) -> None:
        if self._mines_placed:
            raise BoardError("Mines have already been placed on this board")
        if self._adjacency_done:
            raise BoardError("Mines must be placed before the adjacency pass")
        self._check_not_started()

    def _check_not_started(self) -> None:
        if any(cell.revealed for _, _, cell in self.cells()):
            raise BoardError("Board is already in play")

    def _set_mines(self, positions: Iterable[Position]) -> None:
        for row, col in positions:
            self._grid[row][col].content = MINE
            self._mine_count += 1
        self._mines_placed = True

    def compute_adjacency(self) -> None:
        """Set every non-mine cell to Empty or NearMine(n) from its neighbours."""
        self._check_not_started()
        for row in range(self.size):
            for col in range(self.size):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    count = self.count_mine_neighbours(row, col)
                    cell.content = CellContent.from_count(count)
        self._adjacency_done = True

    def count_mine_neighbours(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        self._check_position(row, col)
        count = 0
        for neighbour_row, neighbour_col in self._get_neighbours(row, col):
            if self._grid[neighbour_row][neighbour_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbour Utilities (Low-level)
    # ========================================================================

    def _get_neighbours(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighbouring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up to 8 in-bounds neighbours.
        """
        neighbours = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbours.append((new_row, new_col))
        return neighbours

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_position(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise OutOfBoundsError(row, col, self.size)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A mine is revealed on its own. A numbered cell is revealed on its
        own. An empty cell floods outwards over the connected empty region,
        uncovering the numbered cells on its border but never a mine.
        Revealing an already revealed cell changes nothing.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            HIT_MINE if the cell holds a mine, REVEALED otherwise.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        self._check_position(row, col)
        self._last_revealed = []
        cell = self._grid[row][col]

        if cell.reveal():
            self._last_revealed.append((row, col))
            if cell.content.is_empty:
                self._flood_reveal(row, col)

        if cell.is_mine:
            return RevealOutcome.HIT_MINE
        return RevealOutcome.REVEALED

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal the empty region around an empty cell, stopping at numbers."""
        frontier = [(row, col)]
        while frontier:
            current_row, current_col = frontier.pop()
            for neighbour_row, neighbour_col in self._get_neighbours(
                current_row, current_col
            ):
                neighbour = self._grid[neighbour_row][neighbour_col]
                if neighbour.revealed or neighbour.is_mine:
                    continue
                neighbour.reveal()
                self._last_revealed.append((neighbour_row, neighbour_col))
                if neighbour.content.is_empty:
                    frontier.append((neighbour_row, neighbour_col))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def mine_count(self) -> int:
        """Number of mines placed on the board."""
        return self._mine_count

    @property
    def last_revealed(self) -> List[Position]:
        """Positions uncovered by the most recent reveal, in reveal order."""
        return list(self._last_revealed)

    def count_revealed(self) -> int:
        """Count revealed cells."""
        return sum(1 for _, _, cell in self.cells() if cell.revealed)

    def is_won(
        self,
        total_cells: Optional[int] = None,
        mine_count: Optional[int] = None,
    ) -> bool:
        """
        Check if every safe cell has been revealed.

        Args:
            total_cells: Cells on the board (default: this board's).
            mine_count: Mines on the board (default: mines placed here).
        """
        if total_cells is None:
            total_cells = self.total_cells
        if mine_count is None:
            mine_count = self._mine_count
        return self.count_revealed() == total_cells - mine_count

    def state(self, mine_found: bool = False) -> GameState:
        """Derive the game state after a reveal."""
        return game_state(
            self.count_revealed(), self.total_cells, self._mine_count, mine_found
        )

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield row, col, self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Get positions of all mines."""
        return [(row, col) for row, col, cell in self.cells() if cell.is_mine]

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs


def new_board(size: int) -> Board:
    """Create a size x size board of hidden empty cells."""
    return Board(size)
