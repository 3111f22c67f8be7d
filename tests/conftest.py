"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, CellContent, Session


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def blank_board() -> Board:
    """Create a 5x5 board with no mines and no adjacency pass."""
    return Board(5)


@pytest.fixture
def centre_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.from_rows([
        "...",
        ".*.",
        "...",
    ])


@pytest.fixture
def empty_board() -> Board:
    """Create a 4x4 board with no mines for flood testing."""
    return Board.from_rows(["...."] * 4)


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board split by a column of mines.

    Left region (cols 0-1) borders the wall, right region (cols 3-4)
    is separate.
    """
    return Board.from_rows([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ])


@pytest.fixture
def corner_board() -> Board:
    """Create a 5x5 board with mines in the top-left corner."""
    return Board.from_rows([
        "**...",
        "*....",
        ".....",
        ".....",
        ".....",
    ])


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible mine placement."""
    return np.random.default_rng(1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def centre_mine_session(centre_mine_board: Board) -> Session:
    """Session on the 3x3 centre mine board."""
    return Session.from_board(centre_mine_board)


@pytest.fixture
def seeded_session() -> Session:
    """Session on an easy board with a fixed seed."""
    return Session(BoardConfig(10, 10), seed=7)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(content=CellContent.mine())


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(content=CellContent.near_mine(3))
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 10)
