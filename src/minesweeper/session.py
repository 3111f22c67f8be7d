"""
Game session for Minesweeper.

Wraps a single board from creation until the game is won or lost.
"""
from typing import Optional

import numpy as np

from .board import Board, BoardConfig, GameState, RevealOutcome


# ============================================================================
# Session
# ============================================================================

class Session:
    """
    One game of Minesweeper.

    Builds the board from a configuration, forwards reveals to it and
    tracks the game state. Once the game is won or lost no further
    reveals reach the board.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            rng: Random generator used for mine placement.
            seed: Seed for a fresh generator; cannot be combined with ``rng``.
            board: Already populated board to play on; ``config`` is then
                taken from the board and no mines are placed.

        Raises:
            ValueError: If both ``rng`` and ``seed`` are given.
        """
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")

        if board is None:
            self.config = config or BoardConfig()
            rng = rng if rng is not None else np.random.default_rng(seed)
            board = Board(self.config.size)
            board.place_mines(self.config.num_mines, rng)
            board.compute_adjacency()
        else:
            self.config = BoardConfig(board.size, board.mine_count)

        self.board = board
        mine_found = any(
            cell.is_mine and cell.revealed for _, _, cell in board.cells()
        )
        self._state = board.state(mine_found=mine_found)

    @classmethod
    def from_board(cls, board: Board) -> "Session":
        """Start a session on an already populated board."""
        return cls(board=board)

    def reveal(self, row: int, col: int) -> GameState:
        """
        Reveal a cell and update the game state.

        Args:
            row: Row index (0-based).
            col: Column index (0-based).

        Returns:
            The game state after the reveal. A finished game returns its
            final state unchanged.
        """
        if self.is_over:
            return self._state

        outcome = self.board.reveal(row, col)
        self._state = self.board.state(
            mine_found=outcome == RevealOutcome.HIT_MINE
        )
        return self._state

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game has reached a terminal state."""
        return self._state != GameState.PLAYING

    @property
    def cells_to_reveal(self) -> int:
        """Number of safe cells on the board."""
        return self.config.cells_to_reveal

    @property
    def cells_revealed(self) -> int:
        return self.board.count_revealed()
