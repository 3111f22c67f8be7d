"""
Unit tests for Cell and CellContent.

Tests content variants, reveal behavior, and observation conversion.
"""
import pytest
from minesweeper import Cell, CellContent, ContentKind


# ============================================================================
# Cell Content Tests
# ============================================================================

class TestCellContent:
    """Test the closed content variant."""

    def test_default_content_is_empty(self) -> None:
        """Default content should be Empty with no count."""
        content = CellContent()
        assert content.kind == ContentKind.EMPTY
        assert content.count == 0

    def test_mine_content(self) -> None:
        """Mine constructor should build a mine."""
        content = CellContent.mine()
        assert content.is_mine is True
        assert content.is_empty is False

    @pytest.mark.parametrize("count", range(1, 9))
    def test_near_mine_accepts_one_to_eight(self, count: int) -> None:
        """NearMine should accept counts 1 through 8."""
        content = CellContent.near_mine(count)
        assert content.is_near_mine is True
        assert content.count == count

    @pytest.mark.parametrize("count", [0, 9, -1])
    def test_near_mine_rejects_out_of_range(self, count: int) -> None:
        """NearMine counts outside 1-8 should raise ValueError."""
        with pytest.raises(ValueError, match="count must be 1-8"):
            CellContent.near_mine(count)

    def test_mine_cannot_carry_count(self) -> None:
        """Only NearMine content may have a count."""
        with pytest.raises(ValueError, match="cannot carry a count"):
            CellContent(ContentKind.MINE, 2)

    def test_from_count_zero_is_empty(self) -> None:
        assert CellContent.from_count(0) == CellContent.empty()

    def test_from_count_positive_is_near_mine(self) -> None:
        assert CellContent.from_count(4) == CellContent.near_mine(4)

    def test_content_is_immutable(self) -> None:
        """Content values should be frozen."""
        content = CellContent.near_mine(2)
        with pytest.raises(AttributeError):
            content.count = 3


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not be a mine by default."""
        assert hidden_cell.is_mine is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.revealed is False
        assert hidden_cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self, hidden_cell: Cell) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert hidden_cell.adjacent_mines == 0

    def test_mine_cell_creation(self, mine_cell: Cell) -> None:
        """Can create a cell that is a mine."""
        assert mine_cell.is_mine is True

    def test_cell_with_adjacent_mines(self) -> None:
        """Can create a cell with adjacent mine count."""
        cell = Cell(content=CellContent.near_mine(5))
        assert cell.adjacent_mines == 5


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True

    def test_reveal_sets_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.revealed is True
        assert hidden_cell.is_hidden is False

    def test_reveal_already_revealed_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        assert numbered_cell.reveal() is False
        assert numbered_cell.revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values used for rendering."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """Hidden mine should not leak through the observation."""
        assert mine_cell.to_observation() == -1

    def test_revealed_empty_cell_observation_is_zero(
        self, hidden_cell: Cell
    ) -> None:
        """Revealed cell with 0 adjacent mines returns 0."""
        hidden_cell.reveal()
        assert hidden_cell.to_observation() == 0

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(content=CellContent.near_mine(count))
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
