"""
Unit tests for Cell class.

Tests cell state management, open/flag behavior, and observation conversion.
"""
import pytest
from minesweeper import Cell, CellState, MINE


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_open is False
        assert cell.is_flagged is False

    def test_default_cell_has_zero_content(self) -> None:
        """New cell should hold 0 by default."""
        assert Cell().content == 0

    def test_mine_cell_creation(self, mine_cell: Cell) -> None:
        """Content 9 marks a mine."""
        assert mine_cell.content == MINE
        assert mine_cell.is_mine is True


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Opening a hidden cell should succeed."""
        assert hidden_cell.open() is True
        assert hidden_cell.is_open is True

    def test_open_already_open_returns_false(self, hidden_cell: Cell) -> None:
        """Opening an open cell should fail."""
        hidden_cell.open()
        assert hidden_cell.open() is False

    def test_open_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot open a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.open() is False
        assert hidden_cell.is_open is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_open_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag an open cell."""
        hidden_cell.open()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_flagged is False

    def test_clear_resets_content_and_state(self) -> None:
        """Clear should restore a fresh cell."""
        cell = Cell(content=4)
        cell.toggle_flag()
        cell.clear()
        assert cell == Cell()


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """A closed mine must not leak through the observation."""
        assert mine_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_open_cell_observation_matches_content(self, count: int) -> None:
        """Open cell returns its adjacent mine count."""
        cell = Cell(content=count)
        cell.open()
        assert cell.to_observation() == count

    def test_open_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Open mine should return 9 for observation."""
        mine_cell.open()
        assert mine_cell.to_observation() == 9
