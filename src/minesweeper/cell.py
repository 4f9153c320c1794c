"""
Cell module for Minesweeper game.

Represents individual cells on the grid with their visibility
(hidden/open/flagged) and content (mine or neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    OPEN = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A single state field holds visibility, so a cell can never be both
    open and flagged.

    Attributes:
        content: 9 for a mine, otherwise count of neighboring mines (0-8).
        state: Current visual state (hidden, open, or flagged).
    """

    content: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if cell was opened, False if already open or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.OPEN
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is open.
        """
        if self.state == CellState.OPEN:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def clear(self) -> None:
        """Return cell to closed, unflagged, empty."""
        self.content = 0
        self.state = CellState.HIDDEN

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content == MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is closed and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.state == CellState.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Open mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.content
