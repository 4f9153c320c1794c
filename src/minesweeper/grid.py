"""
Grid module for Minesweeper game.

Owns the matrix of cells, mine placement and neighbor enumeration.
Holds no game state; the engine drives every mutation.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Tuple

import numpy as np

from .cell import Cell, MINE
from .config import BoardConfig
from .errors import OutOfBounds

logger = logging.getLogger(__name__)

# Draws an integer uniformly from [0, n).
RandInt = Callable[[int], int]

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """
    Rectangular matrix of cells, indexed row-major by (row, col).
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _cells: List[List[Cell]] = field(default_factory=list, repr=False)
    _generated: bool = False

    def __post_init__(self) -> None:
        """Initialize the cells after dataclass creation."""
        self._cells = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def is_generated(self) -> bool:
        """Check if mines have been placed for the current game."""
        return self._generated

    # ========================================================================
    # Structural Queries
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def check_position(self, row: int, col: int) -> None:
        """Raise OutOfBounds unless (row, col) is on the grid."""
        if not self.is_valid_position(row, col):
            raise OutOfBounds(row, col, self.height, self.width)

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self.check_position(row, col)
        return self._cells[row][col]

    def neighbors_of(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Neighbors come back in row-major order, so traversals built on
        them are reproducible.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        self.check_position(row, col)
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, col, cell) for every cell in row-major order."""
        for row, cells in enumerate(self._cells):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def mine_positions(self) -> List[Position]:
        """Get positions of all mines, row-major."""
        return [(row, col) for row, col, cell in self.iter_cells() if cell.is_mine]

    # ========================================================================
    # Generation
    # ========================================================================

    def generate(self, safe_row: int, safe_col: int, randint: RandInt) -> None:
        """
        Place mines, keeping the 3x3 block around the safe cell clear.

        Candidates are drawn as a row then a column and rejected while they
        already hold a mine or fall inside the safe block. BoardConfig
        guarantees enough cells remain for the loop to finish.

        Args:
            safe_row: Row of the first reveal.
            safe_col: Column of the first reveal.
            randint: Bounded integer source, randint(n) in [0, n).

        Raises:
            OutOfBounds: If the safe cell is outside the grid.
            RuntimeError: If mines were already placed for this game.
        """
        self.check_position(safe_row, safe_col)
        if self._generated:
            raise RuntimeError("Mines already placed; reset the grid first")

        for _ in range(self.mine_count):
            while True:
                row = randint(self.height)
                col = randint(self.width)
                in_safe_zone = (
                    abs(row - safe_row) < 2 and abs(col - safe_col) < 2
                )
                if not in_safe_zone and not self._cells[row][col].is_mine:
                    break
            self._place_mine(row, col)

        self._generated = True
        logger.debug(
            "Placed %d mines around safe cell (%d, %d)",
            self.mine_count, safe_row, safe_col,
        )

    def _place_mine(self, row: int, col: int) -> None:
        """Set a mine and bump the counts of its non-mine neighbors."""
        self._cells[row][col].content = MINE
        for neighbor_row, neighbor_col in self.neighbors_of(row, col):
            neighbor = self._cells[neighbor_row][neighbor_col]
            if not neighbor.is_mine:
                neighbor.content += 1

    def reset(self) -> None:
        """Return every cell to closed, unflagged, zero content."""
        for _, _, cell in self.iter_cells():
            cell.clear()
        self._generated = False

    # ========================================================================
    # Observation
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for row, col, cell in self.iter_cells():
            obs[row, col] = cell.to_observation()
        return obs
