"""
Game engine for Minesweeper.

Implements the game state machine on top of a Grid: lazy mine placement
on the first reveal, flood-fill opening, flags, chord reveals, and
win/lose detection.
"""
import logging
import random
from collections import deque
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .cell import Cell
from .config import BoardConfig
from .grid import Grid, Position, RandInt

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = frozenset({GameState.WON, GameState.LOST})


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Minesweeper game bound to a single grid.

    Counters always match the grid: opened_count is the number of open
    cells and flagged_count the number of flagged cells.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        randint: Optional[RandInt] = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Board configuration (default: 30x16 with 99 mines).
            randint: Bounded integer source used for mine placement,
                randint(n) in [0, n). Defaults to random.randrange.
        """
        self.config = config or BoardConfig()
        self.grid = Grid(self.config)
        self._randint = randint or random.randrange
        self._state = GameState.NOT_STARTED
        self._opened_count = 0
        self._flagged_count = 0

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines around a safe 3x3 block. An empty
        cell (0 adjacent mines) opens its whole zero region and border.
        A mine loses the game and exposes every mine.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if any cell was opened, False otherwise.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        cell = self.grid.cell_at(row, col)
        if self.is_over or cell.is_flagged:
            return False

        if self._state == GameState.NOT_STARTED:
            self.grid.generate(row, col, self._randint)
            self._state = GameState.IN_PROGRESS

        if cell.is_open:
            return False
        if cell.is_mine:
            self._lose()
            return True

        self._flood_open(row, col)
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        cell = self.grid.cell_at(row, col)
        if self.is_over or not cell.toggle_flag():
            return False
        self._flagged_count += 1 if cell.is_flagged else -1
        return True

    def reveal_neighbors(self, row: int, col: int) -> bool:
        """
        Chord: reveal all unflagged neighbors if flag count matches.

        Args:
            row: Row index of an open numbered cell.
            col: Column index of an open numbered cell.

        Returns:
            True if any cell was opened, False otherwise.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        cell = self.grid.cell_at(row, col)
        if self.is_over or not cell.is_open or cell.content == 0:
            return False

        neighbors = self.grid.neighbors_of(row, col)
        flags = sum(
            1 for r, c in neighbors if self.grid.cell_at(r, c).is_flagged
        )
        if flags != cell.content:
            return False

        revealed_any = False
        for neighbor_row, neighbor_col in neighbors:
            if not self.grid.cell_at(neighbor_row, neighbor_col).is_flagged:
                revealed_any |= self.reveal(neighbor_row, neighbor_col)
        return revealed_any

    def reset(self) -> None:
        """Reset to a fresh, unplaced board for a new game."""
        self.grid.reset()
        self._state = GameState.NOT_STARTED
        self._opened_count = 0
        self._flagged_count = 0

    # ========================================================================
    # Opening Helpers
    # ========================================================================

    def _flood_open(self, row: int, col: int) -> None:
        """Open a safe cell, expanding through zero cells with a worklist."""
        pending = deque([(row, col)])
        while pending:
            current_row, current_col = pending.popleft()
            cell = self.grid.cell_at(current_row, current_col)
            if not cell.is_hidden or cell.is_mine:
                continue

            self._open_safe(cell)
            if cell.content != 0:
                continue
            for neighbor_row, neighbor_col in self.grid.neighbors_of(
                current_row, current_col
            ):
                if self.grid.cell_at(neighbor_row, neighbor_col).is_hidden:
                    pending.append((neighbor_row, neighbor_col))

    def _open_safe(self, cell: Cell) -> None:
        """Open a non-mine cell and check for victory."""
        cell.open()
        self._opened_count += 1
        if self._opened_count == self.target_count:
            self._state = GameState.WON
            logger.debug("Game won after opening %d cells", self._opened_count)

    def _lose(self) -> None:
        """Mark the game lost and open every mine without a win check."""
        self._state = GameState.LOST
        for _, _, cell in self.grid.iter_cells():
            if not cell.is_mine or cell.is_open:
                continue
            if cell.is_flagged:
                cell.toggle_flag()
                self._flagged_count -= 1
            cell.open()
            self._opened_count += 1
        logger.debug("Game lost; %d mines exposed", self.config.mine_count)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def opened_count(self) -> int:
        """Number of open cells."""
        return self._opened_count

    @property
    def flagged_count(self) -> int:
        """Number of flagged cells."""
        return self._flagged_count

    @property
    def target_count(self) -> int:
        """Number of safe cells that must be opened to win."""
        return self.config.target_count

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.config.mine_count - self._flagged_count

    @property
    def is_playing(self) -> bool:
        """Check if game accepts moves (not started or in progress)."""
        return self._state not in TERMINAL_STATES

    @property
    def is_over(self) -> bool:
        """Check if game has ended."""
        return self._state in TERMINAL_STATES

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    def cell_at(self, row: int, col: int) -> Cell:
        """Get cell at position; raises OutOfBounds if invalid."""
        return self.grid.cell_at(row, col)

    def get_observation(self) -> np.ndarray:
        """Get board state as numpy array (see Grid.get_observation)."""
        return self.grid.get_observation()

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions that are closed and unflagged.
        """
        if self.is_over:
            return []
        return [
            (row, col)
            for row, col, cell in self.grid.iter_cells()
            if cell.is_hidden
        ]


def new_game(
    width: int,
    height: int,
    mine_count: int,
    randint: Optional[RandInt] = None,
) -> GameEngine:
    """
    Create a game with the given dimensions.

    Raises:
        InvalidConfiguration: If the parameters cannot produce a game.
    """
    return GameEngine(BoardConfig(width, height, mine_count), randint)
