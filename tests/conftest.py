"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import BoardConfig, Cell, GameEngine, Grid


# Column of mines at col 3 on a 6x5 board; see wall_engine.
WALL_MINES = [(row, 3) for row in range(5)]


def scripted(values: Iterable[int]) -> Callable[[int], int]:
    """Build a bounded integer source that replays fixed values."""
    remaining = iter(values)

    def randint(bound: int) -> int:
        value = next(remaining)
        assert 0 <= value < bound, f"scripted value {value} not in [0, {bound})"
        return value

    return randint


def flatten(positions):
    """Turn [(row, col), ...] into the row/col draw sequence."""
    return [value for position in positions for value in position]


# ============================================================================
# Randomness Fixtures
# ============================================================================

@pytest.fixture
def scripted_randint() -> Callable[[Iterable[int]], Callable[[int], int]]:
    """Factory for deterministic mine placement sequences."""
    return scripted


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> GameEngine:
    """Create a 9x9 game with 10 mines."""
    return GameEngine(BoardConfig(9, 9, 10))


@pytest.fixture
def empty_engine() -> GameEngine:
    """Create a 5x5 game with no mines for cascade testing."""
    return GameEngine(BoardConfig(5, 5, 0))


@pytest.fixture
def wall_engine() -> GameEngine:
    """
    Create a 6-wide, 5-tall game with a column of mines at col 3.

    Layout once started (M = mine):
        . . 2 M 2 .
        . . 3 M 3 .
        . . 3 M 3 .
        . . 3 M 3 .
        . . 2 M 2 .
    Revealing (2, 0) first opens columns 0-2 and leaves 4-5 closed.
    """
    return GameEngine(BoardConfig(6, 5, 5), randint=scripted(flatten(WALL_MINES)))


@pytest.fixture
def started_wall_engine(wall_engine: GameEngine) -> GameEngine:
    """Wall game after the first reveal at (2, 0)."""
    wall_engine.reveal(2, 0)
    return wall_engine


# ============================================================================
# Grid and Cell Fixtures
# ============================================================================

@pytest.fixture
def grid() -> Grid:
    """Create an ungenerated 9x9 grid with 10 mines."""
    return Grid(BoardConfig(9, 9, 10))


@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(content=9)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
