"""
Minesweeper rules engine.

Provides the grid, cell state, game state machine and a gymnasium
adapter for driving games programmatically.
"""
from .cell import Cell, CellState, MINE
from .config import BoardConfig
from .errors import MinesweeperError, OutOfBounds, InvalidConfiguration
from .grid import Grid, NEIGHBOR_OFFSETS
from .engine import GameEngine, GameState, new_game
from .display import format_counter, render_board, status_line
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "BoardConfig",
    "MinesweeperError",
    "OutOfBounds",
    "InvalidConfiguration",
    "Grid",
    "NEIGHBOR_OFFSETS",
    "GameEngine",
    "GameState",
    "new_game",
    "format_counter",
    "render_board",
    "status_line",
    "MinesweeperEnv",
]
