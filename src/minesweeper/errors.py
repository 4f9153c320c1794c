"""
Error types for the Minesweeper engine.

Only programming errors raise; routine player actions on closed, flagged
or finished boards are silent no-ops.
"""


class MinesweeperError(Exception):
    """Base class for engine errors."""


class OutOfBounds(MinesweeperError, IndexError):
    """
    Coordinate lies outside the grid.

    Attributes:
        row: Requested row index.
        col: Requested column index.
        height: Number of rows in the grid.
        width: Number of columns in the grid.
    """

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        self.row = row
        self.col = col
        self.height = height
        self.width = width
        super().__init__(
            f"Position ({row}, {col}) is outside a "
            f"{height}x{width} grid"
        )


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board parameters that cannot produce a playable game."""
