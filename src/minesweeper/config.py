"""
Board configuration for the Minesweeper engine.
"""
from dataclasses import dataclass

from .errors import InvalidConfiguration


# ============================================================================
# Constants
# ============================================================================

# Cells in the mine-free block around the first reveal.
SAFE_ZONE_SIZE = 9


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 30
    height: int = 16
    mine_count: int = 99

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        limit = self.total_cells - SAFE_ZONE_SIZE
        if self.mine_count >= limit:
            raise InvalidConfiguration(
                f"Too many mines for a {self.width}x{self.height} board "
                f"(must be fewer than {max(limit, 0)})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def target_count(self) -> int:
        """Number of non-mine cells that must be opened to win."""
        return self.total_cells - self.mine_count
