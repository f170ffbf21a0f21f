"""
Mine field module for Minesweeper.

Holds the hidden mine layout: configuration validation, random mine
placement and adjacency counting.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

SeedLike = Union[int, np.random.Generator, None]


# ============================================================================
# Errors
# ============================================================================

class MinesweeperError(Exception):
    """Base class for errors raised by this package."""


class InvalidConfigurationError(MinesweeperError, ValueError):
    """Field dimensions or mine count are not allowed."""


class OutOfRangeError(MinesweeperError, IndexError):
    """A (row, col) location lies outside the field."""

    def __init__(self, row: int, col: int, num_rows: int, num_cols: int) -> None:
        super().__init__(
            f"Location ({row}, {col}) is outside a {num_rows}x{num_cols} field"
        )
        self.row = row
        self.col = col


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for an initially empty mine field.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Mines to place once the field is populated.
    """

    rows: int
    cols: int
    num_mines: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigurationError("Field dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        if self.num_cells <= 3 * self.num_mines:
            raise InvalidConfigurationError(
                f"Too many mines ({self.num_mines} for {self.num_cells} cells; "
                f"mines must cover less than a third of the field)"
            )

    @property
    def num_cells(self) -> int:
        """Total number of squares."""
        return self.rows * self.cols


# ============================================================================
# Mine Field
# ============================================================================

class MineField:
    """
    Locations of the mines for one game.

    Build one from an explicit layout (mostly for tests), or start empty
    with MineField.empty() and call populate() once the first square is
    chosen. Until then num_mines is the target count, not the number of
    mines actually present.
    """

    def __init__(
        self,
        layout: Sequence[Sequence[bool]],
        seed: SeedLike = None,
    ) -> None:
        """
        Create a field holding a copy of the given layout.

        Args:
            layout: Grid where layout[row][col] is True for a mine. Must
                have at least one row and one column.
            seed: Seed or generator used by populate().
        """
        try:
            grid = np.array(layout, dtype=bool)
        except ValueError as exc:
            raise InvalidConfigurationError("Mine layout must be rectangular") from exc
        if grid.ndim != 2 or grid.shape[0] < 1 or grid.shape[1] < 1:
            raise InvalidConfigurationError(
                "Mine layout needs at least one row and one column"
            )

        self._layout = grid
        self._num_mines = int(grid.sum())
        self._rng = np.random.default_rng(seed)

    @classmethod
    def empty(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        seed: SeedLike = None,
    ) -> "MineField":
        """
        Create a mine-free field that will hold num_mines once populated.

        Raises:
            InvalidConfigurationError: Unless rows > 0, cols > 0 and
                0 <= num_mines < rows * cols / 3.
        """
        return cls.from_config(FieldConfig(rows, cols, num_mines), seed=seed)

    @classmethod
    def from_config(cls, config: FieldConfig, seed: SeedLike = None) -> "MineField":
        """Create an empty field from a validated configuration."""
        mine_field = cls(np.zeros((config.rows, config.cols), dtype=bool), seed=seed)
        mine_field._num_mines = config.num_mines
        return mine_field

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    @property
    def num_rows(self) -> int:
        """Number of rows in the field."""
        return self._layout.shape[0]

    @property
    def num_cols(self) -> int:
        """Number of columns in the field."""
        return self._layout.shape[1]

    @property
    def num_cells(self) -> int:
        """Total number of squares."""
        return self._layout.size

    @property
    def num_mines(self) -> int:
        """Number of mines this field has, or will have once populated."""
        return self._num_mines

    def in_range(self, row: int, col: int) -> bool:
        """Check if (row, col) is a location on this field."""
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def _check_range(self, row: int, col: int) -> None:
        if not self.in_range(row, col):
            raise OutOfRangeError(row, col, self.num_rows, self.num_cols)

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring locations, diagonals included.

        Args:
            row: Row index of center square.
            col: Column index of center square.

        Returns:
            List of (row, col) tuples inside the field.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_range(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Mine Queries (Mid-level)
    # ========================================================================

    def has_mine(self, row: int, col: int) -> bool:
        """Check if there is a mine at (row, col)."""
        self._check_range(row, col)
        return bool(self._layout[row, col])

    def num_adjacent_mines(self, row: int, col: int) -> int:
        """
        Count mines next to (row, col), not counting (row, col) itself.

        Returns:
            Number of mines among the up to 8 neighbors, in [0, 8].
        """
        self._check_range(row, col)
        window = self._layout[max(row - 1, 0):row + 2, max(col - 1, 0):col + 2]
        return int(window.sum()) - int(self._layout[row, col])

    @property
    def layout(self) -> np.ndarray:
        """Copy of the mine grid (True = mine)."""
        return self._layout.copy()

    # ========================================================================
    # Mine Placement (High-level)
    # ========================================================================

    def reset_empty(self) -> None:
        """
        Remove every mine.

        num_mines, num_rows and num_cols are unchanged, so afterwards the
        field holds fewer mines than num_mines. This is the state a field
        is in at the start of a game.
        """
        self._layout[:] = False

    def populate(self, avoid_row: int, avoid_col: int) -> None:
        """
        Clear the field and place num_mines mines at random.

        Locations are drawn uniformly; a draw that hits an existing mine
        or the avoided square is rejected and drawn again.

        Args:
            avoid_row: Row of the square that must stay mine-free.
            avoid_col: Column of the square that must stay mine-free.

        Raises:
            OutOfRangeError: If (avoid_row, avoid_col) is not on the field.
        """
        self._check_range(avoid_row, avoid_col)
        if self._num_mines > self.num_cells - 1:
            raise InvalidConfigurationError(
                f"Cannot place {self._num_mines} mines around a safe square "
                f"on {self.num_cells} cells"
            )
        self.reset_empty()

        placed = 0
        while placed < self._num_mines:
            row, col = divmod(int(self._rng.integers(self.num_cells)), self.num_cols)
            if self._layout[row, col] or (row, col) == (avoid_row, avoid_col):
                continue
            self._layout[row, col] = True
            placed += 1

        logger.debug(
            "Placed %d mines on %dx%d field avoiding (%d, %d)",
            placed, self.num_rows, self.num_cols, avoid_row, avoid_col,
        )

    def __repr__(self) -> str:
        return (
            f"MineField(rows={self.num_rows}, cols={self.num_cols}, "
            f"num_mines={self._num_mines})"
        )


def mine_field_from_strings(rows: Sequence[str], seed: Optional[int] = None) -> MineField:
    """Build a field from text rows, "*" marking a mine and anything else empty."""
    return MineField([[char == "*" for char in line] for line in rows], seed=seed)
