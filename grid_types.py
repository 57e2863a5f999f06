"""
Shared type definitions for the iceberg-avoiding path counters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class CellState(Enum):
    """Contents of a single grid cell."""

    OPEN = "."
    ICEBERG = "X"


class StepDirection(Enum):
    """Direction of one step along a monotone path."""

    RIGHT = "R"  # Increasing col
    DOWN = "D"  # Increasing row


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Grid:
    """A rectangular 2D grid of open and iceberg cells."""

    cells: tuple[tuple[CellState, ...], ...]

    def __post_init__(self) -> None:
        if self.cells:
            cols = len(self.cells[0])
            mismatched = [(i, len(row)) for i, row in enumerate(self.cells) if len(row) != cols]
            if mismatched:
                error_msg = (
                    f"Inconsistent row lengths in grid\n"
                    f"  Expected: {cols} columns (from row 0)\n"
                    f"  Mismatched rows:\n"
                )
                for row_idx, actual_cols in mismatched:
                    error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
                error_msg += "  All rows must have the same number of cells"
                raise ValueError(error_msg)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def iceberg_count(self) -> int:
        return sum(row.count(CellState.ICEBERG) for row in self.cells)

    def get(self, row: int, col: int) -> CellState:
        """Return the state of the cell at (row, col).

        Raises:
            IndexError: If the position lies outside the grid
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the grid\n"
                f"  Valid rows: 0..{self.rows - 1}\n"
                f"  Valid cols: 0..{self.cols - 1}"
            )
        return self.cells[row][col]

    def with_cell(self, row: int, col: int, state: CellState) -> Grid:
        """Return a copy of this grid with one cell replaced."""
        self.get(row, col)  # bounds check
        new_cells = tuple(
            tuple(state if (r, c) == (row, col) else cell for c, cell in enumerate(grid_row))
            for r, grid_row in enumerate(self.cells)
        )
        return Grid(new_cells)


def open_grid(rows: int, cols: int) -> Grid:
    """Create a grid of the given size with no icebergs."""
    return Grid(tuple((CellState.OPEN,) * cols for _ in range(rows)))


def random_grid(
    rows: int,
    cols: int,
    rng: random.Random | None = None,
    iceberg_fraction: float = 0.25,
) -> Grid:
    """
    Create a grid with icebergs scattered at random.

    Exactly int(rows * cols * iceberg_fraction) distinct cells become icebergs.
    The origin (0, 0) is never chosen, so the result always has a valid start.
    Other cells, including the destination, may be blocked.

    Args:
        rows: Number of rows (must be positive)
        cols: Number of columns (must be positive)
        rng: Random source; a fresh unseeded Random is used when omitted
        iceberg_fraction: Share of cells to block, in [0, 1)

    Returns:
        The generated Grid
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
    if not 0.0 <= iceberg_fraction < 1.0:
        raise ValueError(f"iceberg_fraction must be in [0, 1), got {iceberg_fraction}")

    if rng is None:
        rng = random.Random()

    # The origin is excluded, so at most rows * cols - 1 cells are available
    ice_total = min(int(rows * cols * iceberg_fraction), rows * cols - 1)
    candidates = [(r, c) for r in range(rows) for c in range(cols) if (r, c) != (0, 0)]
    blocked = set(rng.sample(candidates, ice_total))

    return Grid(
        tuple(
            tuple(CellState.ICEBERG if (r, c) in blocked else CellState.OPEN for c in range(cols))
            for r in range(rows)
        )
    )
