"""
Counting monotone paths that avoid icebergs.

A path starts at the top-left cell, ends at the bottom-right cell and moves
one cell right or down at a time, never entering an iceberg. Two counters
solve the problem and must agree:

- count_paths_exhaustive: enumerates every right/down move sequence
- count_paths_dynamic_programming: fills a table of path counts per cell
"""

from __future__ import annotations

import logging

from grid_types import CellState, Grid, StepDirection

logger = logging.getLogger(__name__)

# Move sequences are enumerated as integers of this many bits
MAX_EXHAUSTIVE_STEPS = 64


def _require_non_empty(grid: Grid) -> None:
    if grid.rows <= 0 or grid.cols <= 0:
        raise ValueError(
            f"Grid must be non-empty\n"
            f"  Got: {grid.rows} rows, {grid.cols} cols\n"
            f"  Both dimensions must be at least 1"
        )


# =============================================================================
# Path State
# =============================================================================


class Path:
    """A partially built path, positioned at the cell it has reached so far."""

    def __init__(self, grid: Grid) -> None:
        _require_non_empty(grid)
        if grid.get(0, 0) == CellState.ICEBERG:
            raise ValueError("Cannot start a path: the origin (0, 0) is an iceberg")
        self.grid = grid
        self.final_row = 0
        self.final_col = 0
        self.steps = 0

    def _target(self, direction: StepDirection) -> tuple[int, int]:
        match direction:
            case StepDirection.RIGHT:
                return (self.final_row, self.final_col + 1)
            case StepDirection.DOWN:
                return (self.final_row + 1, self.final_col)
        raise ValueError(f"Unknown step direction: {direction}")

    def is_step_valid(self, direction: StepDirection) -> bool:
        """Whether stepping in direction stays on the grid and lands on open water."""
        row, col = self._target(direction)
        if row >= self.grid.rows or col >= self.grid.cols:
            return False
        return self.grid.get(row, col) == CellState.OPEN

    def add_step(self, direction: StepDirection) -> None:
        """Move one cell in direction. The step must be valid."""
        if not self.is_step_valid(direction):
            raise ValueError(
                f"Invalid step {direction.name} from ({self.final_row}, {self.final_col})\n"
                f"  Check is_step_valid() before calling add_step()"
            )
        self.final_row, self.final_col = self._target(direction)
        self.steps += 1


# =============================================================================
# Exhaustive Counter
# =============================================================================


def count_paths_exhaustive(grid: Grid) -> int:
    """
    Count iceberg-avoiding paths by trying every move sequence.

    Every path has exactly steps = rows + cols - 2 moves. Each integer in
    [0, 2**steps) encodes one candidate sequence: bit k (least significant
    first) is 1 for a right move and 0 for a down move. Moves that would leave
    the grid or hit an iceberg are skipped, and a candidate counts only if it
    ends exactly on the bottom-right cell.

    Runs in O(2**steps * steps) time, so it is only practical for small grids.

    Raises:
        ValueError: If the grid is empty or steps >= MAX_EXHAUSTIVE_STEPS
    """
    _require_non_empty(grid)

    steps = grid.rows + grid.cols - 2
    if steps >= MAX_EXHAUSTIVE_STEPS:
        raise ValueError(
            f"Grid too large for exhaustive counting\n"
            f"  Grid: {grid.rows}x{grid.cols} ({steps} steps)\n"
            f"  Limit: fewer than {MAX_EXHAUSTIVE_STEPS} steps\n"
            f"  Use count_paths_dynamic_programming() instead"
        )

    if grid.get(0, 0) == CellState.ICEBERG:
        logger.info("count_paths_exhaustive: origin is an iceberg, 0 paths")
        return 0

    logger.debug(
        "count_paths_exhaustive: %dx%d grid, %d steps, %d candidates",
        grid.rows,
        grid.cols,
        steps,
        1 << steps,
    )

    destination = (grid.rows - 1, grid.cols - 1)
    count = 0
    for bits in range(1 << steps):
        candidate = Path(grid)
        for k in range(steps):
            direction = StepDirection.RIGHT if (bits >> k) & 1 else StepDirection.DOWN
            if candidate.is_step_valid(direction):
                candidate.add_step(direction)
        if (candidate.final_row, candidate.final_col) == destination:
            count += 1

    logger.info(
        "count_paths_exhaustive: %dx%d grid -> %d paths", grid.rows, grid.cols, count
    )
    return count


# =============================================================================
# Dynamic Programming Counter
# =============================================================================


def _fill_count_table(grid: Grid) -> list[int]:
    """Fill the row-major table of path counts, indexed by row * cols + col."""
    _require_non_empty(grid)

    rows, cols = grid.rows, grid.cols
    table = [0] * (rows * cols)
    table[0] = 1

    for i in range(rows):
        for j in range(cols):
            index = i * cols + j
            if grid.get(i, j) == CellState.ICEBERG:
                table[index] = 0
                continue
            if i == 0 and j == 0:
                continue  # keep the seed
            from_above = table[index - cols] if i > 0 else 0
            from_left = table[index - 1] if j > 0 else 0
            table[index] = from_above + from_left

    logger.debug("_fill_count_table: filled %d cells", rows * cols)
    return table


def count_paths_dynamic_programming(grid: Grid) -> int:
    """
    Count iceberg-avoiding paths with a path-count table.

    The number of ways to reach a cell is the number of ways to reach the cell
    above plus the number of ways to reach the cell to its left, or zero if the
    cell is an iceberg. Runs in O(rows * cols) time and space.

    Raises:
        ValueError: If the grid is empty
    """
    table = _fill_count_table(grid)
    count = table[-1]
    logger.info(
        "count_paths_dynamic_programming: %dx%d grid -> %d paths", grid.rows, grid.cols, count
    )
    return count


def path_count_table(grid: Grid) -> list[list[int]]:
    """Return the number of paths from the origin to every cell, row by row."""
    table = _fill_count_table(grid)
    cols = grid.cols
    return [table[r * cols:(r + 1) * cols] for r in range(grid.rows)]
