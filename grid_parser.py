"""
Grid parsing utilities.

Grids are written one character per cell:
- '.' is an open cell
- 'X' (or 'x') is an iceberg
Rows are separated by '|' or by newlines.
"""

from __future__ import annotations

from grid_types import CellState, Grid

__all__ = ["parse_grid", "format_grid"]

_CELL_CHARS: dict[str, CellState] = {
    ".": CellState.OPEN,
    "X": CellState.ICEBERG,
    "x": CellState.ICEBERG,
}


def parse_grid(definition: str) -> Grid:
    """
    Parse a grid from its text form.

    Example:
        "..X|...|X.."
        Creates a 3x3 grid with icebergs at (0, 2) and (2, 0).

    The same grid may be written across several lines; blank lines and
    leading/trailing whitespace on each line are ignored.

    Args:
        definition: Text form of the grid

    Returns:
        The parsed Grid

    Raises:
        ValueError: On an empty definition, an unknown character, or rows of
            different lengths
    """
    row_strings = [
        row.strip()
        for line in definition.strip().split("\n")
        for row in line.split("|")
    ]
    row_strings = [row for row in row_strings if row]

    if not row_strings:
        raise ValueError("Empty grid definition: a grid needs at least one row")

    rows: list[tuple[CellState, ...]] = []
    for row_idx, row_str in enumerate(row_strings):
        cells: list[CellState] = []
        for col_idx, char in enumerate(row_str):
            if char not in _CELL_CHARS:
                raise ValueError(
                    f"Invalid character '{char}' in grid\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: '.' (open), 'X' or 'x' (iceberg)"
                )
            cells.append(_CELL_CHARS[char])
        rows.append(tuple(cells))

    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid definition\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)

    return Grid(tuple(rows))


def format_grid(grid: Grid) -> str:
    """Inverse of parse_grid: write a grid in the '|'-separated text form."""
    return "|".join("".join(cell.value for cell in row) for row in grid.cells)
