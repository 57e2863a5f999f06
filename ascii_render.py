"""
ASCII rendering for iceberg grids.

Provides two views:
1. render_grid - the cells themselves, icebergs highlighted
2. render_count_table - the number of paths reaching each cell
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import CellState, Grid
from ices import path_count_table

logger = logging.getLogger(__name__)


def _boxed(lines_content: list[list[str]], inner_width: int, title: str | None) -> list[str]:
    """Wrap pre-rendered cell rows in a box border with an optional centred title."""
    colorize: Callable[[str], str] = chalk.blue

    top = "┌" + "─" * inner_width + "┐"
    if title is not None and len(title) + 2 <= inner_width:
        label = f" {title} "
        title_start = (inner_width - len(label)) // 2
        top = "┌" + "─" * title_start + label + "─" * (inner_width - title_start - len(label)) + "┐"

    lines = [colorize(top)]
    for row in lines_content:
        lines.append(colorize("│") + "".join(row) + colorize("│"))
    lines.append(colorize("└" + "─" * inner_width + "┘"))
    return lines


def render_grid(grid: Grid, cell_width: int = 1, title: str | None = None) -> str:
    """
    Render a grid as a bordered block of characters.

    Open cells are shown as '.', icebergs as '#'. The origin and destination
    are highlighted with a white background.

    Args:
        grid: The grid to render
        cell_width: Characters per cell (default 1)
        title: Optional title drawn in the top border

    Returns:
        Rendered string, lines separated by newlines
    """
    if cell_width < 1:
        raise ValueError(f"cell_width must be at least 1, got {cell_width}")

    endpoints = {(0, 0), (grid.rows - 1, grid.cols - 1)}
    content: list[list[str]] = []

    for r_idx, row in enumerate(grid.cells):
        parts: list[str] = []
        for c_idx, cell in enumerate(row):
            match cell:
                case CellState.ICEBERG:
                    text = chalk.cyan("#".center(cell_width))
                case CellState.OPEN:
                    text = ".".center(cell_width)
            if (r_idx, c_idx) in endpoints:
                text = chalk.bgWhite.black(text)
            parts.append(text)
        content.append(parts)

    return "\n".join(_boxed(content, grid.cols * cell_width, title))


def render_count_table(grid: Grid, cell_width: int | None = None, title: str | None = None) -> str:
    """
    Render the path-count table of a grid.

    Each cell shows how many iceberg-avoiding paths reach it from the origin.
    Icebergs are shown as '#', unreachable open cells as '0' in red.

    Args:
        grid: The grid to analyze and render
        cell_width: Characters per cell; sized to the widest count when omitted
        title: Optional title drawn in the top border

    Returns:
        Rendered string, lines separated by newlines
    """
    table = path_count_table(grid)

    if cell_width is None:
        widest = max(len(str(count)) for row in table for count in row)
        cell_width = widest + 1
        logger.info("render_count_table: widest count has %d digits", widest)
    elif cell_width < 1:
        raise ValueError(f"cell_width must be at least 1, got {cell_width}")

    content: list[list[str]] = []
    for r_idx, row in enumerate(table):
        parts: list[str] = []
        for c_idx, count in enumerate(row):
            if grid.get(r_idx, c_idx) == CellState.ICEBERG:
                parts.append(chalk.cyan("#".center(cell_width)))
            elif count == 0:
                parts.append(chalk.red("0".rjust(cell_width)))
            else:
                parts.append(chalk.green(str(count).rjust(cell_width)))
        content.append(parts)

    return "\n".join(_boxed(content, grid.cols * cell_width, title))
