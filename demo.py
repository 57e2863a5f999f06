"""
Demo comparing the exhaustive and dynamic programming path counters.

Usage:
    python demo.py [seed] [-v]

Generates random grids of growing size, renders each one, and reports the
count and running time of both counters side by side.
"""

from __future__ import annotations

import logging
import random
import sys
import time
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ascii_render import render_count_table, render_grid
from grid_parser import parse_grid
from grid_types import Grid, random_grid
from ices import count_paths_dynamic_programming, count_paths_exhaustive

# (rows, cols) of the random grids to time; exhaustive is skipped past this many steps
SIZES = [(2, 2), (3, 3), (4, 5), (6, 6), (8, 8), (10, 10), (12, 12), (30, 30)]
EXHAUSTIVE_STEP_LIMIT = 18


def _timed(fn: Callable[[Grid], int], grid: Grid) -> tuple[int, float]:
    start = time.perf_counter()
    result = fn(grid)
    return result, time.perf_counter() - start


def worked_example(console: Console) -> None:
    """Show the 3x3 example with an iceberg in the centre."""
    grid = parse_grid("...|.X.|...")
    console.print(Text.from_ansi(render_grid(grid, cell_width=3, title="grid")))
    console.print(Text.from_ansi(render_count_table(grid, title="paths")))
    console.print(
        f"exhaustive={count_paths_exhaustive(grid)}  "
        f"dynamic programming={count_paths_dynamic_programming(grid)}"
    )
    console.print()


def comparison(console: Console, rng: random.Random) -> None:
    """Time both counters on random grids and print a summary table."""
    table = Table(title="Iceberg-avoiding paths")
    table.add_column("Grid", justify="right")
    table.add_column("Icebergs", justify="right")
    table.add_column("Exhaustive", justify="right")
    table.add_column("Time (s)", justify="right")
    table.add_column("Dynamic prog.", justify="right")
    table.add_column("Time (s)", justify="right")
    table.add_column("Agree", justify="center")

    for rows, cols in SIZES:
        grid = random_grid(rows, cols, rng)
        dp_count, dp_time = _timed(count_paths_dynamic_programming, grid)

        if rows + cols - 2 <= EXHAUSTIVE_STEP_LIMIT:
            ex_count, ex_time = _timed(count_paths_exhaustive, grid)
            ex_cells = (str(ex_count), f"{ex_time:.4f}")
            agree = "[green]✓[/green]" if ex_count == dp_count else "[bold red]✗[/bold red]"
        else:
            ex_cells = ("-", "-")
            agree = "[dim]n/a[/dim]"

        table.add_row(
            f"{rows}x{cols}",
            str(grid.iceberg_count),
            *ex_cells,
            str(dp_count),
            f"{dp_time:.6f}",
            agree,
        )

    console.print(table)


def main(seed: int) -> None:
    console = Console()
    console.print(Panel(f"Random seed: {seed}", title="Iceberg avoiding demo", border_style="green"))
    worked_example(console)
    comparison(console, random.Random(seed))


if __name__ == "__main__":
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    if "-v" in sys.argv[1:]:
        # Show the counters' log output
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    main(int(args[0]) if args else 2024)
