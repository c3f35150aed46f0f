"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts a pre-built Grid, puzzle text, a 9x9
array, or a raw puzzle dictionary compatible with `src.sudoku.parser.parse_puzzle`.
"""

from typing import Any, Tuple

from src.sudoku.grid import Grid
from src.sudoku.parser import parse_grid, parse_puzzle


def solve_puzzle(puzzle: Any) -> Tuple[Grid, bool]:
    """
    Solve a puzzle by propagation and return the grid together with the outcome.
    The grid is returned either way; when the outcome is False it may be partly filled.
    Accepts:
      - Grid instances (solved in place)
      - Strings (parsed via `parse_grid`)
      - 9x9 lists of symbols, 0 for blank
      - Raw puzzle dictionaries (parsed via `parse_puzzle`)

    Steps go to the global tracer and accumulate across calls; call
    `src.utils.trace.reset_tracer()` between puzzles (as run.py does) or
    `enable_tracing(False)` when solving many puzzles in one process.
    """
    if isinstance(puzzle, Grid):
        grid = puzzle
    elif isinstance(puzzle, str):
        grid = Grid(parse_grid(puzzle))
    elif isinstance(puzzle, dict):
        grid = parse_puzzle(puzzle)
    elif isinstance(puzzle, (list, tuple)):
        grid = Grid(puzzle)
    else:
        raise TypeError("solve_puzzle expects a Grid, puzzle text, 9x9 array or puzzle dictionary")

    return grid, grid.solve()


__all__ = ["solve_puzzle"]
