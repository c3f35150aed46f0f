"""Grid model, propagation engine, parsing and loading for 9x9 symbol puzzles."""

from .cell import Cell
from .grid import Axis, Box, Grid, Line
from .parser import parse_grid, parse_puzzle

__all__ = [
    "Cell",
    "Grid",
    "Line",
    "Box",
    "Axis",
    "parse_grid",
    "parse_puzzle",
]
