"""Puzzle parser: convert 81-symbol puzzle text into grids.

Supports:
- one-line strings ("530070000600195000...")
- multi-line layouts with arbitrary whitespace between symbols
- '.', '_', '*' or any other non-digit as a blank
"""

from __future__ import annotations

from typing import Any, Dict, List

from .grid import SIZE, Grid

CELL_COUNT = SIZE * SIZE


def parse_grid(text: str) -> List[List[int]]:
    """
    Read the first 81 meaningful characters of `text` into a row-major 9x9
    array. Whitespace is skipped, '1'..'9' are clues, anything else is blank.
    Raises ValueError when fewer than 81 meaningful characters are present.
    """
    symbols: List[int] = []
    for char in text:
        if char.isspace():
            continue
        symbols.append(int(char) if char in "123456789" else 0)
        if len(symbols) == CELL_COUNT:
            break

    if len(symbols) < CELL_COUNT:
        raise ValueError(f"Expected {CELL_COUNT} cells, found {len(symbols)}")

    return [symbols[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


def normalize_puzzle_text(text: str) -> str:
    """Canonical 81-character form of a puzzle string: digits with '0' for blanks."""
    return "".join(str(v) for row in parse_grid(text) for v in row)


def parse_puzzle(puzzle_json: Dict[str, Any]) -> Grid:
    puzzle = puzzle_json.get("puzzle")
    if isinstance(puzzle, str):
        return Grid(parse_grid(puzzle))
    if isinstance(puzzle, (list, tuple)):
        return Grid(puzzle)
    raise ValueError(f"Puzzle record {puzzle_json.get('id', 'unknown')!r} has no puzzle text")
