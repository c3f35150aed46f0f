"""Shared puzzles and grid checks for the test-suite."""

from typing import List

SOLVED = [
    [5, 4, 3, 1, 2, 8, 7, 9, 6],
    [7, 8, 2, 6, 4, 9, 1, 3, 5],
    [1, 6, 9, 3, 5, 7, 2, 8, 4],
    [9, 2, 1, 5, 6, 3, 8, 4, 7],
    [3, 7, 4, 2, 8, 1, 6, 5, 9],
    [6, 5, 8, 9, 7, 4, 3, 2, 1],
    [8, 3, 5, 7, 9, 6, 4, 1, 2],
    [2, 1, 7, 4, 3, 5, 9, 6, 8],
    [4, 9, 6, 8, 1, 2, 5, 7, 3],
]

EASY = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 2, 0, 5, 0, 9, 0],
    [0, 0, 6, 8, 0, 7, 1, 0, 0],
    [8, 0, 0, 1, 2, 3, 0, 0, 7],
    [4, 0, 0, 0, 0, 0, 0, 0, 3],
    [0, 5, 0, 7, 0, 4, 0, 6, 0],
    [0, 9, 4, 0, 1, 0, 7, 2, 0],
    [1, 0, 0, 0, 9, 0, 0, 0, 6],
    [5, 3, 0, 0, 0, 0, 0, 1, 9],
]

HARD = [
    [3, 0, 0, 8, 0, 0, 0, 2, 0],
    [0, 2, 0, 3, 0, 4, 6, 0, 0],
    [4, 0, 0, 0, 7, 0, 0, 0, 0],
    [9, 1, 0, 0, 0, 0, 0, 8, 6],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [2, 3, 0, 0, 0, 0, 0, 1, 4],
    [0, 0, 0, 0, 4, 0, 0, 0, 3],
    [0, 0, 5, 7, 0, 9, 0, 6, 0],
    [0, 7, 0, 0, 0, 6, 0, 0, 1],
]

BLANK = [[0] * 9 for _ in range(9)]


def to_text(rows: List[List[int]]) -> str:
    return "".join(str(v) for row in rows for v in row)


def has_no_duplicates(values: List[List[int]]) -> bool:
    """True when no nonzero symbol repeats in any row, column or box."""
    units = []
    units.extend(values)
    units.extend([values[r][c] for r in range(9)] for c in range(9))
    for top in range(0, 9, 3):
        for left in range(0, 9, 3):
            units.append([values[top + i][left + j] for i in range(3) for j in range(3)])

    for unit in units:
        placed = [v for v in unit if v]
        if len(placed) != len(set(placed)):
            return False
    return True


def keeps_clues(values: List[List[int]], clues: List[List[int]]) -> bool:
    return all(
        clues[r][c] == 0 or values[r][c] == clues[r][c]
        for r in range(9)
        for c in range(9)
    )
