"""9x9 grid state plus the propagation passes and the fixpoint solve loop."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .cell import SYMBOLS, Cell, mask_to_symbols, symbol_bit
from src.utils.trace import Tracer, get_tracer

SIZE = 9
BOX_SIZE = 3

Coordinate = Tuple[int, int]


class Axis(Enum):
    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True)
class Line:
    """A row or a column, selected by axis and index."""

    axis: Axis
    index: int

    def coordinates(self) -> List[Coordinate]:
        if self.axis is Axis.ROW:
            return [(self.index, i) for i in range(SIZE)]
        return [(i, self.index) for i in range(SIZE)]

    def __str__(self) -> str:
        return f"{self.axis.value} {self.index}"


@dataclass(frozen=True)
class Box:
    """A 3x3 box, identified by its top-left coordinate."""

    top: int
    left: int

    def coordinates(self) -> List[Coordinate]:
        return [
            (self.top + i, self.left + j)
            for i in range(BOX_SIZE)
            for j in range(BOX_SIZE)
        ]

    def __str__(self) -> str:
        return f"box ({self.top}, {self.left})"


Unit = Union[Line, Box]


class Grid:
    """
    Owns all 81 cells. Units are views made of coordinates into the single
    cell array, so an assignment made while walking one unit is visible to
    every later unit in the same pass.
    """

    def __init__(self, initial: Optional[Sequence[Sequence[int]]] = None):
        self._cells: List[List[Cell]] = [[Cell() for _ in range(SIZE)] for _ in range(SIZE)]
        self.rounds = 0
        if initial is None:
            return

        rows = [list(row) for row in initial]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Grid input must be 9 rows of 9 symbols")

        tracer = get_tracer()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value != 0:
                    # Clues are not checked against each other.
                    self._cells[r][c].assign(value)
                    tracer.log_assign(r, c, value, strategy="clue")

    def __getitem__(self, position: Coordinate) -> Cell:
        row, column = position
        return self._cells[row][column]

    # --------------------------
    # Units
    # --------------------------
    @staticmethod
    def rows() -> List[Line]:
        return [Line(Axis.ROW, i) for i in range(SIZE)]

    @staticmethod
    def columns() -> List[Line]:
        return [Line(Axis.COLUMN, i) for i in range(SIZE)]

    @staticmethod
    def boxes() -> List[Box]:
        return [
            Box(BOX_SIZE * i, BOX_SIZE * j)
            for i in range(BOX_SIZE)
            for j in range(BOX_SIZE)
        ]

    def units(self) -> Iterator[Unit]:
        """Every row, then every column, then every box."""
        yield from self.rows()
        yield from self.columns()
        yield from self.boxes()

    def unit_cells(self, unit: Unit) -> List[Cell]:
        return [self[position] for position in unit.coordinates()]

    def placed_mask(self, unit: Unit) -> int:
        """Union of the values already fixed in `unit`, as a symbol mask."""
        mask = 0
        for cell in self.unit_cells(unit):
            if cell.is_assigned:
                mask |= symbol_bit(cell.value)
        return mask

    def candidate_positions(self, unit: Unit) -> Dict[int, List[Coordinate]]:
        """For each symbol, the unassigned cells of `unit` that may still hold it."""
        positions: Dict[int, List[Coordinate]] = {symbol: [] for symbol in SYMBOLS}
        for position in unit.coordinates():
            cell = self[position]
            if cell.is_assigned:
                continue
            for symbol in cell.candidates():
                positions[symbol].append(position)
        return positions

    # --------------------------
    # Propagation
    # --------------------------
    def eliminate_unit(self, unit: Unit, tracer: Optional[Tracer] = None) -> None:
        tracer = tracer or get_tracer()
        mask = self.placed_mask(unit)
        if not mask:
            return
        # Solved cells are included; their exclusion set is already full.
        for cell in self.unit_cells(unit):
            cell.exclude(mask)
        tracer.log_elimination(str(unit), mask_to_symbols(mask))

    def eliminate_peers(self, tracer: Optional[Tracer] = None) -> None:
        """Exclude every placed symbol from the rest of its row, column and box."""
        tracer = tracer or get_tracer()
        for unit in self.units():
            self.eliminate_unit(unit, tracer)

    def resolve_naked_singles(self, tracer: Optional[Tracer] = None) -> bool:
        tracer = tracer or get_tracer()
        changed = False
        for r in range(SIZE):
            for c in range(SIZE):
                cell = self._cells[r][c]
                if cell.resolve_if_unique():
                    tracer.log_assign(r, c, cell.value, strategy="naked_single")
                    changed = True
        return changed

    def resolve_hidden_singles_in(self, unit: Unit, tracer: Optional[Tracer] = None) -> bool:
        """
        Place every symbol that has exactly one legal cell left in `unit`.

        Candidate positions are gathered once up front. On a contradictory grid
        two symbols can name the same cell; the later one wins.
        """
        tracer = tracer or get_tracer()
        placed = self.placed_mask(unit)
        positions = self.candidate_positions(unit)
        changed = False
        for symbol in SYMBOLS:
            if placed & symbol_bit(symbol):
                continue
            holders = positions[symbol]
            if len(holders) != 1:
                continue
            row, column = holders[0]
            self._cells[row][column].assign(symbol)
            tracer.log_assign(row, column, symbol, strategy="hidden_single", unit=str(unit))
            changed = True
        return changed

    def resolve_hidden_singles(self, tracer: Optional[Tracer] = None) -> bool:
        tracer = tracer or get_tracer()
        changed = False
        for unit in self.units():
            changed |= self.resolve_hidden_singles_in(unit, tracer)
        return changed

    def solve(self) -> bool:
        """
        Run propagation rounds until every cell is assigned (True) or a round
        places nothing (False). A False grid may still hold partial progress.
        """
        tracer = get_tracer()
        while not self.is_solved():
            self.rounds += 1
            tracer.log_round(self.rounds, self.assigned_count())
            self.eliminate_peers(tracer)
            if self.resolve_naked_singles(tracer):
                continue
            if self.resolve_hidden_singles(tracer):
                continue
            tracer.log_stuck(self.rounds, self.assigned_count())
            return False

        tracer.log_solution_found(assigned_count=SIZE * SIZE)
        return True

    # --------------------------
    # Queries and rendering
    # --------------------------
    def assigned_count(self) -> int:
        return sum(1 for row in self._cells for cell in row if cell.is_assigned)

    def is_solved(self) -> bool:
        return all(cell.is_assigned for row in self._cells for cell in row)

    def values(self) -> List[List[int]]:
        return [[cell.value for cell in row] for row in self._cells]

    def to_string(self) -> str:
        return "".join(str(cell) for row in self._cells for cell in row)

    def debug_str(self) -> str:
        """Each cell as `value:[excluded symbols]`, rows separated by a blank line."""
        return "\n\n".join(
            "\n".join(cell.debug_str() for cell in row) for row in self._cells
        )

    def __str__(self) -> str:
        return "\n".join("".join(str(cell) for cell in row) for row in self._cells)
