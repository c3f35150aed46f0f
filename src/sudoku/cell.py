"""Single grid position: a known value plus the symbols ruled out there."""

from dataclasses import dataclass
from typing import List

SYMBOLS = range(1, 10)

# Bit k set <=> symbol k excluded. Bit 0 and bits above 9 are never used.
ALL_EXCLUDED = 0b1111111110


def symbol_bit(symbol: int) -> int:
    return 1 << symbol


def mask_to_symbols(mask: int) -> List[int]:
    return [s for s in SYMBOLS if (mask >> s) & 1]


@dataclass
class Cell:
    """
    A cell moves from value 0 to a fixed symbol exactly once, either by direct
    assignment (clue or solver placement) or by resolving its last open
    candidate. Once assigned, `excluded` holds every symbol.
    """

    value: int = 0
    excluded: int = 0

    @property
    def is_assigned(self) -> bool:
        return self.value != 0

    def assign(self, value: int) -> None:
        if value not in SYMBOLS:
            raise ValueError(f"Symbol must be in 1..9, got {value!r}")
        self.value = value
        self.excluded = ALL_EXCLUDED

    def exclude(self, mask: int) -> None:
        if mask & ~ALL_EXCLUDED:
            raise ValueError(f"Mask {mask:#b} touches bits outside the nine symbols")
        self.excluded |= mask

    def candidates(self) -> List[int]:
        """Symbols not yet excluded, ascending. Empty for an assigned cell."""
        return [s for s in SYMBOLS if not (self.excluded >> s) & 1]

    def excluded_symbols(self) -> List[int]:
        return mask_to_symbols(self.excluded)

    def allows(self, symbol: int) -> bool:
        return not (self.excluded >> symbol) & 1

    def resolve_if_unique(self) -> bool:
        """
        Assign the only open candidate, if there is exactly one.
        Returns False without touching state when the cell is already assigned,
        still ambiguous, or has no candidates left (a contradiction, which is
        not reported separately).
        """
        if self.is_assigned:
            return False

        remaining = self.candidates()
        if len(remaining) != 1:
            return False
        self.assign(remaining[0])
        return True

    def debug_str(self) -> str:
        return f"{self.value}:{self.excluded_symbols()}"

    def __str__(self) -> str:
        return str(self.value)
