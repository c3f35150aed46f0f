"""Tracing module: logs propagation solver steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'eliminate', 'round', 'stuck', 'solution_found'
    row: Optional[int] = None
    column: Optional[int] = None
    value: Optional[int] = None
    strategy: Optional[str] = None  # 'clue', 'naked_single', 'hidden_single'
    unit: Optional[str] = None  # e.g. 'row 3', 'box (3, 6)'
    symbols: Optional[str] = None  # symbols excluded by an elimination
    round_number: Optional[int] = None
    assigned_count: Optional[int] = None
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_assign(self, row: int, column: int, value: int, strategy: str, unit: Optional[str] = None):
        """Log a cell assignment and the strategy that produced it."""
        if not self.enabled:
            return
        self._record('assign', row=row, column=column, value=value, strategy=strategy, unit=unit)

    def log_elimination(self, unit: str, symbols: List[int]):
        """Log placed symbols being excluded across a unit."""
        if not self.enabled:
            return
        self._record('eliminate', unit=unit, symbols=' '.join(str(s) for s in symbols))

    def log_round(self, round_number: int, assigned_count: int):
        """Log the start of a propagation round."""
        if not self.enabled:
            return
        self._record('round', round_number=round_number, assigned_count=assigned_count)

    def log_stuck(self, round_number: int, assigned_count: int):
        """Log a round that made no progress."""
        if not self.enabled:
            return
        self._record(
            'stuck',
            round_number=round_number,
            assigned_count=assigned_count,
            reason="No naked or hidden single found",
        )

    def log_solution_found(self, assigned_count: int):
        """Log when every cell is assigned."""
        if not self.enabled:
            return
        self._record('solution_found', assigned_count=assigned_count)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'row', 'column', 'value',
            'strategy', 'unit', 'symbols', 'round_number', 'assigned_count', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        strategy_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1
            if step.action_type == 'assign' and step.strategy != 'clue':
                strategy_counts[step.strategy] = strategy_counts.get(step.strategy, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'strategy_counts': strategy_counts,
            # Clues are recorded as assignments too; only count solver placements.
            'num_assignments': sum(strategy_counts.values()),
            'num_rounds': sum(1 for s in self.steps if s.action_type == 'round'),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
