"""CLI entrypoint: read puzzle(s), run the propagation solver, and report outcomes."""

import argparse
import csv
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from solver import solve_puzzle
from src.sudoku.grid import Grid
from src.sudoku.loader import load_puzzles
from src.sudoku.parser import normalize_puzzle_text
from src.utils.io import read_puzzle_text
from src.utils.trace import get_tracer, reset_tracer

SUPPORTED_SUFFIXES = [".txt", ".sdk", ".json", ".jsonl", ".parquet", ".csv"]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve 9x9 grid puzzles by constraint propagation")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Puzzle file or directory of puzzle files. Reads one puzzle from stdin when omitted.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for batch results")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every cell's value and excluded symbols instead of the plain grid.",
    )
    parser.add_argument("--trace", type=Path, default=None, help="Write the solver trace for a stdin puzzle as CSV")
    return parser.parse_args(argv)


def format_outcome(solved: bool) -> str:
    return "true" if solved else "false"


def format_result(grid: Grid, solved: bool, *, debug: bool = False) -> str:
    rendering = grid.debug_str() if debug else str(grid)
    return f"\n{rendering}\n{format_outcome(solved)}"


def solution_matches(grid: Grid, expected: Optional[str]) -> Optional[bool]:
    if not expected:
        return None
    try:
        return grid.to_string() == normalize_puzzle_text(expected)
    except ValueError:
        return False


def write_results_csv(results: List[Dict[str, Any]], output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "solution", "solved", "steps", "matches"])

        for r in results:
            matches = r.get("matches")
            writer.writerow([
                r["id"],
                r["solution"],
                format_outcome(r["solved"]),
                r["steps"],
                "" if matches is None else format_outcome(matches),
            ])


def collect_puzzles(input_path: Path) -> List[Dict[str, Any]]:
    if input_path.is_file():
        return load_puzzles(str(input_path))
    if input_path.is_dir():
        puzzles = []
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in SUPPORTED_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {input_path} is neither file nor directory")


def solve_batch(puzzles: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    results = []
    for puzzle in tqdm(puzzles, desc="Solving", unit="puzzle", disable=len(puzzles) < 2):
        reset_tracer()
        tracer = get_tracer()
        puzzle_id = puzzle.get("id", "unknown")

        try:
            grid, solved = solve_puzzle(puzzle)
            summary = tracer.summary()
            results.append({
                "id": puzzle_id,
                "solution": grid.to_string(),
                "solved": solved,
                "steps": summary["num_assignments"],
                "matches": solution_matches(grid, puzzle.get("solution")),
            })
        except Exception as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "solution": "",
                "solved": False,
                "steps": -1,
                "matches": None,
            })
    return results


def solve_stdin(stream, *, debug: bool = False, trace_path: Optional[Path] = None) -> bool:
    reset_tracer()
    text = read_puzzle_text(stream)
    grid, solved = solve_puzzle(text)
    print(format_result(grid, solved, debug=debug))
    if trace_path:
        get_tracer().to_csv(trace_path)
    return solved


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    input_path = args.input
    if input_path is None and os.environ.get("SUDOKU_DATA_PATH"):
        input_path = Path(os.environ["SUDOKU_DATA_PATH"])

    if input_path is None:
        solve_stdin(sys.stdin, debug=args.debug, trace_path=args.trace)
        return

    results = solve_batch(collect_puzzles(input_path))

    if args.output:
        write_results_csv(results, args.output)
    else:
        for r in results:
            print(f"{r['id']}: {r['solution']} {format_outcome(r['solved'])}")


if __name__ == "__main__":
    main()
