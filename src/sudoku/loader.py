import json
import os
from typing import Any, Dict, List, Optional

import pandas as pd

from .parser import CELL_COUNT

PUZZLE_COLUMNS = ("puzzle", "quizzes", "quiz", "question")
SOLUTION_COLUMNS = ("solution", "solutions", "answer")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .csv, .parquet, .json, .jsonl and plain text.
    Returns a list of records: {"id", "puzzle", "solution"} (solution may be None).
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = os.path.splitext(os.path.basename(file_path))[0]

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _first_key(record: Dict[str, Any], keys) -> Optional[str]:
        for key in keys:
            if key in record:
                return key
        return None

    def _normalize_record(record: Any, index: int) -> Optional[Dict[str, Any]]:
        if _is_nonempty_str(record):
            record = {"puzzle": record}
        if not isinstance(record, dict):
            return None

        puzzle_key = _first_key(record, PUZZLE_COLUMNS)
        puzzle = record.get(puzzle_key) if puzzle_key else None
        if not _is_nonempty_str(puzzle):
            return None

        solution_key = _first_key(record, SOLUTION_COLUMNS)
        solution = record.get(solution_key) if solution_key else None

        raw_id = record.get("id")
        return {
            "id": str(raw_id) if raw_id is not None else f"{stem}-{index}",
            "puzzle": puzzle.strip(),
            "solution": solution.strip() if _is_nonempty_str(solution) else None,
        }

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        data = []
        for index, record in enumerate(records):
            normalized = _normalize_record(record, index)
            if normalized is not None:
                data.append(normalized)
        return data

    def _read_lines(path: str) -> List[Any]:
        items = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    items.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
        return items

    # Case 1: Tabular files (Kaggle-style "quizzes,solutions" dumps)
    if file_path.endswith((".csv", ".parquet")):
        if file_path.endswith(".csv"):
            # Keep leading zeros: puzzle strings must not be parsed as numbers.
            df = pd.read_csv(file_path, dtype=str)
        else:
            df = pd.read_parquet(file_path)
        records = df.to_dict(orient="records")
        if "id" not in df.columns:
            for index, record in enumerate(records):
                record["id"] = f"{stem}-{index}"
        return _normalize_all(records)

    # Case 2: JSON File (array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            return _normalize_all(_read_lines(file_path))
        if isinstance(payload, list):
            return _normalize_all(payload)
        return _normalize_all([payload])

    # Case 3: JSONL File
    if file_path.endswith(".jsonl"):
        return _normalize_all(_read_lines(file_path))

    # Case 4: Plain text, 81 symbols per puzzle, '#' comment lines
    with open(file_path, "r", encoding="utf-8") as f:
        body = "".join(
            "".join(line.split())
            for line in f
            if not line.lstrip().startswith("#")
        )
    if len(body) % CELL_COUNT:
        raise ValueError(
            f"{file_path}: trailing puzzle has {len(body) % CELL_COUNT} of {CELL_COUNT} cells"
        )
    chunks = [body[i:i + CELL_COUNT] for i in range(0, len(body), CELL_COUNT)]
    return _normalize_all(chunks)
