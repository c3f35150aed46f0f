import io
import sys
import tempfile
from pathlib import Path

from conftest import BLANK, EASY, SOLVED, to_text
from run import format_result, main, solution_matches, write_results_csv
from src.sudoku.grid import Grid

EASY_TEXT = to_text(EASY)
SOLVED_TEXT = to_text(SOLVED)


def _stdin_layout(rows):
    return "\n".join("".join(str(v) for v in row) for row in rows) + "\n"


def _raise_on_solve(puzzle):
    raise RuntimeError("boom")


def test_format_result_plain():
    grid = Grid(SOLVED)
    text = format_result(grid, True)
    lines = text.split("\n")
    assert lines[0] == ""
    assert lines[1:10] == ["".join(str(v) for v in row) for row in SOLVED]
    assert lines[10] == "true"


def test_format_result_debug():
    text = format_result(Grid(BLANK), False, debug=True)
    assert "0:[]" in text
    assert text.endswith("\nfalse")


def test_solution_matches():
    grid = Grid(SOLVED)
    assert solution_matches(grid, SOLVED_TEXT) is True
    assert solution_matches(grid, EASY_TEXT) is False
    assert solution_matches(grid, "123") is False
    assert solution_matches(grid, None) is None


def test_main_reads_puzzle_from_stdin(monkeypatch, capsys):
    monkeypatch.delenv("SUDOKU_DATA_PATH", raising=False)
    monkeypatch.setattr(sys, "stdin", io.StringIO(_stdin_layout(EASY)))

    main([])

    out = capsys.readouterr().out.rstrip("\n").split("\n")
    assert out[-1] == "true"
    assert all("0" not in line for line in out[-10:-1])


def test_main_reads_space_separated_rows_from_stdin(monkeypatch, capsys):
    monkeypatch.delenv("SUDOKU_DATA_PATH", raising=False)
    layout = "\n".join(" ".join(str(v) for v in row) for row in EASY) + "\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(layout))

    main([])

    out = capsys.readouterr().out.rstrip("\n").split("\n")
    assert out[-1] == "true"
    assert all(len(line) == 9 and "0" not in line for line in out[-10:-1])


def test_main_stdin_writes_trace(monkeypatch, tmp_path, capsys):
    monkeypatch.delenv("SUDOKU_DATA_PATH", raising=False)
    monkeypatch.setattr(sys, "stdin", io.StringIO(_stdin_layout(BLANK)))
    trace_path = tmp_path / "trace.csv"

    main(["--trace", str(trace_path)])

    out = capsys.readouterr().out
    assert "\nfalse\n" in out
    assert "Trace written to" in out
    content = trace_path.read_text()
    assert content.startswith("timestamp,step_number,action_type")
    assert "stuck" in content


def test_main_batch_csv_output():
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        (tmpdir_path / "a.txt").write_text(EASY_TEXT + "\n" + to_text(BLANK) + "\n")
        (tmpdir_path / "ignored.md").write_text("not a puzzle")
        output_path = tmpdir_path / "results.csv"

        main([str(tmpdir_path), "--output", str(output_path)])

        lines = output_path.read_text().splitlines()
        assert lines[0] == "id,solution,solved,steps,matches"
        assert lines[1].startswith("a-0,")
        assert ",true," in lines[1]
        assert lines[2] == f"a-1,{'0' * 81},false,0,"


def test_main_batch_reports_expected_solution(tmp_path, capsys):
    path = tmp_path / "given.csv"
    path.write_text(f"id,puzzle,solution\nfull,{SOLVED_TEXT},{SOLVED_TEXT}\n")
    output_path = tmp_path / "out.csv"

    main([str(path), "--output", str(output_path)])

    assert output_path.read_text().splitlines()[1] == f"full,{SOLVED_TEXT},true,0,true"


def test_main_batch_records_failures(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("run.solve_puzzle", _raise_on_solve)
    path = tmp_path / "one.txt"
    path.write_text(EASY_TEXT)

    main([str(path)])

    out = capsys.readouterr().out
    assert "ERROR: Failed to solve puzzle one-0: boom" in out
    assert "one-0:  false" in out


def test_main_uses_data_path_from_environment(monkeypatch, tmp_path, capsys):
    path = tmp_path / "env.txt"
    path.write_text(SOLVED_TEXT)
    monkeypatch.setenv("SUDOKU_DATA_PATH", str(path))

    main([])

    assert f"env-0: {SOLVED_TEXT} true" in capsys.readouterr().out


def test_write_results_csv(tmp_path):
    output_path = tmp_path / "results.csv"
    write_results_csv(
        [{"id": "p", "solution": SOLVED_TEXT, "solved": True, "steps": 3, "matches": None}],
        output_path,
    )
    assert output_path.read_text().splitlines() == [
        "id,solution,solved,steps,matches",
        f"p,{SOLVED_TEXT},true,3,",
    ]
