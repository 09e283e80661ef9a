from __future__ import annotations

import json

import pytest

import project_config
from orchestrator import orchestrator
from tools.cli import orchestrate

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

PUZZLE_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def _puzzle_file(tmp_path, text=PUZZLE, name="puzzle.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_main_prints_initial_and_solved_boards(tmp_path, capsys):
    path = _puzzle_file(tmp_path)
    code = orchestrator.main([str(path), "--bfs-depth", "2", "--no-log-events"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Initial Board:\n5 3 0 0 7 0 0 0 0\n")
    assert "Solved Board:\n5 3 4 6 7 8 9 1 2\n" in out
    assert "Execution time: " in out
    assert "No solution found." not in out


def test_main_reports_no_solution(tmp_path, capsys):
    path = _puzzle_file(tmp_path, "55" + PUZZLE[2:])
    code = orchestrator.main([str(path), "--style", "boxed"])

    out = capsys.readouterr().out
    assert code == 1
    assert "| 5 5 . | . 7 . | . . . |" in out
    assert out.rstrip().endswith("No solution found.")


def test_main_rejects_malformed_input(tmp_path, capsys):
    path = _puzzle_file(tmp_path, PUZZLE[:40])
    with pytest.raises(SystemExit) as excinfo:
        orchestrator.main([str(path)])
    assert excinfo.value.code == 2
    assert "too-few-cells" in capsys.readouterr().err


def test_tools_solve_prints_payload(tmp_path, capsys):
    path = _puzzle_file(tmp_path)
    code = orchestrate.main(["solve", str(path), "--bfs-depth", "1"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["status"] == "solved"
    assert payload["solution"] == PUZZLE_SOLUTION
    assert len(payload["stats"]["rounds"]) == 1


def test_tools_batch_and_report(tmp_path, capsys):
    batch = _puzzle_file(tmp_path, f"# two puzzles\n{PUZZLE}\n{PUZZLE_SOLUTION}\n", "batch.txt")
    events_dir = tmp_path / "events"

    code = orchestrate.main(
        ["batch", str(batch), "--bfs-depth", "2", "--log-events", "--events-dir", str(events_dir)]
    )
    summaries = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [item["line"] for item in summaries] == [2, 3]
    assert all(item["status"] == "solved" for item in summaries)

    code = orchestrate.main(["report", str(events_dir)])
    summary = json.loads(capsys.readouterr().out)
    assert code == 0
    assert summary["total_runs"] == 2
    assert summary["status"] == {"solved": 2}


def test_tools_report_without_logs(tmp_path):
    with pytest.raises(SystemExit):
        orchestrate.main(["report", str(tmp_path)])


def test_main_without_input_or_configured_path(tmp_path, monkeypatch, capsys):
    config = tmp_path / "config.toml"
    config.write_text('[PUZZLE]\nsize = 9\nbox = 3\n\n[search]\nbfs_depth = 2\n', encoding="utf-8")
    monkeypatch.setenv("SUDOKU_HYBRID_CONFIG", str(config))
    project_config.reload()
    try:
        with pytest.raises(SystemExit) as excinfo:
            orchestrator.main([])
    finally:
        project_config.reload()
    assert excinfo.value.code == 2
    assert "no-input" in capsys.readouterr().err
