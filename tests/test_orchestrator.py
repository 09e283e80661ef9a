from __future__ import annotations

import json
from dataclasses import replace
from typing import List, Sequence

import pytest

from contracts.errors import (
    OUTCOME_STATUSES,
    STATUS_FRONTIER_EXHAUSTED,
    STATUS_SOLVED,
    STATUS_UNSOLVED,
    PuzzleInputError,
)
from grid_io import parse_grid, to_string
from orchestrator import log as search_log
from orchestrator.orchestrator import EVENT_NAME, puzzle_digest, run_search
from orchestrator.task import TASK_EXHAUSTED, CandidateTask, Result
from project_config import SearchSettings

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


def _settings(tmp_path=None, **overrides) -> SearchSettings:
    values = {
        "bfs_depth": 3,
        "frontier_limit": 0,
        "events_enabled": False,
        "events_dir": str(tmp_path or "logs/search"),
        "events_max_bytes": 1024 * 1024,
        "report_style": "plain",
    }
    values.update(overrides)
    return SearchSettings(**values)


class RecordingExecutor:
    """Marks every candidate exhausted without solving it."""

    def __init__(self) -> None:
        self.seen: List[int] = []
        self.closed = False

    def submit(self, tasks: Sequence[CandidateTask]) -> List[Result]:
        self.seen.extend(task.index for task in tasks)
        return [Result(task=task, status=TASK_EXHAUSTED) for task in tasks]

    def shutdown(self) -> None:
        self.closed = True


def test_run_search_solves_and_leaves_input_untouched() -> None:
    board = parse_grid(PUZZLE)
    outcome = run_search(board, _settings())

    assert outcome.status == STATUS_SOLVED
    assert outcome.solved
    assert to_string(outcome.solution) == PUZZLE_SOLUTION
    assert board == parse_grid(PUZZLE)
    assert outcome.frontier_size >= 1
    assert 1 <= outcome.candidates_tried <= outcome.frontier_size
    assert len(outcome.stats.rounds) == 3
    assert outcome.puzzle_digest == puzzle_digest(board)
    assert len(outcome.puzzle_digest) == 64


@pytest.mark.parametrize("depth, limit", [(0, 0), (1, 0), (10, 0), (60, 200)])
def test_bfs_depth_does_not_change_the_answer(depth: int, limit: int) -> None:
    outcome = run_search(parse_grid(PUZZLE), _settings(bfs_depth=depth, frontier_limit=limit))
    assert to_string(outcome.solution) == PUZZLE_SOLUTION


def test_executor_sees_every_candidate_in_order() -> None:
    executor = RecordingExecutor()
    outcome = run_search(parse_grid(PUZZLE), _settings(bfs_depth=2), executor=executor)

    assert outcome.status == STATUS_UNSOLVED
    assert outcome.solution is None
    assert executor.seen == list(range(outcome.frontier_size))
    assert executor.closed


def test_empty_generation_is_reported_distinctly() -> None:
    # Index 0 only admits 1, after which index 9 admits nothing.
    board = parse_grid(
        "023456789"
        "046789123"
        "789123456"
        "214365897"
        "365897214"
        "897214365"
        "531642978"
        "602978531"
        "978531642"
    )
    outcome = run_search(board, _settings(bfs_depth=5))

    assert outcome.status == STATUS_FRONTIER_EXHAUSTED
    assert outcome.frontier_size == 0
    assert outcome.candidates_tried == 0


def test_conflicting_givens_are_unsolved_without_search() -> None:
    board = parse_grid(PUZZLE)
    board[2] = 5  # second 5 in row 0
    outcome = run_search(board, _settings())

    assert outcome.status == STATUS_UNSOLVED
    assert outcome.stats.rounds == []


@pytest.mark.parametrize(
    "board, code",
    [
        ([0] * 80, "bad-shape"),
        ([0] * 80 + [10], "bad-value"),
        ([0] * 80 + [-1], "bad-value"),
    ],
)
def test_invalid_boards_raise_before_search(board, code) -> None:
    with pytest.raises(PuzzleInputError) as excinfo:
        run_search(board, _settings())
    assert excinfo.value.code == code


def test_settings_resolved_from_env_when_omitted() -> None:
    outcome = run_search(parse_grid(PUZZLE), env={"CLI_SUDOKU_BFS_DEPTH": "1"})
    assert outcome.solved
    assert len(outcome.stats.rounds) == 1


def test_run_event_is_logged_when_enabled(tmp_path) -> None:
    settings = _settings(tmp_path, events_enabled=True)
    outcome = run_search(parse_grid(PUZZLE), settings)

    path = search_log.current_log_path()
    assert path is not None and path.is_relative_to(tmp_path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == EVENT_NAME
    assert event["run_id"] == outcome.run_id
    assert event["status"] == STATUS_SOLVED
    assert event["solution"] == PUZZLE_SOLUTION
    assert event["bfs_depth"] == 3
    assert event["ts"].endswith("Z")


def test_outcome_rejects_unknown_status() -> None:
    outcome = run_search(parse_grid(PUZZLE), _settings())
    assert outcome.status in OUTCOME_STATUSES
    with pytest.raises(ValueError):
        replace(outcome, status="maybe")
