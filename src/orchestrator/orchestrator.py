"""Hybrid Sudoku pipeline (Grid -> Frontier -> Backtracking -> Outcome)."""

from __future__ import annotations

import argparse
import hashlib
import logging
import os
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import grid_io
from contracts.errors import (
    OUTCOME_STATUSES,
    STATUS_FRONTIER_EXHAUSTED,
    STATUS_SOLVED,
    STATUS_UNSOLVED,
    ConfigError,
    PuzzleInputError,
    input_error,
    make_issue,
)
from project_config import SearchSettings, get_section, resolve_path, resolve_search_settings
from sudoku_solver import CELL_COUNT, Board, SearchStats, expand_frontier, find_conflicts

from . import log as search_log
from .executor import Executor, SequentialExecutor
from .task import CandidateTask

_LOGGER = logging.getLogger(__name__)

EVENT_NAME = "sudoku.search.v1"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one end-to-end search."""

    run_id: str
    status: str
    solution: Optional[Board]
    frontier_size: int
    candidates_tried: int
    elapsed_ms: int
    puzzle_digest: str
    stats: SearchStats = field(default_factory=SearchStats)

    def __post_init__(self) -> None:
        if self.status not in OUTCOME_STATUSES:
            raise ValueError(f"unknown outcome status {self.status!r}")

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED

    def to_payload(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "status": self.status,
            "solution": None if self.solution is None else grid_io.to_string(self.solution),
            "frontier_size": self.frontier_size,
            "candidates_tried": self.candidates_tried,
            "elapsed_ms": self.elapsed_ms,
            "puzzle_digest": self.puzzle_digest,
            "stats": self.stats.to_payload(),
        }


def puzzle_digest(board: Sequence[int]) -> str:
    return hashlib.sha256(grid_io.to_string(board).encode("ascii")).hexdigest()


def _check_shape(board: Sequence[int]) -> Board:
    if len(board) != CELL_COUNT:
        raise input_error(
            make_issue("bad-shape", f"expected {CELL_COUNT} cells, got {len(board)}")
        )
    for index, value in enumerate(board):
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 9:
            raise input_error(
                make_issue("bad-value", f"cell {index}: {value!r} is not in 0..9", index)
            )
    return list(board)


def merge_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    env: Dict[str, str] = {str(k): str(v) for k, v in os.environ.items()}
    if overrides:
        env.update({str(k): str(v) for k, v in overrides.items()})
    return env


def _record(outcome: SearchOutcome, settings: SearchSettings) -> None:
    if not settings.events_enabled:
        return
    search_log.configure(settings.events_dir, max_bytes=settings.events_max_bytes)
    payload = outcome.to_payload()
    payload["bfs_depth"] = settings.bfs_depth
    payload["frontier_limit"] = settings.frontier_limit
    path = search_log.append_event(EVENT_NAME, payload)
    _LOGGER.debug("run %s recorded in %s", outcome.run_id, path)


def run_search(
    board: Sequence[int],
    settings: SearchSettings | None = None,
    *,
    executor: Executor | None = None,
    env: Mapping[str, str] | None = None,
) -> SearchOutcome:
    """Solve ``board`` with a breadth-first warm start and backtracking.

    ``board`` is not modified. When ``settings`` is omitted they are resolved
    from the configuration and ``env`` (see :func:`resolve_search_settings`).
    """

    initial = _check_shape(board)
    if settings is None:
        settings = resolve_search_settings(env)
    if executor is None:
        executor = SequentialExecutor()

    run_id = f"run-{uuid.uuid4().hex[:12]}"
    digest = puzzle_digest(initial)
    stats = SearchStats()
    started = time.perf_counter()

    def finish(status: str, solution: Optional[Board], frontier_size: int, tried: int) -> SearchOutcome:
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        outcome = SearchOutcome(
            run_id=run_id,
            status=status,
            solution=solution,
            frontier_size=frontier_size,
            candidates_tried=tried,
            elapsed_ms=elapsed_ms,
            puzzle_digest=digest,
            stats=stats,
        )
        _LOGGER.info(
            "run %s: %s (frontier=%d, tried=%d, %d ms)",
            run_id,
            status,
            frontier_size,
            tried,
            elapsed_ms,
        )
        _record(outcome, settings)
        return outcome

    conflicts = find_conflicts(initial)
    if conflicts:
        a, b = conflicts[0]
        _LOGGER.warning(
            "givens conflict: cells %d and %d both hold %d (%d conflicting pairs)",
            a,
            b,
            initial[a],
            len(conflicts),
        )
        return finish(STATUS_UNSOLVED, None, 0, 0)

    generation = expand_frontier(
        initial, settings.bfs_depth, limit=settings.frontier_limit, stats=stats
    )
    if not generation:
        return finish(STATUS_FRONTIER_EXHAUSTED, None, 0, 0)

    tasks = [CandidateTask(index=i, board=candidate) for i, candidate in enumerate(generation)]
    try:
        results = executor.submit(tasks)
    finally:
        executor.shutdown()

    solution: Optional[Board] = None
    for result in results:
        stats.assignments += result.stats.assignments
        stats.backtracks += result.stats.backtracks
        if result.solved:
            solution = result.solution

    status = STATUS_SOLVED if solution is not None else STATUS_UNSOLVED
    return finish(status, solution, len(generation), len(results))


def solve_file(path: str, settings: SearchSettings | None = None, **kwargs: Any) -> SearchOutcome:
    """Read ``path`` and run :func:`run_search` on it."""

    return run_search(grid_io.read_puzzle(path), settings, **kwargs)


def cli_overrides(args: argparse.Namespace) -> Dict[str, str]:
    payload: Dict[str, str] = {}
    if getattr(args, "bfs_depth", None) is not None:
        payload["CLI_SUDOKU_BFS_DEPTH"] = str(args.bfs_depth)
    if getattr(args, "frontier_limit", None) is not None:
        payload["CLI_SUDOKU_FRONTIER_LIMIT"] = str(args.frontier_limit)
    if getattr(args, "log_events", None) is True:
        payload["CLI_SUDOKU_LOG_EVENTS"] = "1"
    elif getattr(args, "log_events", None) is False:
        payload["CLI_SUDOKU_LOG_EVENTS"] = "0"
    if getattr(args, "events_dir", None):
        payload["CLI_SUDOKU_EVENTS_DIR"] = str(args.events_dir)
    if getattr(args, "style", None):
        payload["CLI_SUDOKU_REPORT_STYLE"] = str(args.style)
    return payload


def configure_logging(verbose: bool = False) -> None:
    level_name = "DEBUG" if verbose else str(get_section("logging.level", "INFO"))
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def add_search_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the search override flags shared by the CLI entry points."""

    parser.add_argument(
        "--bfs-depth",
        dest="bfs_depth",
        type=int,
        help="Number of breadth-first rounds before backtracking.",
    )
    parser.add_argument(
        "--frontier-limit",
        dest="frontier_limit",
        type=int,
        help="Stop breadth-first expansion once a generation reaches this size (0 = unbounded).",
    )
    parser.add_argument(
        "--log-events",
        dest="log_events",
        action="store_true",
        help="Append a JSONL run event for every search.",
    )
    parser.add_argument(
        "--no-log-events",
        dest="log_events",
        action="store_false",
        help="Disable run events explicitly.",
    )
    parser.set_defaults(log_events=None)
    parser.add_argument(
        "--events-dir",
        dest="events_dir",
        help="Directory receiving run events.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku (breadth-first warm start + backtracking)")
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Puzzle file with 81 digits (0 = empty). Defaults to search.input_path.",
    )
    parser.add_argument(
        "--style",
        choices=("plain", "boxed"),
        default=None,
        help="Board rendering style.",
    )
    add_search_arguments(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.verbose)
        settings = resolve_search_settings(merge_env(cli_overrides(args)))
        if args.input:
            path = args.input
        else:
            configured = get_section("search").get("input_path")
            if not configured:
                raise ConfigError("no-input", "no puzzle file given and search.input_path is not set")
            path = resolve_path(configured)
        board = grid_io.read_puzzle(path)
    except (ConfigError, PuzzleInputError) as exc:
        parser.error(str(exc))

    print("Initial Board:")
    print(grid_io.format_board(board, settings.report_style))
    print()

    outcome = run_search(board, settings)

    if outcome.solution is not None:
        print("Solved Board:")
        print(grid_io.format_board(outcome.solution, settings.report_style))
        print()
    print(f"Execution time: {outcome.elapsed_ms} ms")
    if not outcome.solved:
        print("No solution found.")
        return 1
    return 0


__all__ = [
    "EVENT_NAME",
    "SearchOutcome",
    "add_search_arguments",
    "build_parser",
    "cli_overrides",
    "configure_logging",
    "main",
    "merge_env",
    "puzzle_digest",
    "run_search",
    "solve_file",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
