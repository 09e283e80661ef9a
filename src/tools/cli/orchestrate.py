"""Command line helpers for batch solving and run-log reports."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

import grid_io
from contracts.errors import ConfigError, PuzzleInputError
from orchestrator.orchestrator import (
    add_search_arguments,
    cli_overrides,
    configure_logging,
    merge_env,
    run_search,
    solve_file,
)
from project_config import resolve_search_settings
from tools.reports import search_report


def cmd_solve(args: argparse.Namespace) -> int:
    settings = resolve_search_settings(merge_env(cli_overrides(args)))
    outcome = solve_file(args.file, settings)
    print(json.dumps(outcome.to_payload(), indent=2, sort_keys=True))
    return 0 if outcome.solved else 1


def cmd_batch(args: argparse.Namespace) -> int:
    settings = resolve_search_settings(merge_env(cli_overrides(args)))
    summaries: List[dict] = []
    unsolved = 0
    for line_number, board in grid_io.iter_puzzles(Path(args.file)):
        outcome = run_search(board, settings)
        payload = outcome.to_payload()
        payload["line"] = line_number
        summaries.append(payload)
        if not outcome.solved:
            unsolved += 1
    print(json.dumps(summaries, indent=2, sort_keys=True))
    return 0 if unsolved == 0 else 1


def cmd_report(args: argparse.Namespace) -> int:
    base_dir = Path(args.path)
    files = sorted(base_dir.glob("**/*.jsonl"))
    if not files:
        raise SystemExit(f"No JSONL logs found under {base_dir}")
    summary = search_report.aggregate(files, top=args.top)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hybrid Sudoku solver tools")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve one puzzle file and print the outcome as JSON")
    solve.add_argument("file")
    add_search_arguments(solve)
    solve.set_defaults(func=cmd_solve)

    batch = sub.add_parser("batch", help="Solve every puzzle line of a file")
    batch.add_argument("file")
    add_search_arguments(batch)
    batch.set_defaults(func=cmd_batch)

    report = sub.add_parser("report", help="Aggregate search run events")
    report.add_argument("path", help="Directory containing JSONL logs")
    report.add_argument("--top", type=int, default=5)
    report.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    report.set_defaults(func=cmd_report)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.verbose)
        return args.func(args)
    except (ConfigError, PuzzleInputError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
