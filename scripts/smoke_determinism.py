#!/usr/bin/env python3
"""Smoke-test that the search is deterministic and depth-independent."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import grid_io
from orchestrator import orchestrator
from project_config import resolve_search_settings

_DEPTHS = (0, 1, 4, 12)


def _check(line: int, board: list[int], base_settings) -> bool:
    reference = None
    for depth in _DEPTHS:
        settings = replace(base_settings, bfs_depth=depth, events_enabled=False)
        first = orchestrator.run_search(board, settings)
        second = orchestrator.run_search(board, settings)
        if first.solution != second.solution or first.stats.to_payload() != second.stats.to_payload():
            print(f"line {line}: depth {depth} is not repeatable")
            return False
        if reference is None:
            reference = first.solution
        elif first.solution != reference:
            print(f"line {line}: depth {depth} changed the solution")
            return False
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("file", nargs="?", default=str(ROOT / "data" / "batch.txt"))
    args = parser.parse_args(argv)

    base_settings = resolve_search_settings({})
    ok = all(_check(line, board, base_settings) for line, board in grid_io.iter_puzzles(args.file))
    if not ok:
        return 1
    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
