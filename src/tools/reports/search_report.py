"""Aggregation helpers for search run logs."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, Mapping

from orchestrator.log import iter_events
from orchestrator.orchestrator import EVENT_NAME

__all__ = ["aggregate"]


def aggregate(paths: Iterable[Path], *, top: int = 5) -> Mapping[str, object]:
    statuses: Counter[str] = Counter()
    puzzles: Counter[str] = Counter()
    runs = 0
    elapsed_total = 0
    for event in iter_events(paths, EVENT_NAME):
        runs += 1
        statuses[str(event.get("status", "unknown"))] += 1
        puzzles[str(event.get("puzzle_digest", "unknown"))] += 1
        elapsed_total += int(event.get("elapsed_ms", 0))

    return {
        "total_runs": runs,
        "status": dict(statuses),
        "elapsed_ms_total": elapsed_total,
        "elapsed_ms_mean": round(elapsed_total / runs, 3) if runs else 0.0,
        "top_puzzles": puzzles.most_common(top),
    }
