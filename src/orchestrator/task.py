"""Candidate boards handed from the frontier to the backtracking phase."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sudoku_solver import Board, SearchStats

TASK_SOLVED = "solved"
TASK_EXHAUSTED = "exhausted"


@dataclass
class CandidateTask:
    """One frontier board awaiting backtracking.

    The task owns ``board`` exclusively; the solver mutates it in place.
    """

    index: int
    board: Board


@dataclass
class Result:
    """Outcome of running the backtracking solver on one task."""

    task: CandidateTask
    status: str
    solution: Optional[Board] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        return self.status == TASK_SOLVED


__all__ = ["CandidateTask", "Result", "TASK_EXHAUSTED", "TASK_SOLVED"]
