"""Executor interfaces for running the backtracking phase over candidates."""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

from sudoku_solver import SearchStats, solve_in_place

from .task import TASK_EXHAUSTED, TASK_SOLVED, CandidateTask, Result

_LOGGER = logging.getLogger(__name__)


class Executor(Protocol):
    """Abstract execution backend."""

    def submit(self, tasks: Sequence[CandidateTask]) -> List[Result]:
        """Run ``tasks`` until one is solved; return the results produced."""

    def shutdown(self) -> None:
        """Tear down resources allocated by the executor."""


class SequentialExecutor:
    """Runs candidates one after another and stops at the first solution."""

    def submit(self, tasks: Sequence[CandidateTask]) -> List[Result]:
        results: List[Result] = []
        for task in tasks:
            stats = SearchStats()
            if solve_in_place(task.board, stats):
                _LOGGER.debug(
                    "candidate %d solved after %d assignments", task.index, stats.assignments
                )
                results.append(Result(task=task, status=TASK_SOLVED, solution=task.board, stats=stats))
                break
            _LOGGER.debug(
                "candidate %d exhausted (%d backtracks)", task.index, stats.backtracks
            )
            results.append(Result(task=task, status=TASK_EXHAUSTED, stats=stats))
        return results

    def shutdown(self) -> None:
        return None


__all__ = ["Executor", "SequentialExecutor"]
