"""Depth-first backtracking completion of a single board."""

from __future__ import annotations

from typing import Optional

from .board import DIGITS, EMPTY, Board, first_empty, is_valid
from .stats import SearchStats


def solve_in_place(board: Board, stats: Optional[SearchStats] = None) -> bool:
    """Complete ``board`` in place, returning ``True`` on success.

    Cells are filled in index order and values tried in increasing order.
    On failure every tentative assignment has been undone, so ``board`` is
    left exactly as it was passed in. A board without empty cells counts as
    solved; it is not re-validated.
    """

    index = first_empty(board)
    if index is None:
        return True

    for value in DIGITS:
        if not is_valid(board, index, value):
            continue
        board[index] = value
        if stats is not None:
            stats.assignments += 1
        if solve_in_place(board, stats):
            return True
        board[index] = EMPTY
        if stats is not None:
            stats.backtracks += 1
    return False


def solve(board: Board, stats: Optional[SearchStats] = None) -> Optional[Board]:
    """Return a completed copy of ``board`` or ``None``."""

    work = list(board)
    return work if solve_in_place(work, stats) else None


__all__ = ["solve", "solve_in_place"]
