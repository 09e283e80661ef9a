"""Hybrid breadth-first / backtracking solver for the classic 9x9 Sudoku."""

from __future__ import annotations

from .backtrack import solve, solve_in_place
from .board import (
    BOX_SIZE,
    CELL_COUNT,
    DIGITS,
    EMPTY,
    GRID_SIZE,
    Board,
    find_conflicts,
    first_empty,
    is_complete,
    is_valid,
    legal_values,
)
from .frontier import expand_frontier, expand_generation
from .stats import FrontierRound, SearchStats, StatsValidationError

__all__ = [
    "BOX_SIZE",
    "Board",
    "CELL_COUNT",
    "DIGITS",
    "EMPTY",
    "FrontierRound",
    "GRID_SIZE",
    "SearchStats",
    "StatsValidationError",
    "expand_frontier",
    "expand_generation",
    "find_conflicts",
    "first_empty",
    "is_complete",
    "is_valid",
    "legal_values",
    "solve",
    "solve_in_place",
]
