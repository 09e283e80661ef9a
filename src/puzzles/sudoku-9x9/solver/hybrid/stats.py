"""Search statistics for the hybrid solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence


class StatsValidationError(ValueError):
    """Raised when a frontier round record is inconsistent."""


@dataclass(frozen=True, slots=True)
class FrontierRound:
    """Summary of a single breadth-first expansion round."""

    round: int
    boards_in: int
    boards_out: int
    dropped: int
    passed_through: int

    def __post_init__(self) -> None:
        if self.round < 1:
            raise StatsValidationError("round must be >= 1")
        for name in ("boards_in", "boards_out", "dropped", "passed_through"):
            if getattr(self, name) < 0:
                raise StatsValidationError(f"{name} must be >= 0")
        if self.dropped + self.passed_through > self.boards_in:
            raise StatsValidationError("dropped + passed_through cannot exceed boards_in")

    def to_payload(self) -> dict:
        return {
            "round": self.round,
            "boards_in": self.boards_in,
            "boards_out": self.boards_out,
            "dropped": self.dropped,
            "passed_through": self.passed_through,
        }


@dataclass
class SearchStats:
    """Mutable counters shared by the frontier and backtracking phases."""

    rounds: MutableSequence[FrontierRound] = field(default_factory=list)
    assignments: int = 0
    backtracks: int = 0

    def record_round(
        self,
        *,
        boards_in: int,
        boards_out: int,
        dropped: int,
        passed_through: int,
    ) -> FrontierRound:
        entry = FrontierRound(
            round=len(self.rounds) + 1,
            boards_in=boards_in,
            boards_out=boards_out,
            dropped=dropped,
            passed_through=passed_through,
        )
        self.rounds.append(entry)
        return entry

    @property
    def peak_frontier(self) -> int:
        return max((entry.boards_out for entry in self.rounds), default=0)

    def to_payload(self) -> dict:
        return {
            "rounds": [entry.to_payload() for entry in self.rounds],
            "assignments": self.assignments,
            "backtracks": self.backtracks,
            "peak_frontier": self.peak_frontier,
        }


__all__ = ["FrontierRound", "SearchStats", "StatsValidationError"]
