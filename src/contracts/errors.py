"""Shared error types and outcome statuses for the hybrid solver."""

from __future__ import annotations


from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

STATUS_SOLVED = "solved"
STATUS_UNSOLVED = "unsolved"
STATUS_FRONTIER_EXHAUSTED = "frontier_exhausted"

OUTCOME_STATUSES = (STATUS_SOLVED, STATUS_UNSOLVED, STATUS_FRONTIER_EXHAUSTED)


@dataclass(frozen=True)
class InputIssue:
    """Single problem found while reading a puzzle."""

    code: str
    msg: str
    position: Optional[int] = None


class PuzzleInputError(ValueError):
    """Raised when the puzzle source does not supply 81 valid digits."""

    def __init__(self, code: str, detail: Optional[str] = None, issues: Sequence[InputIssue] = ()) -> None:
        self.code = code
        self.detail = detail
        self.issues: Tuple[InputIssue, ...] = tuple(issues)
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


class ConfigError(RuntimeError):
    """Raised when the configuration or an override is invalid."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


def make_issue(code: str, msg: str, position: Optional[int] = None) -> InputIssue:
    """Construct an :class:`InputIssue`."""

    return InputIssue(code=code, msg=msg, position=position)


def input_error(issue: InputIssue) -> PuzzleInputError:
    """Wrap a single issue into a :class:`PuzzleInputError`."""

    return PuzzleInputError(issue.code, issue.msg, (issue,))


__all__ = [
    "ConfigError",
    "InputIssue",
    "OUTCOME_STATUSES",
    "PuzzleInputError",
    "STATUS_FRONTIER_EXHAUSTED",
    "STATUS_SOLVED",
    "STATUS_UNSOLVED",
    "input_error",
    "make_issue",
]
