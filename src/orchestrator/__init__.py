"""Search orchestration: executors, candidate tasks and the run log."""

from .executor import Executor, SequentialExecutor
from .task import CandidateTask, Result
from . import log

__all__ = [
    "CandidateTask",
    "Executor",
    "Result",
    "SequentialExecutor",
    "log",
]
