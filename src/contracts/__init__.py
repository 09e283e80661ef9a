"""Error taxonomy and configuration contract for the hybrid solver."""

from __future__ import annotations

from .config_schema import CONFIG_SCHEMA, validate_config
from .errors import (
    OUTCOME_STATUSES,
    STATUS_FRONTIER_EXHAUSTED,
    STATUS_SOLVED,
    STATUS_UNSOLVED,
    ConfigError,
    InputIssue,
    PuzzleInputError,
)

__all__ = [
    "CONFIG_SCHEMA",
    "ConfigError",
    "InputIssue",
    "OUTCOME_STATUSES",
    "PuzzleInputError",
    "STATUS_FRONTIER_EXHAUSTED",
    "STATUS_SOLVED",
    "STATUS_UNSOLVED",
    "validate_config",
]
