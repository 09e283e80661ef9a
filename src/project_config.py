"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

from contracts.config_schema import validate_config
from contracts.errors import ConfigError


_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_HYBRID_CONFIG"


def _config_path() -> Path:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load, validate and cache the project configuration as a dictionary."""
    path = _config_path()
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError("config-not-found", str(path)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError("config-unreadable", f"{path}: {exc}") from exc
    validate_config(data)
    return data


def resolve_path(value: str | Path) -> Path:
    """Resolve ``value`` relative to the directory holding the configuration."""

    path = Path(value)
    if path.is_absolute():
        return path
    return _config_path().resolve().parent / path


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


@dataclass(frozen=True)
class SearchSettings:
    """Finalised search settings after precedence resolution."""

    bfs_depth: int
    frontier_limit: int
    events_enabled: bool
    events_dir: str
    events_max_bytes: int
    report_style: str


_REPORT_STYLES = ("plain", "boxed")


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def _parse_count(key: str, value: str) -> int:
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ConfigError("bad-override", f"{key}={value!r} is not an integer") from exc
    if parsed < 0:
        raise ConfigError("bad-override", f"{key}={value!r} must be >= 0")
    return parsed


def _lookup(env: Mapping[str, str], name: str) -> tuple[str, str] | None:
    """Return the winning ``(key, value)`` for ``name``; CLI beats plain env."""

    for key in (f"CLI_SUDOKU_{name}", f"SUDOKU_{name}"):
        value = env.get(key)
        if value is not None and str(value).strip() != "":
            return key, str(value)
    return None


def resolve_search_settings(env: Mapping[str, str] | None = None) -> SearchSettings:
    """Merge ``config.toml`` with environment and CLI overrides.

    Precedence from lowest to highest: TOML, ``SUDOKU_*`` variables,
    ``CLI_SUDOKU_*`` variables. ``env`` defaults to ``os.environ``.
    """

    if env is None:
        env = dict(os.environ)

    search = get_section("search")
    logging_cfg = get_section("logging", {})
    report_cfg = get_section("report", {})

    bfs_depth = int(search["bfs_depth"])
    frontier_limit = int(search.get("frontier_limit", 0))
    events_enabled = bool(logging_cfg.get("events_enabled", False))
    events_dir = str(logging_cfg.get("events_dir", "logs/search"))
    max_bytes = int(logging_cfg.get("max_bytes", 100 * 1024 * 1024))
    report_style = str(report_cfg.get("style", "plain"))

    found = _lookup(env, "BFS_DEPTH")
    if found:
        bfs_depth = _parse_count(*found)

    found = _lookup(env, "FRONTIER_LIMIT")
    if found:
        frontier_limit = _parse_count(*found)

    found = _lookup(env, "LOG_EVENTS")
    if found:
        maybe = _parse_bool(found[1])
        if maybe is None:
            raise ConfigError("bad-override", f"{found[0]}={found[1]!r} is not a boolean")
        events_enabled = maybe

    found = _lookup(env, "EVENTS_DIR")
    if found:
        events_dir = found[1]

    found = _lookup(env, "REPORT_STYLE")
    if found:
        report_style = found[1].strip().lower()
    if report_style not in _REPORT_STYLES:
        raise ConfigError("bad-override", f"report style {report_style!r} is not one of {_REPORT_STYLES}")

    return SearchSettings(
        bfs_depth=bfs_depth,
        frontier_limit=frontier_limit,
        events_enabled=events_enabled,
        events_dir=events_dir,
        events_max_bytes=max_bytes,
        report_style=report_style,
    )


__all__ = [
    "SearchSettings",
    "get_config",
    "get_section",
    "reload",
    "resolve_path",
    "resolve_search_settings",
]
