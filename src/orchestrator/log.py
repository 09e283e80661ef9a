"""Run-event log: one JSON object per line, rotated by size per UTC day."""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

__all__ = ["append_event", "configure", "current_log_path", "iter_events"]

_LOGGER = logging.getLogger(__name__)

_DEFAULT_MAX_BYTES = 100 * 1024 * 1024
_LOCK = threading.Lock()
_state: dict[str, Any] = {
    "base_dir": Path("logs/search"),
    "max_bytes": _DEFAULT_MAX_BYTES,
    "current": None,
}


def configure(base_dir: str | Path, *, max_bytes: int | None = None) -> None:
    """Direct subsequent events to ``base_dir``, rotating at ``max_bytes``."""

    with _LOCK:
        _state["base_dir"] = Path(base_dir)
        _state["max_bytes"] = max_bytes or _DEFAULT_MAX_BYTES
        _state["current"] = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _has_room(path: Path) -> bool:
    return not path.exists() or path.stat().st_size < _state["max_bytes"]


def _active_path(now: datetime) -> Path:
    day_dir = Path(_state["base_dir"]) / now.strftime("%Y%m%d")
    current: Path | None = _state["current"]
    if current is not None and current.parent == day_dir and _has_room(current):
        return current

    day_dir.mkdir(parents=True, exist_ok=True)
    counter = 0
    while not _has_room(day_dir / f"search_{counter:02d}.jsonl"):
        counter += 1
    path = day_dir / f"search_{counter:02d}.jsonl"
    _state["current"] = path
    return path


def append_event(name: str, payload: Mapping[str, Any]) -> Path:
    """Append the ``name`` event with ``payload`` and return the file written."""

    now = _utc_now()
    record = dict(payload)
    record["event"] = name
    record.setdefault("ts", now.isoformat(timespec="milliseconds").replace("+00:00", "Z"))
    line = json.dumps(record, sort_keys=True, ensure_ascii=False)

    with _LOCK:
        path = _active_path(now)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    return path


def current_log_path() -> Path | None:
    return _state["current"]


def iter_events(paths: Iterable[Path], name: str | None = None) -> Iterator[Mapping[str, Any]]:
    """Yield decoded events from ``paths``, optionally only those called ``name``.

    Lines that are not valid JSON objects are skipped with a warning.
    """

    for path in paths:
        with Path(path).open(encoding="utf-8") as handle:
            for number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                try:
                    event = json.loads(line)
                except json.JSONDecodeError:
                    _LOGGER.warning("skipping malformed event at %s:%d", path, number)
                    continue
                if not isinstance(event, dict):
                    _LOGGER.warning("skipping non-object event at %s:%d", path, number)
                    continue
                if name is None or event.get("event") == name:
                    yield event
