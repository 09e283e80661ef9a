"""JSON Schema contract for ``config.toml``."""

from __future__ import annotations

from typing import Any, Dict, Mapping

import jsonschema

from .errors import ConfigError

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "sudoku-hybrid/config.schema.json",
    "type": "object",
    "required": ["PUZZLE", "search"],
    "properties": {
        "PUZZLE": {
            "type": "object",
            "required": ["size", "box"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "size": {"const": 9},
                "box": {"const": 3},
            },
        },
        "search": {
            "type": "object",
            "required": ["bfs_depth"],
            "properties": {
                "bfs_depth": {"type": "integer", "minimum": 0},
                "frontier_limit": {"type": "integer", "minimum": 0},
                "input_path": {"type": "string"},
            },
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
                "events_enabled": {"type": "boolean"},
                "events_dir": {"type": "string", "minLength": 1},
                "max_bytes": {"type": "integer", "minimum": 1},
            },
        },
        "report": {
            "type": "object",
            "properties": {
                "style": {"enum": ["plain", "boxed"]},
            },
        },
    },
}


def _format_path(error: jsonschema.ValidationError) -> str:
    parts = [str(part) for part in error.absolute_path]
    return ".".join(parts) if parts else "<root>"


def validate_config(config: Mapping[str, Any]) -> None:
    """Raise :class:`ConfigError` when ``config`` violates the schema."""

    validator_cls = jsonschema.validators.validator_for(CONFIG_SCHEMA)
    validator_cls.check_schema(CONFIG_SCHEMA)
    validator = validator_cls(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(dict(config)), key=lambda err: [str(p) for p in err.absolute_path])
    if errors:
        first = errors[0]
        raise ConfigError("config-invalid", f"{_format_path(first)}: {first.message}")


__all__ = ["CONFIG_SCHEMA", "validate_config"]
