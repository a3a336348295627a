"""Load RuntimeConfig from a TOML file.

Reads the [tool.bundledruntime] table when present (pyproject.toml style),
otherwise the top-level table. Keys may be kebab-case or snake_case.
Relative paths resolve against the file's directory.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any

from bundledruntime.domain.exceptions import ConfigurationError
from bundledruntime.domain.model.configuration import RuntimeConfig

_PATH_KEYS = frozenset({"app_root", "destination_dir", "java_home"})
_LIST_KEYS = frozenset({"modules", "jlink_options"})
_BOOL_KEYS = frozenset({"auto_detect_modules", "spring_boot_project"})
_INT_KEYS = frozenset({"java_version", "multi_release"})
_KNOWN_KEYS = frozenset(f.name for f in fields(RuntimeConfig))


def load_config(path: Path, **overrides: Any) -> RuntimeConfig:
    """Read configuration file and build RuntimeConfig.

    Args:
        path: TOML file
        **overrides: Field values taking precedence over the file.
            None values are ignored.

    Returns:
        Validated RuntimeConfig

    Raises:
        ConfigurationError: If the file is unreadable, malformed or invalid
    """
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(path, f"cannot read file ({exc})") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(path, f"malformed TOML ({exc})") from exc

    table: Any = document
    if "tool" in document:
        tool = document["tool"]
        table = tool.get("bundledruntime") if isinstance(tool, dict) else None
        if not isinstance(table, dict):
            raise ConfigurationError(path, "missing [tool.bundledruntime] table")

    values = _convert(path, table)
    values.update({key: value for key, value in overrides.items() if value is not None})

    for required in ("app_root", "destination_dir"):
        if required not in values:
            raise ConfigurationError(path, f"missing required key '{required}'")

    try:
        return RuntimeConfig(**values)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(path, str(exc)) from exc


def _convert(source: Path, table: dict[str, Any]) -> dict[str, Any]:
    """Normalize keys and coerce values to RuntimeConfig field types."""
    base = source.parent
    values: dict[str, Any] = {}

    for raw_key, value in table.items():
        key = raw_key.replace("-", "_")
        if key not in _KNOWN_KEYS:
            raise ConfigurationError(source, f"unknown key '{raw_key}'")

        if key in _PATH_KEYS:
            if not isinstance(value, str):
                raise ConfigurationError(source, f"'{raw_key}' must be a string path")
            candidate = Path(value).expanduser()
            values[key] = candidate if candidate.is_absolute() else base / candidate
        elif key in _LIST_KEYS:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigurationError(source, f"'{raw_key}' must be a list of strings")
            values[key] = tuple(value)
        elif key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise ConfigurationError(source, f"'{raw_key}' must be a boolean")
            values[key] = value
        elif key in _INT_KEYS:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(source, f"'{raw_key}' must be an integer")
            values[key] = value

    return values
