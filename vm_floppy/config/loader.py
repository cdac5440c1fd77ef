"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/vm_floppy/vm_floppy.yaml
4) Model defaults

Environment variable format:
- Prefix: ``VM_FLOPPY_``
- Nested keys: ``__`` separator
- Example: ``VM_FLOPPY_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, FloppySettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> FloppySettings:
    """Resolve ``FloppySettings`` from the standard precedence cascade.

    When ``environ`` is given it replaces the process environment, which keeps
    resolution deterministic in tests and embedding callers.
    """
    resolved_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    settings_cls = _bind_settings_class(
        config_path=resolved_path,
        read_process_env=environ is None,
    )

    init_data: dict[str, Any] = {}
    if environ is not None:
        init_data = _load_env_config(environ=environ, prefix=ENV_PREFIX)
    if cli_params is not None:
        init_data = _merge_dicts(init_data, cli_params)
    return settings_cls(**init_data)


def _bind_settings_class(
    *, config_path: Path, read_process_env: bool
) -> type[FloppySettings]:
    """Return a settings subclass bound to one YAML path and env policy."""

    class BoundFloppySettings(FloppySettings):
        _config_path: ClassVar[Path] = config_path
        _read_process_env: ClassVar[bool] = read_process_env

    return BoundFloppySettings


def _load_env_config(*, environ: Mapping[str, str], prefix: str) -> dict[str, Any]:
    """Extract and map prefixed environment variables into nested config."""
    output: dict[str, Any] = {}

    for key, raw_value in environ.items():
        if not key.upper().startswith(prefix):
            continue

        remainder = key[len(prefix) :]
        if not remainder:
            continue

        path = [
            segment.strip().lower()
            for segment in remainder.split("__")
            if segment.strip()
        ]
        if not path:
            continue

        _set_nested(output, path, raw_value.strip())

    return output


def _set_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Set a nested mapping value by path, creating intermediate dicts."""
    cursor: dict[str, Any] = target
    for segment in path[:-1]:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[path[-1]] = value


def _merge_dicts(
    base: Mapping[str, Any], override: Mapping[str, Any]
) -> dict[str, Any]:
    """Recursively merge mappings, with ``override`` taking precedence."""
    result = copy.deepcopy(dict(base))
    for key, override_value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, dict) and isinstance(override_value, Mapping):
            result[key] = _merge_dicts(base_value, override_value)
            continue
        result[key] = copy.deepcopy(override_value)
    return result
