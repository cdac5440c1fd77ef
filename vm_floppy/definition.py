"""Build-definition loading for floppy options."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from vm_floppy.config import FloppySettings, load_settings
from vm_floppy.errors import ErrorDetail
from vm_floppy.floppy import FloppyConfig, prepare
from vm_floppy.logging import configure_from_settings, fields, get_logger, log_context

_LOGGER = get_logger(__name__)

FLOPPY_SECTION = "floppy"

_FIELD_MESSAGES = {
    "floppy_files": "floppy_files must be a list of strings",
    "floppy_dirs": "floppy_dirs must be a list of strings",
    "floppy_content": "floppy_content must be a mapping of strings to strings",
    "floppy_label": "floppy_label must be a string",
}


def load_floppy_config(source: Mapping[str, Any] | str | Path) -> FloppyConfig:
    """Build a ``FloppyConfig`` from a mapping or a YAML/JSON file.

    When the data has a ``floppy`` mapping it is used as the section,
    otherwise the floppy keys are read from the top level and other keys are
    ignored. Raises ``ValueError`` for malformed shapes.
    """
    if isinstance(source, Mapping):
        raw: Mapping[str, Any] = source
    else:
        raw = _read_definition(Path(source))

    section = raw.get(FLOPPY_SECTION)
    if isinstance(section, Mapping):
        raw = section

    try:
        return FloppyConfig.model_validate(dict(raw))
    except ValidationError as exc:
        raise ValueError(_map_validation_error(exc)) from None


def prepare_from_file(
    path: str | Path, *, settings: FloppySettings | None = None
) -> list[ErrorDetail]:
    """Load floppy options from ``path`` and run ``prepare`` on them.

    Root logging is configured from ``settings.logging`` before preparing.
    """
    resolved_settings = settings if settings is not None else load_settings()
    configure_from_settings(resolved_settings.logging)
    config = load_floppy_config(path)
    with log_context({fields.SOURCE: path}):
        _LOGGER.debug("Preparing floppy configuration from build definition")
        return prepare(
            config,
            require_glob_matches=resolved_settings.require_glob_matches,
        )


def _read_definition(path: Path) -> dict[str, Any]:
    """Parse one build definition; JSON by suffix, YAML otherwise."""
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() == ".json":
            parsed = json.load(handle)
        else:
            parsed = yaml.safe_load(handle)

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Build definition must contain a top-level mapping: {path}")
    return parsed


def _map_validation_error(error: ValidationError) -> str:
    """Map pydantic failures onto stable per-key messages."""
    first_error = error.errors()[0]
    location = first_error.get("loc", ())
    if not location:
        return str(first_error.get("msg", "invalid floppy configuration"))

    key = str(location[0])
    if key in _FIELD_MESSAGES:
        return _FIELD_MESSAGES[key]
    return str(first_error.get("msg", "invalid floppy configuration"))
