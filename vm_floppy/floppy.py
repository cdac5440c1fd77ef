"""Floppy media configuration and its preparation step.

A floppy can be attached to a build, most often so unattended Windows
installs find ``Autounattend.xml`` on removable media. Listed files are placed
in the floppy root, listed directories are copied recursively, and
``floppy_content`` entries are written from literal strings and win over files
of the same name.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from vm_floppy.errors import (
    FLOPPY_DIRECTORIES_FIELD,
    FLOPPY_FILES_FIELD,
    ErrorDetail,
    bad_floppy_directory_error,
    bad_floppy_file_error,
)
from vm_floppy.logging import fields, get_logger, log_context
from vm_floppy.patterns import has_wildcard, probe

_LOGGER = get_logger(__name__)

_ErrorFactory = Callable[[str, Exception], ErrorDetail]


class FloppyConfig(BaseModel):
    """Floppy options read from one build definition.

    The list fields stay ``None`` until ``prepare`` normalizes them.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    floppy_files: list[str] | None = None
    floppy_directories: list[str] | None = Field(
        default=None, alias=FLOPPY_DIRECTORIES_FIELD
    )
    floppy_content: dict[str, str] | None = None
    floppy_label: str = ""

    def prepare(
        self, ctx: Any = None, *, require_glob_matches: bool = False
    ) -> list[ErrorDetail]:
        """Normalize list fields and validate every entry; see ``prepare``."""
        return prepare(self, ctx, require_glob_matches=require_glob_matches)


def prepare(
    config: FloppyConfig,
    ctx: Any = None,
    *,
    require_glob_matches: bool = False,
) -> list[ErrorDetail]:
    """Validate floppy entries, returning every failure found.

    Missing ``floppy_files`` / ``floppy_directories`` become empty lists in
    place. Each entry is globbed when it contains ``*``, ``?`` or ``[`` and
    stat-ed otherwise. A glob matching nothing passes unless
    ``require_glob_matches`` is set. ``ctx`` is the interpolation context of
    the calling build; variables are already resolved, so it is unused.
    """
    del ctx
    errors: list[ErrorDetail] = []

    if config.floppy_files is None:
        config.floppy_files = []
    errors.extend(
        _check_entries(
            FLOPPY_FILES_FIELD,
            config.floppy_files,
            bad_floppy_file_error,
            require_glob_matches=require_glob_matches,
        )
    )

    if config.floppy_directories is None:
        config.floppy_directories = []
    errors.extend(
        _check_entries(
            FLOPPY_DIRECTORIES_FIELD,
            config.floppy_directories,
            bad_floppy_directory_error,
            require_glob_matches=require_glob_matches,
        )
    )

    summary = {
        fields.ENTRY_COUNT: len(config.floppy_files) + len(config.floppy_directories),
        fields.ERROR_COUNT: len(errors),
    }
    with log_context(summary):
        _LOGGER.info("Floppy configuration prepared")
    return errors


def _check_entries(
    field_name: str,
    paths: list[str],
    make_error: _ErrorFactory,
    *,
    require_glob_matches: bool,
) -> list[ErrorDetail]:
    errors: list[ErrorDetail] = []
    for path in paths:
        probe_name = "glob" if has_wildcard(path) else "stat"
        with log_context(
            {fields.FIELD: field_name, fields.PATH: path, fields.PROBE: probe_name}
        ):
            try:
                probe(path, require_glob_matches=require_glob_matches)
            except (OSError, ValueError) as exc:
                error = make_error(path, exc)
                with log_context({fields.ERROR_CODE: error.code}):
                    _LOGGER.warning("Floppy entry rejected: %s", exc)
                errors.append(error)
                continue
            _LOGGER.debug("Floppy entry accepted")
    return errors
