"""Factory helpers for creating consistent preparation errors."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail

FLOPPY_FILES_FIELD = "floppy_files"
FLOPPY_DIRECTORIES_FIELD = "floppy_dirs"


def validation_error(
    message: str,
    *,
    code: str = codes.VALIDATION_ERROR,
    category: ErrorCategory = ErrorCategory.VALIDATION,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a non-retryable validation error."""
    return ErrorDetail(
        code=code,
        message=message,
        category=category,
        retryable=False,
        metadata=_meta(metadata),
    )


def bad_floppy_file_error(path: str, exc: Exception) -> ErrorDetail:
    """Create the error for one unusable ``floppy_files`` entry."""
    return validation_error(
        f"bad floppy disk file '{path}': {exc}",
        code=codes.BAD_FLOPPY_FILE,
        category=category_for_exception(exc),
        metadata=_entry_meta(FLOPPY_FILES_FIELD, path, exc),
    )


def bad_floppy_directory_error(path: str, exc: Exception) -> ErrorDetail:
    """Create the error for one unusable ``floppy_dirs`` entry."""
    return validation_error(
        f"bad floppy disk directory '{path}': {exc}",
        code=codes.BAD_FLOPPY_DIRECTORY,
        category=category_for_exception(exc),
        metadata=_entry_meta(FLOPPY_DIRECTORIES_FIELD, path, exc),
    )


def category_for_exception(exc: Exception) -> ErrorCategory:
    """Map a probe failure onto an error category.

    Missing entries are ``NOT_FOUND``, access failures are ``POLICY`` and
    everything else (bad patterns, wrong path shapes) is ``VALIDATION``.
    """
    if isinstance(exc, FileNotFoundError):
        return ErrorCategory.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorCategory.POLICY
    return ErrorCategory.VALIDATION


def _entry_meta(field_name: str, path: str, exc: Exception) -> dict[str, str]:
    return {
        "field": field_name,
        "path": path,
        "exception_type": type(exc).__name__,
    }


def _meta(metadata: Mapping[str, str] | None) -> dict[str, str]:
    """Normalize optional metadata into a mutable plain dict."""
    if metadata is None:
        return {}
    return dict(metadata)
