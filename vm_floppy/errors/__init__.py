"""Public error API for floppy configuration preparation."""

from . import codes
from .factories import (
    FLOPPY_DIRECTORIES_FIELD,
    FLOPPY_FILES_FIELD,
    bad_floppy_directory_error,
    bad_floppy_file_error,
    category_for_exception,
    validation_error,
)
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "FLOPPY_DIRECTORIES_FIELD",
    "FLOPPY_FILES_FIELD",
    "bad_floppy_directory_error",
    "bad_floppy_file_error",
    "category_for_exception",
    "codes",
    "validation_error",
]
