"""Floppy media configuration preparation for virtual machine builds."""

from importlib import metadata

from vm_floppy.definition import load_floppy_config, prepare_from_file
from vm_floppy.errors import ErrorCategory, ErrorDetail
from vm_floppy.floppy import FloppyConfig, prepare
from vm_floppy.patterns import PatternError

try:
    __version__ = metadata.version("vm-floppy")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.0.0"

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "FloppyConfig",
    "PatternError",
    "__version__",
    "load_floppy_config",
    "prepare",
    "prepare_from_file",
]
