"""Logging API for floppy preparation.

Wraps Python's ``logging`` module with stdout defaults and structured
context propagation.
"""

from .config import configure_from_settings, configure_logging, get_logger
from .context import get_context, log_context

__all__ = [
    "configure_from_settings",
    "configure_logging",
    "get_context",
    "get_logger",
    "log_context",
]
