"""Public API for floppy preparation settings."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, FloppySettings, LoggingSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "FloppySettings",
    "LoggingSettings",
    "load_settings",
]
