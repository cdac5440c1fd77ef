"""Canonical logging field names.

These constants define a stable key set for structured logs and context
propagation.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Preparation fields.
FIELD = "field"
PATH = "path"
PROBE = "probe"
ERROR_CODE = "error_code"
ERROR_COUNT = "error_count"
ENTRY_COUNT = "entry_count"
SOURCE = "source"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
