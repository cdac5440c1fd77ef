"""Error code constants.

These constants are stable machine-readable identifiers. ``BAD_FLOPPY_*``
codes identify which configuration list an entry came from.
"""

# Validation
VALIDATION_ERROR = "VALIDATION_ERROR"

# Floppy media entries
BAD_FLOPPY_FILE = "BAD_FLOPPY_FILE"
BAD_FLOPPY_DIRECTORY = "BAD_FLOPPY_DIRECTORY"
