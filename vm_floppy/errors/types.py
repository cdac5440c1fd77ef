"""Canonical error types for floppy configuration preparation.

Preparation never raises for a bad path. It returns a list of these records
so the build orchestrator can aggregate them with its own validation output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level error categories for preparation failures."""

    UNSPECIFIED = "unspecified"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    POLICY = "policy"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object returned from ``prepare``."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message
