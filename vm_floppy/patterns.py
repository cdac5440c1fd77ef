"""Filesystem probes for floppy media entries.

Entries containing a wildcard character are expanded with ``glob``; anything
else is checked with a plain ``os.stat``. Python's ``glob`` accepts every
pattern and treats a malformed character class as literal text, so patterns
are syntax-checked before expansion to surface mistakes like ``foo[bar``.
"""

from __future__ import annotations

import glob
import os

WILDCARD_CHARS = frozenset("*?[")

_NEGATION_CHARS = ("!", "^")


class PatternError(ValueError):
    """Raised when a glob pattern is syntactically malformed."""

    def __init__(self, pattern: str) -> None:
        super().__init__("syntax error in pattern")
        self.pattern = pattern


class NoMatchError(FileNotFoundError):
    """Raised in strict mode when a valid pattern matches nothing."""

    def __init__(self, pattern: str) -> None:
        super().__init__("pattern matched no files")
        self.pattern = pattern


def has_wildcard(path: str) -> bool:
    """Return True when ``path`` contains a glob meta-character."""
    return any(char in WILDCARD_CHARS for char in path)


def check_pattern(pattern: str) -> None:
    """Raise ``PatternError`` when ``pattern`` has a malformed character class.

    A class must be closed by ``]`` and must not have ``]`` or ``-`` where a
    class character is expected, so empty classes and ranges with a missing
    endpoint are rejected. A trailing unpaired backslash is rejected too;
    other backslashes are literal characters, as in Python's ``glob``.
    """
    if _trailing_backslashes(pattern) % 2 == 1:
        raise PatternError(pattern)

    index = 0
    length = len(pattern)
    while index < length:
        if pattern[index] != "[":
            index += 1
            continue
        index = _scan_class(pattern, index + 1)


def _scan_class(pattern: str, index: int) -> int:
    """Validate one character class body; return the index after ``]``."""
    length = len(pattern)
    if index < length and pattern[index] in _NEGATION_CHARS:
        index += 1

    ranges = 0
    while True:
        if index >= length:
            raise PatternError(pattern)
        if pattern[index] == "]" and ranges > 0:
            return index + 1
        index = _class_char(pattern, index)
        if index < length and pattern[index] == "-":
            index = _class_char(pattern, index + 1)
        ranges += 1


def _class_char(pattern: str, index: int) -> int:
    """Consume one class character, rejecting structural characters."""
    if index >= len(pattern) or pattern[index] in "]-":
        raise PatternError(pattern)
    return index + 1


def _trailing_backslashes(pattern: str) -> int:
    return len(pattern) - len(pattern.rstrip("\\"))


def glob_probe(pattern: str, *, require_matches: bool = False) -> list[str]:
    """Expand ``pattern`` after checking its syntax.

    Wildcards match dot-entries too. A pattern with zero matches is not an
    error unless ``require_matches`` is set.
    """
    check_pattern(pattern)
    matches = sorted(glob.glob(pattern, include_hidden=True))
    if require_matches and not matches:
        raise NoMatchError(pattern)
    return matches


def stat_probe(path: str) -> os.stat_result:
    """Stat a literal path; propagates the ``OSError`` when it is unusable."""
    return os.stat(path)


def probe(path: str, *, require_glob_matches: bool = False) -> None:
    """Check one floppy entry with the probe its shape calls for."""
    if has_wildcard(path):
        glob_probe(path, require_matches=require_glob_matches)
    else:
        stat_probe(path)
