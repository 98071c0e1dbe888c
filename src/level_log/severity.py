"""
Module: severity.py
Location: src/level_log/
Version: 0.1.0

Defines the closed, ordered set of log severities together with
their display symbol and console color.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class InvalidSeverityError(ValueError):
    pass


class Severity(str, Enum):
    """
    Semantic severity level for log events.

    Ordered from least to most severe. Comparison between members
    uses the integer priority, never the string value.
    """

    TRACE = "trace"     # Extremely fine-grained execution detail
    DEBUG = "debug"     # Developer-focused diagnostic information
    INFO = "info"       # Normal operation
    WARN = "warn"       # Unexpected but recoverable condition
    SEVERE = "severe"   # Operation failed or integrity at risk

    @property
    def priority(self) -> int:
        return _PRIORITY[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.priority < other.priority

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.priority <= other.priority

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.priority > other.priority

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.priority >= other.priority

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """
        Resolve a Severity from a member or its exact lowercase name.

        Raises InvalidSeverityError for anything outside the closed set.
        """
        if isinstance(value, Severity):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        allowed = ", ".join(s.value for s in cls)
        raise InvalidSeverityError(
            f"Unknown severity {value!r}; expected one of: {allowed}"
        )


_PRIORITY = {
    Severity.TRACE: 0,
    Severity.DEBUG: 1,
    Severity.INFO: 2,
    Severity.WARN: 3,
    Severity.SEVERE: 4,
}

_SYMBOLS = {
    Severity.SEVERE: "\U0001F534",
    Severity.WARN: "\U0001F7E0",
    Severity.INFO: "\U0001F7E1",
    Severity.DEBUG: "\U0001F7E2",
    Severity.TRACE: "\U0001F535",
}

_COLORS = {
    Severity.SEVERE: "\x1b[31m",
    Severity.WARN: "\x1b[38;5;208m",
    Severity.INFO: "\x1b[93m",
    Severity.DEBUG: "\x1b[32m",
    Severity.TRACE: "\x1b[34m",
}

DEFAULT_SEVERITY = Severity.INFO


def is_valid_severity(value: Any) -> bool:
    try:
        Severity.parse(value)
    except InvalidSeverityError:
        return False
    return True
