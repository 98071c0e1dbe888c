"""
Module: log_event.py
Location: src/level_log/
Version: 0.1.0

The record handed to global subscribers for each accepted log call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from src.level_log.severity import Severity


def utc_timestamp() -> str:
    """Current wall-clock time as ISO-8601 UTC with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class LogEvent:
    """
    Immutable record of a single log call that passed the threshold.

    Lives only for the duration of dispatch; subscribers receive it
    but the emitter keeps no reference afterwards.
    """

    severity: Severity
    # Severity the caller logged at.

    message: str
    # Raw message text, exactly as passed to log().

    timestamp: str = field(default_factory=utc_timestamp)
    # Instant the event was created (ISO-8601, UTC).

    formatted_message: str = ""
    # Human-readable rendering: timestamp, severity tag, message.

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "timestamp": self.timestamp,
            "formatted_message": self.formatted_message,
        }
