"""
Rendering of log events into console strings.

Layout is always: <timestamp> <severity tag> <message>.
Color codes are optional; the structure is not.
"""

from __future__ import annotations

import os
from typing import Any

from src.level_log.severity import Severity

RESET = "\x1b[0m"
TIMESTAMP_COLOR = "\x1b[36m"


def colored_severity(severity: Severity, color: bool = True) -> str:
    tag = f"{severity.symbol}[{severity.value.upper()}]"
    if not color:
        return tag
    return f"{severity.color}{tag}{RESET}"


def colored_timestamp(timestamp: str, color: bool = True) -> str:
    if not color:
        return f"[{timestamp}]"
    return f"{TIMESTAMP_COLOR}[{timestamp}]{RESET}"


def format_message(severity: Severity, timestamp: str, message: str, color: bool = True) -> str:
    return f"{colored_timestamp(timestamp, color)} {colored_severity(severity, color)} {message}"


def stream_supports_color(stream: Any) -> bool:
    """
    True when the stream is an interactive terminal and NO_COLOR is unset.
    """
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False
