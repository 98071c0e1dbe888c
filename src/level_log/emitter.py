"""
Module: emitter.py
Location: src/level_log/
Version: 0.1.0

LevelFilteredEmitter: filters log calls by a fixed minimum severity,
formats the survivors and fans them out to subscribers.

Two subscriber channels exist:
- level subscribers, called only for events of exactly their severity,
  with the formatted message string
- global subscribers, called for every event that passes the threshold,
  with the full LogEvent
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from src.level_log.config import LoggerConfig, coerce_config, resolve_threshold
from src.level_log.formatting import format_message
from src.level_log.log_event import LogEvent, utc_timestamp
from src.level_log.severity import Severity

LevelCallback = Callable[[str], None]
GlobalCallback = Callable[[LogEvent], None]
Diagnostics = Callable[[str], None]

ConfigSource = Union[LoggerConfig, Mapping[str, Any], None]


def stderr_diagnostics(text: str) -> None:
    print(f"[LevelFilteredEmitter] {text}", file=sys.stderr, flush=True)


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class LevelFilteredEmitter:
    """
    Severity-gated publisher for log messages.

    The threshold is read once from the configuration source and
    never changes afterwards. Dispatch is synchronous: log() returns
    only after every matching subscriber has been called.
    """

    def __init__(
        self,
        config: ConfigSource = None,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self._diagnostics = diagnostics or stderr_diagnostics

        config = coerce_config(config, warn=self._report)
        self._threshold, _ = resolve_threshold(config, warn=self._report)
        self._color = config.color

        self._lock = threading.Lock()
        self._level_subscribers: Dict[Severity, List[LevelCallback]] = {
            severity: [] for severity in Severity
        }
        self._global_subscribers: List[GlobalCallback] = []

    @property
    def threshold(self) -> Severity:
        return self._threshold

    # ----------------------------
    # Subscription
    # ----------------------------

    def subscribe_level(self, severity: Union[Severity, str], callback: LevelCallback) -> None:
        """
        Register a callback for events of exactly this severity.

        The callback receives the formatted message string.
        """
        severity = Severity.parse(severity)
        _require_callable(callback)
        with self._lock:
            self._level_subscribers[severity].append(callback)

    def subscribe_all(self, callback: GlobalCallback) -> None:
        """
        Register a callback for every event that passes the threshold.

        The callback receives the LogEvent, which carries severity,
        raw message, timestamp and formatted message.
        """
        _require_callable(callback)
        with self._lock:
            self._global_subscribers.append(callback)

    def unsubscribe_level(self, severity: Union[Severity, str], callback: LevelCallback) -> bool:
        severity = Severity.parse(severity)
        with self._lock:
            return _remove_first(self._level_subscribers[severity], callback)

    def unsubscribe_all(self, callback: GlobalCallback) -> bool:
        with self._lock:
            return _remove_first(self._global_subscribers, callback)

    def subscriber_count(self, severity: Union[Severity, str, None] = None) -> int:
        with self._lock:
            if severity is None:
                return len(self._global_subscribers)
            return len(self._level_subscribers[Severity.parse(severity)])

    # ----------------------------
    # Logging
    # ----------------------------

    def is_enabled(self, severity: Union[Severity, str]) -> bool:
        return Severity.parse(severity) >= self._threshold

    def log(self, severity: Union[Severity, str], message: str) -> None:
        """
        Filter, format and dispatch a single message.

        Below the threshold nothing is built and nobody is called.
        Otherwise level subscribers for this exact severity run first,
        then global subscribers, each list in registration order.
        """
        severity = Severity.parse(severity)
        if severity < self._threshold:
            return

        timestamp = utc_timestamp()
        event = LogEvent(
            severity=severity,
            message=message,
            timestamp=timestamp,
            formatted_message=format_message(severity, timestamp, message, color=self._color),
        )

        # Snapshot under the lock; callbacks run outside it.
        with self._lock:
            level_callbacks = list(self._level_subscribers[severity])
            global_callbacks = list(self._global_subscribers)

        for callback in level_callbacks:
            self._invoke(callback, event.formatted_message, severity)

        for callback in global_callbacks:
            self._invoke(callback, event, severity)

    def trace(self, message: str) -> None:
        self.log(Severity.TRACE, message)

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self.log(Severity.WARN, message)

    def severe(self, message: str) -> None:
        self.log(Severity.SEVERE, message)

    def _invoke(self, callback: Callable[[Any], None], payload: Any, severity: Severity) -> None:
        try:
            callback(payload)
        except Exception as e:
            # One failing subscriber must not starve the rest.
            self._report(
                f"Subscriber {_callback_name(callback)} failed for {severity.value} event: {e!r}"
            )

    def _report(self, text: str) -> None:
        try:
            self._diagnostics(text)
        except Exception:
            stderr_diagnostics(text)


def _require_callable(callback: Any) -> None:
    if not callable(callback):
        raise TypeError(f"Subscriber must be callable, got {type(callback).__name__}")


def _remove_first(callbacks: List[Callable[..., Any]], callback: Callable[..., Any]) -> bool:
    try:
        callbacks.remove(callback)
    except ValueError:
        return False
    return True
