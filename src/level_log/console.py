"""
Module: console.py
Location: src/level_log/
Version: 0.1.0

Console output for the level-filtered emitter: a global subscriber
that prints formatted messages, and a factory wiring one up.
"""

import sys
import threading
from pathlib import Path
from typing import Optional, TextIO, Union

from src.level_log.config import LoggerConfig, coerce_config, load_config_or_default
from src.level_log.emitter import ConfigSource, Diagnostics, LevelFilteredEmitter, stderr_diagnostics
from src.level_log.formatting import stream_supports_color
from src.level_log.log_event import LogEvent


class ConsoleSubscriber:
    """
    Global subscriber that writes formatted messages to a text stream.

    Writes are serialized with a lock so lines from concurrent
    log() calls never interleave.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capture and redirect_stdout work.
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, event: LogEvent) -> None:
        with self._lock:
            self.stream.write(event.formatted_message + "\n")
            self.stream.flush()


def create_console_logger(
    config: ConfigSource = None,
    stream: Optional[TextIO] = None,
    *,
    config_path: Union[str, Path, None] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> LevelFilteredEmitter:
    """
    Build an emitter that prints every accepted message to `stream`.

    When config_path is given it takes precedence over `config`; an
    unreadable file is reported and the defaults are used.
    Color is turned off when the stream is not a terminal.
    """
    diagnostics = diagnostics or stderr_diagnostics
    subscriber = ConsoleSubscriber(stream)

    if config_path is not None:
        config = load_config_or_default(config_path, warn=diagnostics)
    else:
        config = coerce_config(config, warn=diagnostics)

    if config.color and not stream_supports_color(subscriber.stream):
        config = LoggerConfig(log_level=config.log_level, color=False)

    emitter = LevelFilteredEmitter(config, diagnostics=diagnostics)
    emitter.subscribe_all(subscriber)
    return emitter
