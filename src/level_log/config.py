"""
Module: config.py
Location: src/level_log/
Version: 0.1.0

Explicit configuration for the level-filtered emitter.

The only recognized setting is the minimum severity (`log_level`).
It is read once, when the emitter is constructed.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple

import yaml

from src.level_log.severity import DEFAULT_SEVERITY, Severity, is_valid_severity

LOG_LEVEL_KEY = "log_level"
DEFAULT_LOG_LEVEL = DEFAULT_SEVERITY.value
CONFIG_READ_FAILURE = "Failed to read log_level from config, using default."

_TRUE_FLAGS = ("true", "1", "yes", "on")
_FALSE_FLAGS = ("false", "0", "no", "off")


def parse_flag(value: Any) -> bool:
    """
    Interpret a boolean setting that may arrive as a string.

    Raises ValueError for anything that is not clearly true or false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_FLAGS:
            return True
        if text in _FALSE_FLAGS:
            return False
    raise ValueError(f"Expected a boolean flag, got {value!r}")


class ConfigError(ValueError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load logger config from {path}: {reason}")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration value passed to LevelFilteredEmitter.

    log_level is kept as the raw configured string so that an
    invalid value can be reported by the emitter, not by the loader.
    """

    log_level: Optional[str] = None   # None means "not configured"
    color: bool = True                # emit ANSI color codes

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        raw = data.get(LOG_LEVEL_KEY)
        color = data.get("color", True)
        return cls(
            log_level=None if raw is None else str(raw),
            color=parse_flag(color),
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = "",
    ) -> "LoggerConfig":
        env = os.environ if environ is None else environ
        raw = env.get(f"{prefix}{LOG_LEVEL_KEY.upper()}")
        no_color = bool(env.get("NO_COLOR"))
        return cls(log_level=raw, color=not no_color)


def load_config(path: str | Path) -> LoggerConfig:
    """
    Load a LoggerConfig from a JSON or YAML file.

    A missing file yields an empty config (default threshold).
    A file that exists but cannot be parsed raises ConfigError.
    """
    path = Path(path)
    if not path.exists():
        return LoggerConfig()

    try:
        raw = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw) if raw.strip() else {}
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(path, str(e)) from e

    if data is None:
        return LoggerConfig()
    if not isinstance(data, Mapping):
        raise ConfigError(path, f"root must be a mapping, got {type(data).__name__}")

    try:
        return LoggerConfig.from_mapping(data)
    except ValueError as e:
        raise ConfigError(path, str(e)) from e


def coerce_config(
    source: Any,
    warn: Optional[Callable[[str], None]] = None,
) -> LoggerConfig:
    """
    Turn any configuration source into a LoggerConfig without raising.

    Accepts a LoggerConfig, a mapping or None. Anything unreadable
    is reported through `warn` and replaced by the empty config.
    """
    if source is None:
        return LoggerConfig()
    if isinstance(source, LoggerConfig):
        return source
    try:
        if not isinstance(source, Mapping):
            raise TypeError(f"config source must be a mapping, got {type(source).__name__}")
        return LoggerConfig.from_mapping(source)
    except (TypeError, ValueError) as e:
        if warn is not None:
            warn(f"{CONFIG_READ_FAILURE} ({e})")
        return LoggerConfig()


def load_config_or_default(
    path: str | Path,
    warn: Optional[Callable[[str], None]] = None,
) -> LoggerConfig:
    """load_config that reports a ConfigError through `warn` and falls back to defaults."""
    try:
        return load_config(path)
    except ConfigError as e:
        if warn is not None:
            warn(f"{CONFIG_READ_FAILURE} ({e})")
        return LoggerConfig()


def resolve_threshold(
    config: Optional[LoggerConfig],
    warn: Optional[Callable[[str], None]] = None,
) -> Tuple[Severity, Optional[str]]:
    """
    Turn a configured log_level into a Severity.

    Absent value falls back silently to the default. A present but
    unrecognized value falls back to the default and produces a
    warning, passed to `warn` when given and returned either way.
    """
    value = None if config is None else config.log_level
    if value is None:
        return DEFAULT_SEVERITY, None

    if is_valid_severity(value):
        return Severity.parse(value), None

    warning = f'Invalid log level in config: "{value}", using default "{DEFAULT_LOG_LEVEL}"'
    if warn is not None:
        warn(warning)
    return DEFAULT_SEVERITY, warning
