import json

import pytest

from src.level_log.config import (
    ConfigError,
    LoggerConfig,
    coerce_config,
    load_config,
    load_config_or_default,
    resolve_threshold,
)
from src.level_log.severity import Severity


def test_resolve_missing_value_defaults_silently() -> None:
    warnings = []
    assert resolve_threshold(None, warnings.append) == (Severity.INFO, None)
    assert resolve_threshold(LoggerConfig(), warnings.append) == (Severity.INFO, None)
    assert warnings == []


def test_resolve_valid_value() -> None:
    severity, warning = resolve_threshold(LoggerConfig(log_level="warn"))
    assert severity is Severity.WARN
    assert warning is None


def test_resolve_invalid_value_warns_once() -> None:
    warnings = []
    severity, warning = resolve_threshold(LoggerConfig(log_level="verbose"), warnings.append)
    assert severity is Severity.INFO
    assert warnings == ['Invalid log level in config: "verbose", using default "info"']
    assert warning == warnings[0]


def test_resolve_is_case_sensitive() -> None:
    severity, warning = resolve_threshold(LoggerConfig(log_level="DEBUG"))
    assert severity is Severity.INFO
    assert warning is not None


def test_from_mapping_and_env() -> None:
    assert LoggerConfig.from_mapping({"log_level": "debug"}).log_level == "debug"
    assert LoggerConfig.from_mapping({}).log_level is None

    config = LoggerConfig.from_env({"APP_LOG_LEVEL": "trace", "NO_COLOR": "1"}, prefix="APP_")
    assert config == LoggerConfig(log_level="trace", color=False)
    assert LoggerConfig.from_env({}) == LoggerConfig()


def test_load_json_and_yaml(tmp_path) -> None:
    json_path = tmp_path / "logger.json"
    json_path.write_text(json.dumps({"log_level": "severe"}), encoding="utf-8")
    assert load_config(json_path).log_level == "severe"

    yaml_path = tmp_path / "logger.yaml"
    yaml_path.write_text("log_level: debug\ncolor: false\n", encoding="utf-8")
    assert load_config(yaml_path) == LoggerConfig(log_level="debug", color=False)


def test_load_missing_or_empty_file(tmp_path) -> None:
    assert load_config(tmp_path / "absent.json") == LoggerConfig()

    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == LoggerConfig()


def test_load_malformed_file_raises(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(bad)

    listing = tmp_path / "list.yaml"
    listing.write_text("- info\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(listing)


@pytest.mark.parametrize(
    "raw, expected",
    [(True, True), (False, False), ("false", False), ("0", False), ("No", False),
     ("off", False), ("true", True), ("1", True), ("yes", True), (0, False)],
)
def test_color_flag_parses_strings(raw, expected) -> None:
    assert LoggerConfig.from_mapping({"log_level": "info", "color": raw}).color is expected


@pytest.mark.parametrize("raw", ["maybe", "", 2, None, [True]])
def test_color_flag_rejects_unclear_values(raw) -> None:
    with pytest.raises(ValueError):
        LoggerConfig.from_mapping({"color": raw})


def test_load_file_with_bad_color_raises_config_error(tmp_path) -> None:
    path = tmp_path / "logger.yaml"
    path.write_text("log_level: info\ncolor: maybe\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_coerce_config_reports_unreadable_source() -> None:
    warnings = []
    assert coerce_config("warn", warnings.append) == LoggerConfig()
    assert coerce_config({"color": "sometimes"}, warnings.append) == LoggerConfig()
    assert len(warnings) == 2
    assert all(w.startswith("Failed to read log_level from config, using default.") for w in warnings)

    assert coerce_config({"log_level": "debug"}, warnings.append).log_level == "debug"
    assert coerce_config(None, warnings.append) == LoggerConfig()
    assert len(warnings) == 2


def test_load_config_or_default_recovers(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{nope", encoding="utf-8")
    warnings = []
    assert load_config_or_default(bad, warnings.append) == LoggerConfig()
    assert len(warnings) == 1
    assert "Failed to read log_level from config" in warnings[0]
