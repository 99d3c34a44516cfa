from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from each_cons import (
    ConsState,
    WindowConfig,
    configure_logging,
    load_window_config,
    log_event,
    validate_config,
)


def test_load_window_config_from_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "windows.yml"
    config_path.write_text("window_size: 3\nlog_level: debug\n", encoding="utf-8")

    config = load_window_config(config_path)

    assert config == WindowConfig(window_size=3, log_level="debug", json_logs=False)


def test_load_window_config_from_json(tmp_path: Path) -> None:
    config_path = tmp_path / "windows.json"
    config_path.write_text(json.dumps({"window_size": 4, "json_logs": True}), encoding="utf-8")

    config = load_window_config(config_path)

    assert config.window_size == 4
    assert config.json_logs is True


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert load_window_config(config_path) == WindowConfig()


def test_load_window_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_window_config(tmp_path / "missing.yml")


def test_load_window_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_window_config(config_path)


def test_validate_config_reports_errors_and_warnings() -> None:
    result = validate_config({"window_size": 0, "log_level": "LOUD", "stride": 2})

    assert result.errors == ["Field 'window_size' must be >= 1 (got 0)"]
    assert "Unknown field 'stride' ignored" in result.warnings
    assert any("LOUD" in warning for warning in result.warnings)
    assert result.normalized["json_logs"] is False


def test_validate_config_rejects_bool_window_size() -> None:
    result = validate_config({"window_size": True})

    assert not result.ok
    assert "should be of type int" in result.errors[0]


def test_from_mapping_raises_on_errors() -> None:
    with pytest.raises(ValueError, match="window_size"):
        WindowConfig.from_mapping({"window_size": "three"})


def test_from_mapping_logs_warnings(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="each_cons.config"):
        config = WindowConfig.from_mapping({"step": 1})
    assert config.warnings == ["Unknown field 'step' ignored"]
    assert "Unknown field 'step' ignored" in caplog.text


def test_build_wraps_source(caplog: pytest.LogCaptureFixture) -> None:
    config = WindowConfig(window_size=2)
    with caplog.at_level(logging.INFO, logger="each_cons.config"):
        windows = config.build(range(4))
    assert windows.state is ConsState.UNPRIMED
    assert list(windows) == [[0, 1], [1, 2], [2, 3]]
    assert "window_iterator_built" in caplog.text


def test_log_event_json(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("each_cons.test")
    with caplog.at_level(logging.INFO, logger="each_cons.test"):
        log_event(logger, "windows_ready", json_logs=True, count=3)
    assert json.loads(caplog.records[-1].getMessage()) == {"event": "windows_ready", "count": 3}


def test_log_event_respects_env(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("EACH_CONS_JSON_LOGS", "true")
    logger = logging.getLogger("each_cons.test")
    with caplog.at_level(logging.INFO, logger="each_cons.test"):
        log_event(logger, "env_toggle")
    assert caplog.records[-1].getMessage() == '{"event": "env_toggle"}'


def test_configure_logging_sets_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug", json_logs=True)
    WindowConfig(log_level="warning").apply_logging()

    assert calls[0] == {"level": logging.DEBUG, "format": "%(message)s"}
    assert calls[1]["level"] == logging.WARNING
    assert calls[1]["format"] == "%(levelname)s:%(name)s:%(message)s"


def test_log_event_honours_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("each_cons.test")

    class Unprintable:
        def __str__(self) -> str:
            raise AssertionError("payload formatted for a disabled level")

    with caplog.at_level(logging.INFO, logger="each_cons.test"):
        log_event(logger, "quiet", level=logging.DEBUG, json_logs=True, value=Unprintable())
        log_event(logger, "loud", level=logging.WARNING, json_logs=True)

    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert json.loads(caplog.records[0].getMessage()) == {"event": "loud"}
