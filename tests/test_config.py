from __future__ import annotations

import logging
import logging.handlers

import pytest

from form_demos.__main__ import load_config
from form_demos.config import AppConfig, StyleConfig
from form_demos.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults_match_validation_limits():
    config = AppConfig()

    assert config.max_text_length == 1000
    assert config.min_image_size == 50
    assert config.qr_charset == "utf-8"
    assert not config.debug


def test_from_env_reads_logging_options(monkeypatch, tmp_path):
    log_file = tmp_path / "demos.log"
    monkeypatch.setenv("FORM_DEMOS_LOG_LEVEL", "warning")
    monkeypatch.setenv("FORM_DEMOS_LOG_FILE", str(log_file))
    monkeypatch.setenv("FORM_DEMOS_DEBUG", "true")

    config = AppConfig.from_env()

    assert config.log_level == "WARNING"
    assert config.log_file == str(log_file)
    assert config.debug


def test_from_env_defaults(monkeypatch):
    for name in ("FORM_DEMOS_LOG_LEVEL", "FORM_DEMOS_LOG_FILE", "FORM_DEMOS_DEBUG"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig.from_env()

    assert config.log_level == "INFO"
    assert config.log_file is None
    assert not config.debug


def test_setup_logging_console_only():
    setup_logging(AppConfig(log_level="WARNING"))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "demos.log"
    setup_logging(AppConfig(log_file=str(log_file), debug=True))

    logging.getLogger("form_demos.test").debug("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert "hello from the test" in log_file.read_text(encoding="utf-8")


def test_load_config_parses_arguments(monkeypatch):
    monkeypatch.delenv("FORM_DEMOS_DEBUG", raising=False)

    demo, config = load_config(["stack", "--log-level", "debug", "--debug"])

    assert demo == "stack"
    assert config.log_level == "DEBUG"
    assert config.debug


def test_load_config_defaults_to_qr_demo():
    demo, _config = load_config([])

    assert demo == "qr"


def test_load_config_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        load_config(["tree"])


def test_stylesheet_uses_style_colours():
    style = StyleConfig(accent_primary="#123456")

    assert "#123456" in style.stylesheet()
