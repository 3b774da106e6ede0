# src/employee_directory/tests/test_logging/test_builder_setup.py
import logging
from pathlib import Path

import pytest

from employee_directory.config.settings import Settings
from employee_directory.core.logging.builder import make_dict_config, setup_logging
from employee_directory.core.logging.filters import RequestIdFilter
from employee_directory.core.logging.formatters import ColorFormatter, JsonFormatter


def make_settings(**overrides) -> Settings:
    values = {"ENV": "testing", "LOG_FORMAT": "json", "LOG_LEVEL": "INFO", "LOG_TO_STDOUT": True}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def restore_logging(test_settings):
    yield
    setup_logging(test_settings)


def test_make_dict_config_stdout_only():
    cfg = make_dict_config(make_settings())

    assert list(cfg["handlers"]) == ["console"]
    assert cfg["handlers"]["console"]["formatter"] == "json"
    assert cfg["handlers"]["console"]["filters"] == ["request_id", "redact"]
    assert cfg["formatters"]["json"]["()"] is JsonFormatter
    assert cfg["formatters"]["json"]["env"] == "testing"
    assert set(cfg["filters"]) == {"request_id", "redact"}
    assert cfg["loggers"][""]["level"] == "INFO"


def test_make_dict_config_contains_file_handlers(tmp_path):
    settings = make_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path)

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert cfg["handlers"]["error_file"]["formatter"] == "json"
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert set(cfg["loggers"][""]["handlers"]) == {"console", "file", "error_file"}


def test_text_format_uses_color_formatter():
    cfg = make_dict_config(make_settings(LOG_FORMAT="text"))

    assert cfg["formatters"]["standard"]["()"] is ColorFormatter
    assert cfg["handlers"]["console"]["formatter"] == "standard"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = make_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path / "logs")
    assert not Path(settings.LOG_DIR).exists()

    setup_logging(settings)
    logging.getLogger("employee_directory.test").error("written to file")

    assert settings.LOG_DIR.exists()
    root = logging.getLogger()
    for handler in root.handlers:
        handler.flush()
    assert "written to file" in (settings.LOG_DIR / "errors.log").read_text(encoding="utf-8")


def test_setup_logging_adds_root_request_id_filter_once():
    setup_logging(make_settings())
    setup_logging(make_settings())

    root = logging.getLogger()
    assert sum(isinstance(f, RequestIdFilter) for f in root.filters) == 1
    assert root.level == logging.INFO


def test_log_dir_alone_does_not_enable_file_handlers(tmp_path):
    # LOG_DIR always has a value; only LOG_TO_STDOUT decides whether files are written
    cfg = make_dict_config(make_settings(LOG_TO_STDOUT=True, LOG_DIR=tmp_path))

    assert list(cfg["handlers"]) == ["console"]
    assert not (tmp_path / "app.log").exists()
