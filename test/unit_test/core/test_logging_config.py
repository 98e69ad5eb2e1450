"""Unit tests for the central logging configuration."""

import logging

import pytest

from scouts.core import logging_config
from scouts.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "fmt, expected",
        [("simple", SIMPLE_FORMAT), ("json", JSON_FORMAT), ("detailed", DETAILED_FORMAT), ("other", DETAILED_FORMAT)],
    )
    def test_format_selection(self, fmt, expected):
        setup_logging(log_level="INFO", log_format=fmt, enable_file=False)
        handler = logging.getLogger().handlers[0]
        assert handler.formatter._fmt == expected

    def test_console_handler_uses_requested_level(self):
        setup_logging(log_level="warning", enable_file=False)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.WARNING

    def test_module_levels_applied(self):
        setup_logging(enable_file=False)
        for name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(name).level == logging.getLevelName(level)

    def test_file_handler_when_enabled(self, tmp_path, monkeypatch):
        monkeypatch.setattr(logging_config, "ENABLE_FILE_LOGGING", True)
        monkeypatch.setattr(logging_config, "LOG_FILE_DIR", str(tmp_path / "logs"))
        setup_logging(log_level="INFO", enable_file=True)
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert (tmp_path / "logs" / "scouts.log").exists()
        for h in file_handlers:
            h.close()

    def test_no_file_handler_when_disabled_in_settings(self, monkeypatch):
        monkeypatch.setattr(logging_config, "ENABLE_FILE_LOGGING", False)
        setup_logging(enable_file=True)
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_get_logger_returns_named_logger():
    assert get_logger("scouts.services.groups").name == "scouts.services.groups"
