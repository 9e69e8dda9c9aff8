"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from pathlib import Path
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from minicommerce_api.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    _get_logging_config,
    get_logger,
    setup_logging,
)
from minicommerce_api.server.core import config as config_module
from minicommerce_api.server.core.config import Settings


def _console_handler():
    return next(
        (
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ),
        None,
    )


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        """Test the console handler uses the requested level in any case."""
        setup_logging(log_level=log_level, enable_file=False)

        handler = _console_handler()
        assert handler is not None
        assert handler.level == expected_level

    def test_root_logger_captures_everything(self):
        """Test the root logger passes every record on to the handlers."""
        setup_logging(log_level="ERROR", enable_file=False)
        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        """Test each format name selects its line layout."""
        setup_logging(log_format=log_format, enable_file=False)

        handler = _console_handler()
        assert handler.formatter._fmt == expected_format


class TestSetupLoggingHandlers:
    """Test the handlers installed by setup_logging."""

    def test_repeated_setup_does_not_duplicate_handlers(self):
        """Test calling setup twice leaves one console handler."""
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1

    def test_file_logging_writes_into_directory(self, tmp_path: Path):
        """Test file logging creates the directory and writes the log file there."""
        log_dir = tmp_path / "logs"
        setup_logging(enable_file=True, log_file_dir=str(log_dir))

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        try:
            assert len(file_handlers) == 1
            assert Path(file_handlers[0].baseFilename) == log_dir / LOG_FILE_NAME
            assert log_dir.is_dir()
        finally:
            setup_logging(enable_file=False)
            for handler in file_handlers:
                handler.close()

    def test_module_levels_are_applied(self):
        """Test the per-module levels are set."""
        setup_logging(enable_file=False)

        for module_name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == logging.getLevelName(level)


def test_get_logger_returns_named_logger():
    """Test get_logger returns the logger of that name."""
    logger = get_logger("minicommerce_api.test")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "minicommerce_api.test"


class TestGetLoggingConfig:
    """Test how the module-level logging defaults are resolved."""

    def test_reads_grouped_logging_settings(self) -> None:
        """Values come from the settings' logging group."""
        settings = Settings(
            _env_file=None, log_level="warning", log_format="json", log_file_dir="var/log", enable_file_logging=True
        )

        with patch.object(config_module, "settings", settings):
            resolved = _get_logging_config()

        assert resolved == {
            "log_level": "WARNING",
            "log_format": "json",
            "log_file_dir": "var/log",
            "enable_file_logging": True,
        }

    def test_falls_back_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Raw environment variables are used when the settings cannot be read."""
        monkeypatch.setenv("MINICOMMERCE_LOG_LEVEL", "error")
        monkeypatch.setenv("MINICOMMERCE_ENABLE_FILE_LOGGING", "yes")

        broken = MagicMock()
        type(broken).logging = PropertyMock(side_effect=RuntimeError("broken"))

        with patch.object(config_module, "settings", broken):
            resolved = _get_logging_config()

        assert resolved["log_level"] == "ERROR"
        assert resolved["enable_file_logging"] is True
