"""Console and file handler wiring done by setup_logging."""

import logging
from unittest.mock import patch

import pytest

from stay_with_friends.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler():
    return next(
        (
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ),
        None,
    )


def _file_handler():
    return next((h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)), None)


class TestConsoleLevel:
    @pytest.mark.parametrize(
        "requested,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),
        ],
    )
    def test_console_handler_uses_requested_level(self, requested, expected):
        setup_logging(log_level=requested, enable_file=False)

        handler = _console_handler()
        assert handler is not None
        assert handler.level == expected


class TestLineFormat:
    @pytest.mark.parametrize(
        "name,pattern",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
        ],
    )
    def test_named_format_selected(self, name, pattern):
        setup_logging(log_format=name, enable_file=False)

        assert _console_handler().formatter._fmt == pattern

    def test_unknown_format_falls_back_to_detailed(self):
        setup_logging(log_format="fancy", enable_file=False)

        assert _console_handler().formatter._fmt == DETAILED_FORMAT


class TestLogFile:
    def test_file_handler_written_when_enabled(self, tmp_path):
        log_dir = tmp_path / "logs"
        with patch("stay_with_friends.core.logging_config.LOG_FILE_DIR", str(log_dir)), patch(
            "stay_with_friends.core.logging_config.ENABLE_FILE_LOGGING", True
        ):
            setup_logging(log_level="ERROR", enable_file=True)

            handler = _file_handler()
            assert handler is not None
            assert handler.level == logging.DEBUG
            assert (log_dir / "stay_with_friends.log").exists()

        setup_logging(enable_file=False)

    def test_no_file_handler_when_disabled_in_settings(self):
        with patch("stay_with_friends.core.logging_config.ENABLE_FILE_LOGGING", False):
            setup_logging(enable_file=True)

        assert _file_handler() is None

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1


class TestModuleLevels:
    def test_module_levels_applied(self):
        setup_logging(enable_file=False)

        for module_name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == logging.getLevelName(level)

    def test_third_party_noise_reduced(self):
        assert MODULE_LOG_LEVELS["sqlalchemy.engine"] == "WARNING"

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("stay_with_friends.server.services.bookings")

        assert logger.name == "stay_with_friends.server.services.bookings"
