"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from src.core.config.settings import LoggingSettings
from src.core.logger.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore root logger handlers replaced by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_plain_handler(self) -> None:
        setup_logging(LoggingSettings(level="WARNING", use_rich=False))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], RichHandler)

    def test_rich_handler(self) -> None:
        setup_logging(LoggingSettings(use_rich=True))

        assert isinstance(logging.getLogger().handlers[0], RichHandler)

    def test_level_override(self) -> None:
        setup_logging(LoggingSettings(level="WARNING", use_rich=False), level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler(self, temp_dir: Path) -> None:
        log_file = temp_dir / "logs" / "cfplugin.log"
        setup_logging(LoggingSettings(level="INFO", use_rich=False, file=str(log_file)))

        get_logger("cfplugin.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_get_logger_is_cached(self) -> None:
        assert get_logger("cfplugin.cached") is get_logger("cfplugin.cached")
