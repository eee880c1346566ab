"""Logging for cfplugin.

Log records go to stderr so that machine-readable output of the CLI
(``plan --format json``) stays clean on stdout.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from src.core.config.settings import LoggingSettings, get_settings

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    if settings.use_rich:
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.format))
    return handler


def _file_handler(settings: LoggingSettings, level: int) -> logging.Handler:
    settings.file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(settings.file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(settings: LoggingSettings | None = None, level: str | None = None) -> None:
    """Replace the root handlers with ones built from ``settings``.

    Args:
        settings: Logging settings. Uses global settings if not provided.
        level: Level override, e.g. "DEBUG" from a ``--verbose`` flag.
    """
    settings = settings or get_settings().logging
    effective_level = getattr(logging, (level or settings.level).upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(effective_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(settings))

    if settings.file:
        root_logger.addHandler(_file_handler(settings, effective_level))


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name, configuring the root logger on first use."""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

        if not logging.getLogger().handlers:
            setup_logging()

    return _loggers[name]
