"""Configuration management for cfplugin."""

from src.core.config.loader import ConfigLoader
from src.core.config.settings import (
    DEFAULT_COORDINATES,
    LoggingSettings,
    PluginSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "DEFAULT_COORDINATES",
    "LoggingSettings",
    "PluginSettings",
    "Settings",
    "get_settings",
]
