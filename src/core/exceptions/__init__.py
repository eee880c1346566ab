"""Exception definitions module."""

from src.core.exceptions.errors import (
    ConfigurationError,
    DependencyResolutionError,
    HostError,
    PluginError,
    TaskSelectionError,
    UnknownTaskError,
)

__all__ = [
    "PluginError",
    "ConfigurationError",
    "TaskSelectionError",
    "UnknownTaskError",
    "DependencyResolutionError",
    "HostError",
]
