"""Custom exception definitions for cfplugin."""

from typing import Any


class PluginError(Exception):
    """Base exception for all cfplugin errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(PluginError):
    """Exception raised for build configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class TaskSelectionError(ConfigurationError):
    """Exception raised when a named task cannot receive the checkers.

    Raised while selecting tasks, before any task is modified.
    """

    def __init__(
        self,
        message: str,
        task_name: str | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize task selection error.

        Args:
            message: Error message.
            task_name: Name of the offending task.
            reason: Short machine-readable reason (missing, wrong_type).
            details: Additional error details.
        """
        details = details or {}
        if task_name:
            details["task_name"] = task_name
        if reason:
            details["reason"] = reason
        super().__init__(message, details=details)
        self.task_name = task_name
        self.reason = reason


class UnknownTaskError(TaskSelectionError):
    """Exception raised by a task lookup that misses."""

    def __init__(self, task_name: str, known: list[str] | None = None) -> None:
        details = {"known_tasks": known} if known else None
        super().__init__(
            f"Task with name '{task_name}' not found",
            task_name=task_name,
            reason="missing",
            details=details,
        )


class DependencyResolutionError(PluginError):
    """Exception raised when a resolution scope cannot be resolved."""

    def __init__(
        self,
        message: str,
        scope: str | None = None,
        coordinate: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize resolution error.

        Args:
            message: Error message.
            scope: Name of the resolution scope.
            coordinate: Dependency coordinate involved.
            details: Additional error details.
        """
        details = details or {}
        if scope:
            details["scope"] = scope
        if coordinate:
            details["coordinate"] = coordinate
        super().__init__(message, details)


class HostError(PluginError):
    """Exception raised when the build host is used in an invalid way."""
