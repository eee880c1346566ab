"""Configuration loader for YAML build scripts and settings files."""

from pathlib import Path
from typing import Any

import yaml

from src.core.exceptions.errors import ConfigurationError


class ConfigLoader:
    """Load YAML configuration and expose its sections."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the config loader.

        Args:
            config_path: Path to configuration file.
        """
        self.config_path = config_path
        self._config: dict[str, Any] = {}

    def load(self, path: Path | None = None) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML file. Uses config_path if not provided.

        Returns:
            Loaded configuration dictionary.

        Raises:
            ConfigurationError: If the file cannot be loaded or is not a mapping.
        """
        load_path = path or self.config_path
        if not load_path:
            return {}

        try:
            with open(load_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {load_path}",
                config_key=str(load_path),
                details={"path": str(load_path)},
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {load_path}",
                config_key=str(load_path),
                details={"error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {load_path}",
                config_key=str(load_path),
                details={"type": type(data).__name__},
            )

        self._config = data
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by key.

        Supports dot notation for nested keys (e.g., 'checkerframework.tasks').
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get an entire configuration section, or an empty dict."""
        result = self._config.get(section, {})
        return result if isinstance(result, dict) else {}

    def extension_block(self, name: str = "checkerframework") -> dict[str, Any]:
        """Return the plugin DSL block of a build script.

        Args:
            name: Name the extension is registered under.

        Returns:
            The block, empty when the script does not configure the plugin.

        Raises:
            ConfigurationError: If a list entry of the block has the wrong shape.
        """
        block = self.get_section(name)
        for key in ("checkers", "known_checkers", "tasks"):
            value = block.get(key)
            if value is None:
                continue
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigurationError(
                    f"'{name}.{key}' must be a list of strings",
                    config_key=f"{name}.{key}",
                    details={"value": value},
                )
        return block

    @property
    def config(self) -> dict[str, Any]:
        """Return the loaded configuration."""
        return self._config
