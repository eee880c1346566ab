"""Application settings using Pydantic Settings."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.config.loader import ConfigLoader
from src.core.exceptions.errors import ConfigurationError

DEFAULT_COORDINATES = [
    "org.checkerframework:checker:2.+",
    "org.checkerframework:jdk8:2.+",
]


class PluginSettings(BaseSettings):
    """Checker Framework integration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CFPLUGIN_PLUGIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    extension_name: str = Field(
        default="checkerframework",
        description="Name the extension is registered under",
    )
    agent_name: str = Field(
        default="checkerframeworkAgent",
        description="Stable name of the compiler argument provider",
    )
    processor_scope: str = Field(
        default="annotationProcessor",
        description="Resolution scope that receives the checker libraries",
    )
    dependency_coordinates: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_COORDINATES),
        description="Coordinates injected into the processor scope",
    )
    processor_flag: str = Field(
        default="-processor",
        description="Compiler flag naming the checkers to run",
    )
    classpath_flag: str = Field(
        default="-Xbootclasspath/p:",
        description="Compiler flag prefix for the checker library path",
    )
    artifact_cache: Path = Field(
        default=Path.home() / ".cfplugin" / "artifacts",
        description="Local artifact cache used by the reference host",
    )

    @field_validator("dependency_coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, v: str | list[str]) -> list[str]:
        """Accept a list, a JSON list string or a comma separated string."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [c.strip() for c in v.split(",") if c.strip()]
        return v

    @field_validator("artifact_cache", mode="before")
    @classmethod
    def validate_artifact_cache(cls, v: str | Path) -> Path:
        """Expand user home in the cache path."""
        return Path(v).expanduser()


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CFPLUGIN_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CFPLUGIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    plugin: PluginSettings = Field(default_factory=PluginSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.

        Raises:
            ConfigurationError: If the file cannot be loaded or holds invalid values.
        """
        loader = ConfigLoader(path)
        loader.load()

        try:
            return cls(
                plugin=PluginSettings(**loader.get_section("plugin")),
                logging=LoggingSettings(**loader.get_section("logging")),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings file: {path}",
                config_key=str(path),
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: Environment variables > .env > config/default.yaml > defaults

        Returns:
            Settings instance.
        """
        default_path = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"
        if default_path.exists():
            return cls.from_yaml(default_path)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
