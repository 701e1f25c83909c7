"""Configuration management for the heroes simulation core.

Settings are read with pydantic-settings from environment variables and an
optional .env file.

Example:
    >>> from heroes.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.data.path
    PosixPath('data/heroes')

Environment Variables:
    HEROES_DATA_PATH: Root directory holding versioned patch data
    HEROES_SCHEDULE_START: First timestamp issued by auto schedules
    HEROES_SCHEDULE_STEP: Increment between auto timestamps
    HEROES_SCHEDULE_KEEP_BY_DEFAULT: Retain outcomes that carry no keep flag
    HEROES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from heroes.core.exceptions import ConfigurationError


class DataSettings(BaseSettings):
    """Configuration for unit template data.

    The data root is laid out as ``<path>/<version>/data/<file>``; the
    newest patch is picked by string ordering of the matched paths.

    Attributes:
        path: Root directory holding one subdirectory per data version.
        encoding: Text encoding of the JSON data files.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEROES_DATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    path: Path = Field(
        default=Path("data/heroes"),
        description="Root directory of versioned data",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding of data files",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Ensure the encoding is known to the codec registry.

        Args:
            value: The encoding name to validate.

        Returns:
            The validated encoding name.

        Raises:
            ConfigurationError: If the encoding is not recognised.
        """
        import codecs

        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ConfigurationError(
                f"Unknown data file encoding: {value}",
                config_key="encoding",
            ) from exc
        return value


class ScheduleSettings(BaseSettings):
    """Configuration for the default schedule.

    Attributes:
        start: First timestamp issued by an auto schedule.
        step: Increment applied after each auto timestamp.
        keep_by_default: Whether outcomes without a keep flag are retained.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEROES_SCHEDULE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start: int = Field(
        default=0,
        ge=0,
        description="First auto timestamp",
    )
    step: int = Field(
        default=1,
        ge=1,
        description="Auto timestamp increment",
    )
    keep_by_default: bool = Field(
        default=True,
        description="Retain outcomes that carry no keep flag",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        data: Unit template data settings.
        schedule: Default schedule settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEROES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Heroes",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    data: DataSettings = Field(default_factory=DataSettings)
    schedule: ScheduleSettings = Field(default_factory=ScheduleSettings)

    @property
    def is_production(self) -> bool:
        """Whether logs should be machine-readable (not in debug mode)."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DataSettings",
    "ScheduleSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
