"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        HeroesError: Base exception for all package errors.
        ConfigurationError: Configuration-related errors.
        DataUnavailable, DataDirectoryMissing, NoMatchingDataFile: Data loading errors.
        UnitStateError: Unit lifecycle errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging, get_logger, bind_context, clear_context
"""

from __future__ import annotations

from heroes.core.config import (
    DataSettings,
    ScheduleSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from heroes.core.exceptions import (
    ConfigurationError,
    DataDirectoryMissing,
    DataError,
    DataUnavailable,
    HeroesError,
    NoMatchingDataFile,
    UnitError,
    UnitStateError,
)
from heroes.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "HeroesError",
    "ConfigurationError",
    "DataError",
    "DataUnavailable",
    "DataDirectoryMissing",
    "NoMatchingDataFile",
    "UnitError",
    "UnitStateError",
    # Configuration
    "DataSettings",
    "ScheduleSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
