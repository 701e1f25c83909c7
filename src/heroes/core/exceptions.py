"""Custom exception hierarchy for the heroes simulation core.

All exceptions inherit from HeroesError so callers can handle every
failure of this package at a single boundary while still seeing the
domain-specific context in ``details``.

Example:
    >>> from heroes.core.exceptions import DataDirectoryMissing
    >>> raise DataDirectoryMissing("No data root", data_path="data/heroes")
"""

from __future__ import annotations

from typing import Any


class HeroesError(Exception):
    """Base exception for all heroes errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(HeroesError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Data Domain Exceptions
# =============================================================================


class DataError(HeroesError):
    """Base exception for all unit data loading errors."""


class DataUnavailable(DataError):
    """Raised when a unit's default template cannot be produced.

    This covers unreadable or malformed data files, documents that do not
    contain the requested template, and the more specific path failures
    below. It is propagated unchanged through ``ensure_data()`` to the
    first field access that triggered the load.
    """

    def __init__(
        self,
        message: str,
        *,
        source_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize data error with source file context.

        Args:
            message: Human-readable error description.
            source_file: Path to the data file that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if source_file:
            combined_details["source_file"] = source_file
        super().__init__(message, details=combined_details)


class DataDirectoryMissing(DataUnavailable):
    """Raised when the configured data root does not exist."""

    def __init__(
        self,
        message: str,
        *,
        data_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize missing directory error.

        Args:
            message: Human-readable error description.
            data_path: The data root that was expected to exist.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if data_path:
            combined_details["data_path"] = data_path
        super().__init__(message, details=combined_details)


class NoMatchingDataFile(DataUnavailable):
    """Raised when the data root exists but yields no usable data file."""

    def __init__(
        self,
        message: str,
        *,
        pattern: str | None = None,
        data_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize no-match error with lookup context.

        Args:
            message: Human-readable error description.
            pattern: The file glob that was searched for.
            data_path: The data root that was searched.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if pattern:
            combined_details["pattern"] = pattern
        if data_path:
            combined_details["data_path"] = data_path
        super().__init__(message, details=combined_details)


# =============================================================================
# Unit Domain Exceptions
# =============================================================================


class UnitError(HeroesError):
    """Base exception for unit lifecycle errors."""


class UnitStateError(UnitError):
    """Raised when a unit is in an inconsistent state.

    This typically means a subclass's ``ensure_data()`` returned without
    populating the default template.
    """

    def __init__(
        self,
        message: str,
        *,
        unit: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unit state error.

        Args:
            message: Human-readable error description.
            unit: Name of the unit class involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if unit:
            combined_details["unit"] = unit
        super().__init__(message, details=combined_details)


__all__ = [
    "HeroesError",
    "ConfigurationError",
    "DataError",
    "DataUnavailable",
    "DataDirectoryMissing",
    "NoMatchingDataFile",
    "UnitError",
    "UnitStateError",
]
