"""Base class for every simulated unit.

A unit keeps two copies of its state:

- ``default``: the template loaded from data, never modified after load.
- ``current``: a deep copy of ``default`` that actions read and write.

Data is loaded lazily. Every field access goes through ``ensure_data()``
first, so a unit that is never touched never reads its data file.
``reset()`` discards ``current`` and derives a fresh copy from ``default``.

Example:
    >>> hero = Hero("Abathur")
    >>> hero.set("life", 500)["life"]
    500
    >>> hero.reset()["life"]
    685
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from heroes.core.exceptions import UnitStateError
from heroes.core.logging import get_logger
from heroes.data.paths import get_path
from heroes.engine.outcome import Outcome
from heroes.engine.schedule import Schedule, get_schedule


logger = get_logger(__name__)

ScheduleProvider = Callable[[bool], Schedule]

_MISSING: Any = object()


class BaseUnit(ABC):
    """A unit with a default template and a mutable current state.

    Subclasses only decide where their template comes from by
    implementing ``ensure_data()``.
    """

    def __init__(
        self,
        *,
        schedule: Schedule | None = None,
        schedule_provider: ScheduleProvider | None = None,
        data_path: Path | str | None = None,
    ) -> None:
        """Initialize an unloaded unit.

        Args:
            schedule: Schedule to stamp this unit's outcomes with.
            schedule_provider: Callable returning the shared schedule for a
                timestamp mode, used when no schedule was given.
                Defaults to ``get_schedule``.
            data_path: Data root to search; defaults to the configured root.
        """
        self._default: dict[str, Any] | None = None
        self._current: dict[str, Any] | None = None
        self._schedule = schedule
        self._schedule_provider = schedule_provider or get_schedule
        self._data_path = Path(data_path) if data_path is not None else None

    @abstractmethod
    def ensure_data(self) -> None:
        """Load the default template if it has not been loaded yet.

        Implementations must be idempotent and populate the template
        through ``_load_default()``.

        Raises:
            DataUnavailable: If the template cannot be located or parsed.
        """

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        """Whether both the default and current state exist."""
        return self._default is not None and self._current is not None

    @property
    def default(self) -> Mapping[str, Any]:
        """Read-only view of the default template, loading it if necessary."""
        self._ensure_ready()
        return MappingProxyType(self._default)

    @property
    def current(self) -> dict[str, Any]:
        """The live state, loading it if necessary."""
        return self._ensure_ready()

    def _load_default(self, template: Mapping[str, Any]) -> None:
        """Store a private copy of ``template`` and derive current state from it."""
        self._default = copy.deepcopy(dict(template))
        self._current = copy.deepcopy(self._default)

    def _ensure_ready(self) -> dict[str, Any]:
        self.ensure_data()
        if self._default is None:
            raise UnitStateError(
                "ensure_data() completed without loading a default template",
                unit=type(self).__name__,
            )
        if self._current is None:
            self._current = copy.deepcopy(self._default)
        return self._current

    def reset(self) -> BaseUnit:
        """Reset current state to an independent copy of the defaults.

        Returns:
            This unit.
        """
        self.ensure_data()
        if self._default is None:
            raise UnitStateError(
                "Cannot reset a unit without a default template",
                unit=type(self).__name__,
            )
        self._current = copy.deepcopy(self._default)
        logger.debug("Unit reset", unit=type(self).__name__)
        return self

    # -------------------------------------------------------------------------
    # Schedule
    # -------------------------------------------------------------------------

    def set_schedule(self, schedule: Schedule) -> BaseUnit:
        """Assign the schedule to use for this unit's actions.

        The schedule is shared, not copied.

        Returns:
            This unit.
        """
        self._schedule = schedule
        return self

    def schedule(self) -> Schedule:
        """Return this unit's schedule, fetching the shared auto schedule if unset."""
        if self._schedule is None:
            self._schedule = self._schedule_provider(True)
        return self._schedule

    def outcome(self, data: Any = None, keep: bool | None = None) -> Outcome:
        """Stamp an action result with the schedule's current timestamp.

        Args:
            data: The data generated by the action.
            keep: Whether this outcome should be recorded; None defers to
                the schedule's default.

        Returns:
            A new Outcome sourced from this unit.
        """
        return Outcome(
            timestamp=self.schedule().timestamp(),
            source=self,
            data=data,
            keep=keep,
        )

    # -------------------------------------------------------------------------
    # Data
    # -------------------------------------------------------------------------

    def get_path(self, pattern: str) -> Path | None:
        """Locate the latest patch file matching ``pattern``.

        Returns:
            The path, or None when the data root holds no match.

        Raises:
            DataDirectoryMissing: If the data root does not exist.
        """
        return get_path(pattern, data_path=self._data_path)

    def get(self, name: str, default: Any = _MISSING) -> Any:
        """Return a field from the current state.

        The stored object itself is returned, so nested structures can be
        mutated in place.

        Raises:
            KeyError: If the field is absent and no default was given.
        """
        current = self._ensure_ready()
        if default is _MISSING:
            return current[name]
        return current.get(name, default)

    def has(self, name: str) -> bool:
        """Whether the field exists in the current state and is not None."""
        return self._ensure_ready().get(name) is not None

    def set(self, name: str, value: Any) -> BaseUnit:
        """Create or overwrite a field in the current state.

        Returns:
            This unit.
        """
        self._ensure_ready()[name] = value
        return self

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(loaded={self.is_loaded})"


__all__ = ["BaseUnit", "ScheduleProvider"]
