"""Timestamp source and outcome retention shared between units.

A Schedule issues timestamps to units and keeps the outcomes they report.
Many units may share one schedule; it holds no lock, so concurrent callers
must synchronise around it themselves.

Example:
    >>> schedule = Schedule()
    >>> hero.set_schedule(schedule)
    >>> schedule.perform(Action(hero, lambda: hero.outcome("taunt")))
    >>> [outcome.data for outcome in schedule]
    ['taunt']
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from heroes.core.config import get_settings
from heroes.core.logging import get_logger
from heroes.engine.outcome import Outcome


if TYPE_CHECKING:
    from heroes.engine.action import Action
    from heroes.units.base import BaseUnit

logger = get_logger(__name__)


@runtime_checkable
class SupportsTimestamp(Protocol):
    """What a unit needs from its schedule."""

    def timestamp(self) -> int: ...

    def record(self, outcome: Outcome) -> bool: ...


class Schedule:
    """Issue timestamps and retain outcomes.

    With ``auto`` enabled every call to ``timestamp()`` returns the current
    tick and advances it, so stamps are strictly increasing. Without it
    the clock only moves through ``advance()`` or ``set_time()``.
    """

    def __init__(
        self,
        *,
        auto: bool = True,
        start: int = 0,
        step: int = 1,
        keep_by_default: bool = True,
    ) -> None:
        """Initialize the schedule.

        Args:
            auto: Generate a fresh timestamp on every request.
            start: Initial clock value.
            step: Increment applied by auto timestamps and ``advance()``.
            keep_by_default: Whether outcomes with no keep flag are retained.

        Raises:
            ValueError: If ``start`` is negative or ``step`` is not positive.
        """
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        if step < 1:
            raise ValueError(f"step must be positive, got {step}")

        self.auto = auto
        self.step = step
        self.keep_by_default = keep_by_default
        self._time = start
        self._outcomes: list[Outcome] = []

    @property
    def time(self) -> int:
        """The clock value the next ``timestamp()`` call will return."""
        return self._time

    @property
    def outcomes(self) -> tuple[Outcome, ...]:
        """Retained outcomes in the order they were recorded."""
        return tuple(self._outcomes)

    def timestamp(self) -> int:
        """Return a timestamp for an outcome produced now."""
        stamp = self._time
        if self.auto:
            self._time += self.step
        return stamp

    def advance(self, by: int | None = None) -> int:
        """Move the clock forward.

        Args:
            by: Amount to advance; defaults to ``step``.

        Returns:
            The new clock value.

        Raises:
            ValueError: If ``by`` is negative.
        """
        amount = self.step if by is None else by
        if amount < 0:
            raise ValueError(f"Cannot advance the schedule backwards by {amount}")
        self._time += amount
        return self._time

    def set_time(self, value: int) -> None:
        """Set the clock, which may never move backwards.

        Raises:
            ValueError: If ``value`` is earlier than the current clock.
        """
        if value < self._time:
            raise ValueError(f"Cannot rewind the schedule from {self._time} to {value}")
        self._time = value

    def record(self, outcome: Outcome) -> bool:
        """Retain or discard an outcome according to its keep flag.

        Returns:
            True if the outcome was retained.
        """
        if not outcome.should_keep(self.keep_by_default):
            logger.debug("Outcome discarded", timestamp=outcome.timestamp, keep=outcome.keep)
            return False

        self._outcomes.append(outcome)
        logger.debug(
            "Outcome recorded",
            timestamp=outcome.timestamp,
            source=type(outcome.source).__name__,
            keep=outcome.keep,
        )
        return True

    def perform(self, action: Action) -> Any:
        """Run an action and record its result if it is an Outcome.

        Returns:
            Whatever the action returned.
        """
        result = action.run()
        if isinstance(result, Outcome):
            self.record(result)
        return result

    def outcomes_for(self, unit: BaseUnit) -> list[Outcome]:
        """Retained outcomes produced by ``unit``."""
        return [outcome for outcome in self._outcomes if outcome.source is unit]

    def clear(self) -> None:
        """Forget every retained outcome. The clock is left untouched."""
        self._outcomes.clear()

    def __iter__(self) -> Iterator[Outcome]:
        return iter(tuple(self._outcomes))

    def __len__(self) -> int:
        return len(self._outcomes)

    def __repr__(self) -> str:
        return f"Schedule(auto={self.auto}, time={self._time}, outcomes={len(self._outcomes)})"


@lru_cache(maxsize=2)
def _shared_schedule(auto: bool, /) -> Schedule:
    settings = get_settings().schedule
    schedule = Schedule(
        auto=auto,
        start=settings.start,
        step=settings.step,
        keep_by_default=settings.keep_by_default,
    )
    logger.info("Shared schedule created", auto=auto, start=settings.start, step=settings.step)
    return schedule


def get_schedule(auto: bool = True) -> Schedule:
    """Get the shared schedule for the given timestamp mode.

    Each value of ``auto`` maps to one schedule for the life of the
    process, configured from ``ScheduleSettings``, however the flag is
    passed.
    """
    return _shared_schedule(bool(auto))


def clear_schedule_cache() -> None:
    """Drop the shared schedules so the next request builds fresh ones."""
    _shared_schedule.cache_clear()


__all__ = [
    "Schedule",
    "SupportsTimestamp",
    "clear_schedule_cache",
    "get_schedule",
]
