"""Timestamped records of what an action produced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from heroes.units.base import BaseUnit


@dataclass(frozen=True)
class Outcome:
    """The result of an action, stamped by the unit's schedule.

    Outcomes are created through ``BaseUnit.outcome()`` so the timestamp
    always comes from the schedule at the moment the action completed.

    Attributes:
        timestamp: Marker issued by ``Schedule.timestamp()``.
        source: The unit that produced the outcome.
        data: Arbitrary payload produced by the action.
        keep: True to retain, False to discard, None to let the schedule decide.
    """

    timestamp: int
    source: BaseUnit
    data: Any = None
    keep: bool | None = None

    def should_keep(self, default: bool) -> bool:
        """Resolve the retention flag against a schedule's default policy."""
        if self.keep is None:
            return default
        return self.keep


__all__ = ["Outcome"]
