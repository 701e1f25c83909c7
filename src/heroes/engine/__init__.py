"""Action execution and outcome recording.

Submodules:
    action: Deferred unit behaviour
    outcome: Timestamped action results
    schedule: Timestamp source, outcome retention and the shared provider

Example:
    >>> from heroes.engine import Action, get_schedule
    >>> schedule = get_schedule()
    >>> outcome = schedule.perform(Action(hero, hero.taunt))
"""

from __future__ import annotations

from heroes.engine.action import Action
from heroes.engine.outcome import Outcome
from heroes.engine.schedule import (
    Schedule,
    SupportsTimestamp,
    clear_schedule_cache,
    get_schedule,
)


__all__ = [
    "Action",
    "Outcome",
    "Schedule",
    "SupportsTimestamp",
    "clear_schedule_cache",
    "get_schedule",
]
