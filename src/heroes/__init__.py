"""Heroes - action and outcome core of a turn-based simulation.

Units carry a default template and a mutable current state. Actions bind
a unit to a deferred callback; running one typically mutates the unit and
returns an Outcome stamped by the unit's schedule.

Example:
    >>> from heroes import Action, Hero, Schedule
    >>>
    >>> schedule = Schedule()
    >>> hero = Hero("Abathur").set_schedule(schedule)
    >>>
    >>> def symbiote():
    ...     hero.set("energy", hero.get("energy") - 25)
    ...     return hero.outcome("symbiote", keep=True)
    >>>
    >>> outcome = schedule.perform(Action(hero, symbiote))
    >>> outcome.timestamp, outcome.data
    (0, 'symbiote')

Modules:
    core: Configuration, logging, and base exceptions.
    data: Versioned data lookup and JSON template loading.
    engine: Actions, outcomes, and schedules.
    units: Unit base classes and heroes.
"""

from __future__ import annotations

# Core
from heroes.core.config import Settings, get_settings
from heroes.core.exceptions import (
    DataDirectoryMissing,
    DataUnavailable,
    HeroesError,
    NoMatchingDataFile,
)
from heroes.core.logging import configure_logging, get_logger

# Engine
from heroes.engine import Action, Outcome, Schedule, get_schedule

# Units
from heroes.units import BaseUnit, Hero, JsonUnit


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "HeroesError",
    "DataUnavailable",
    "DataDirectoryMissing",
    "NoMatchingDataFile",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "Action",
    "Outcome",
    "Schedule",
    "get_schedule",
    # Units
    "BaseUnit",
    "Hero",
    "JsonUnit",
]
