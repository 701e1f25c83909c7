"""Simulated units and their lazily loaded state.

Submodules:
    base: Abstract unit with default/current state and schedule access
    json_unit: Units backed by versioned JSON data files
    hero: Playable heroes
"""

from __future__ import annotations

from heroes.units.base import BaseUnit, ScheduleProvider
from heroes.units.hero import Hero
from heroes.units.json_unit import JsonUnit


__all__ = [
    "BaseUnit",
    "Hero",
    "JsonUnit",
    "ScheduleProvider",
]
