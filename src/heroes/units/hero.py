"""Playable heroes."""

from __future__ import annotations

from typing import Any

from heroes.units.json_unit import JsonUnit


class Hero(JsonUnit):
    """A hero loaded from the ``herodata`` file of the latest patch.

    The data file maps hero ids to their templates, so each hero is
    created with its id.

    Example:
        >>> hero = Hero("Abathur")
        >>> hero.get("name")
        'Abathur'
    """

    data_file = "herodata_*.json"

    def __init__(self, hero_id: str, **kwargs: Any) -> None:
        super().__init__(hero_id, **kwargs)
        self._hero_id = hero_id

    @property
    def hero_id(self) -> str:
        """The id of this hero in the data file."""
        return self._hero_id
