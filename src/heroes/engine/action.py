"""Deferred unit behaviour.

An Action pairs the unit issuing it with a zero-argument callback. The
orchestrating layer can queue actions, check who owns them, and trigger
them later without knowing each unit's action vocabulary.

Example:
    >>> action = Action(hero, lambda: hero.attack(target))
    >>> outcome = action.run()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from heroes.core.logging import get_logger


if TYPE_CHECKING:
    from heroes.units.base import BaseUnit

logger = get_logger(__name__)


@dataclass(frozen=True)
class Action:
    """An action for a unit to enact.

    Running an action twice runs the callback twice. Callers that need
    at-most-once execution must track that themselves.

    Attributes:
        unit: The unit issuing this action.
        callback: Zero-argument callable performing the action.
    """

    unit: BaseUnit
    callback: Callable[[], Any]

    def run(self) -> Any:
        """Run the callback and return its result unchanged.

        Exceptions raised by the callback propagate to the caller.
        """
        logger.debug("Running action", unit=type(self.unit).__name__)
        return self.callback()

    def __call__(self) -> Any:
        return self.run()


__all__ = ["Action"]
