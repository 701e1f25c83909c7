"""Pytest configuration and shared fixtures.

This module provides common fixtures for the heroes test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from heroes.core.config import clear_settings_cache
from heroes.data.loader import clear_template_cache
from heroes.engine.schedule import Schedule, clear_schedule_cache
from heroes.units.base import BaseUnit


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


# =============================================================================
# Cache Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_caches() -> Generator[None, None, None]:
    """Reset settings, template and schedule caches around each test."""
    clear_settings_cache()
    clear_template_cache()
    clear_schedule_cache()
    yield
    clear_settings_cache()
    clear_template_cache()
    clear_schedule_cache()


# =============================================================================
# Unit Fixtures
# =============================================================================


class Warrior(BaseUnit):
    """In-memory unit that counts how often its data is loaded."""

    template: dict[str, Any] = {"hp": 100, "stats": {"armor": 5}, "tags": ["melee"]}

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.loads = 0

    def ensure_data(self) -> None:
        if self._default is not None:
            return
        self.loads += 1
        self._load_default(self.template)


@pytest.fixture
def schedule() -> Schedule:
    """Create a fresh auto-timestamp schedule."""
    return Schedule()


@pytest.fixture
def warrior(schedule: Schedule) -> Warrior:
    """Create a Warrior bound to the test schedule."""
    return Warrior(schedule=schedule)


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def sample_hero_data() -> dict[str, Any]:
    """Provide a multi-hero data document.

    Returns:
        Mapping of hero id to template.
    """
    return {
        "Abathur": {
            "name": "Abathur",
            "life": {"amount": 685, "regen": 1.4},
            "energy": 500,
            "abilities": ["Symbiote", "Toxic Nest"],
        },
        "Valla": {
            "name": "Valla",
            "life": {"amount": 1500, "regen": 3.1},
            "energy": 500,
            "abilities": ["Hungering Arrow", "Multishot"],
        },
    }


@pytest.fixture
def write_patch(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a data file into a versioned patch directory.

    Returns:
        Callable ``(version, filename, content) -> Path``.
    """
    root = tmp_path / "heroes-data"
    root.mkdir(exist_ok=True)

    def _write(version: str, filename: str, content: Any) -> Path:
        directory = root / version / "data"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Path of the data root used by ``write_patch``."""
    root = tmp_path / "heroes-data"
    root.mkdir(exist_ok=True)
    return root


@pytest.fixture
def warrior_cls() -> type[Warrior]:
    """The in-memory Warrior unit class, for tests that need several instances."""
    return Warrior
