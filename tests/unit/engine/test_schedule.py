"""Tests for Schedule and the shared schedule provider."""

from __future__ import annotations

import pytest

from heroes.engine.action import Action
from heroes.engine.outcome import Outcome
from heroes.engine.schedule import (
    Schedule,
    SupportsTimestamp,
    clear_schedule_cache,
    get_schedule,
)


class TestTimestamps:
    """Tests for timestamp generation."""

    def test_auto_timestamps_increase(self) -> None:
        """Auto schedules issue strictly increasing stamps."""
        schedule = Schedule(start=0, step=5)

        assert [schedule.timestamp() for _ in range(3)] == [0, 5, 10]
        assert schedule.time == 15

    def test_manual_timestamps_hold(self) -> None:
        """Manual schedules repeat the current time until moved."""
        schedule = Schedule(auto=False, start=2)

        assert schedule.timestamp() == 2
        assert schedule.timestamp() == 2
        assert schedule.advance() == 3
        assert schedule.timestamp() == 3

    def test_advance_by(self) -> None:
        """Test advancing by an explicit amount."""
        schedule = Schedule(auto=False)

        assert schedule.advance(by=7) == 7

    def test_cannot_move_backwards(self) -> None:
        """The clock never runs backwards."""
        schedule = Schedule(auto=False, start=10)

        with pytest.raises(ValueError):
            schedule.set_time(9)
        with pytest.raises(ValueError):
            schedule.advance(-1)

    @pytest.mark.parametrize("kwargs", [{"start": -1}, {"step": 0}])
    def test_invalid_construction(self, kwargs) -> None:
        """Test invalid clock parameters are rejected."""
        with pytest.raises(ValueError):
            Schedule(**kwargs)

    def test_satisfies_protocol(self) -> None:
        """Schedule implements the protocol units depend on."""
        assert isinstance(Schedule(), SupportsTimestamp)


class TestRetention:
    """Tests for outcome retention."""

    def test_keep_true_retained(self, warrior, schedule: Schedule) -> None:
        """Outcomes flagged keep=True are retained."""
        outcome = warrior.outcome("x", keep=True)

        assert schedule.record(outcome) is True
        assert schedule.outcomes == (outcome,)

    def test_keep_false_discarded(self, warrior, schedule: Schedule) -> None:
        """Outcomes flagged keep=False are discarded."""
        assert schedule.record(warrior.outcome("x", keep=False)) is False
        assert len(schedule) == 0

    @pytest.mark.parametrize("keep_by_default", [True, False])
    def test_keep_none_uses_policy(self, warrior, keep_by_default: bool) -> None:
        """Unflagged outcomes follow the schedule's default policy."""
        schedule = Schedule(keep_by_default=keep_by_default)
        warrior.set_schedule(schedule)

        assert schedule.record(warrior.outcome("x")) is keep_by_default

    def test_outcomes_for(self, warrior_cls, schedule: Schedule) -> None:
        """Retained outcomes can be filtered by source unit."""
        first = warrior_cls(schedule=schedule)
        second = warrior_cls(schedule=schedule)
        schedule.record(first.outcome(1, keep=True))
        schedule.record(second.outcome(2, keep=True))
        schedule.record(first.outcome(3, keep=True))

        assert [o.data for o in schedule.outcomes_for(first)] == [1, 3]
        assert [o.data for o in schedule] == [1, 2, 3]

    def test_clear_keeps_clock(self, warrior, schedule: Schedule) -> None:
        """Clearing forgets outcomes but not time."""
        schedule.record(warrior.outcome("x", keep=True))
        schedule.clear()

        assert len(schedule) == 0
        assert schedule.time == 1


class TestPerform:
    """Tests for running actions through a schedule."""

    def test_records_outcome(self, warrior, schedule: Schedule) -> None:
        """Outcome results are recorded and returned."""
        result = schedule.perform(Action(warrior, lambda: warrior.outcome("hit", keep=True)))

        assert isinstance(result, Outcome)
        assert schedule.outcomes == (result,)

    def test_other_results_untouched(self, warrior, schedule: Schedule) -> None:
        """Non-outcome results are returned without recording."""
        assert schedule.perform(Action(warrior, lambda: 42)) == 42
        assert len(schedule) == 0


class TestSharedSchedule:
    """Tests for the process-wide schedule provider."""

    def test_one_schedule_per_mode(self) -> None:
        """Each flag value maps to a single shared schedule."""
        auto = get_schedule(True)

        assert get_schedule(True) is auto
        assert get_schedule() is auto
        assert get_schedule(False) is not auto
        assert auto.auto is True
        assert get_schedule(False).auto is False

    def test_flag_spelling_shares_schedule(self) -> None:
        """Positional, keyword and default flags resolve to the same schedule."""
        auto = get_schedule()

        assert get_schedule(True) is auto
        assert get_schedule(auto=True) is auto
        assert get_schedule(auto=1) is auto  # type: ignore[arg-type]
        assert get_schedule(auto=False) is get_schedule(False)

    def test_units_share_fetched_schedule(self, warrior_cls) -> None:
        """Units without a schedule stamp on the one callers fetch."""
        schedule = get_schedule()
        unit = warrior_cls()

        outcome = unit.outcome("x", keep=True)
        schedule.record(outcome)

        assert unit.schedule() is schedule
        assert schedule.time == outcome.timestamp + schedule.step

    def test_clear_cache(self) -> None:
        """Clearing the cache swaps in a fresh schedule."""
        first = get_schedule()
        clear_schedule_cache()

        assert get_schedule() is not first

    def test_configured_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Shared schedules read ScheduleSettings."""
        from heroes.core.config import clear_settings_cache

        monkeypatch.setenv("HEROES_SCHEDULE_START", "100")
        monkeypatch.setenv("HEROES_SCHEDULE_STEP", "10")
        monkeypatch.setenv("HEROES_SCHEDULE_KEEP_BY_DEFAULT", "false")
        clear_settings_cache()

        schedule = get_schedule()

        assert schedule.timestamp() == 100
        assert schedule.timestamp() == 110
        assert schedule.keep_by_default is False
