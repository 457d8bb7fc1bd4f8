"""Unit tests for the night calendar and schedule derivation.

Tests verify:
- The static night table (ranks, check-in/out days, Saturday wraparound)
- Check-in/out derivation from the lowest and highest ranked nights
- Toggle rules: weekly capacity, listing availability, removal
"""

import pytest

from proposals.models.enums import DayOfWeek, Night
from proposals.services import night_calendar
from proposals.services.schedule import (
    MAX_NIGHTS_PER_WEEK,
    add_night,
    derive_schedule,
    remove_night,
    toggle_night,
)

ALL_NIGHTS = frozenset(Night)


# === Night Calendar ===


class TestNightCalendar:
    """Tests for the static night table."""

    def test_ranks_run_sunday_to_saturday(self) -> None:
        """Sunday night ranks 1 and Saturday night ranks 7."""
        assert night_calendar.rank(Night.SUNDAY) == 1
        assert night_calendar.rank(Night.SATURDAY) == 7
        assert [night_calendar.rank(n) for n in night_calendar.ALL_NIGHTS] == list(range(1, 8))

    def test_night_checks_out_next_day(self) -> None:
        """Each night checks in on its weekday and out on the next."""
        assert night_calendar.check_in_day(Night.MONDAY) == DayOfWeek.MONDAY
        assert night_calendar.check_out_day(Night.MONDAY) == DayOfWeek.TUESDAY

    def test_saturday_night_checks_out_sunday(self) -> None:
        """Saturday night wraps around to Sunday."""
        assert night_calendar.check_out_day(Night.SATURDAY) == DayOfWeek.SUNDAY

    def test_night_for_day(self) -> None:
        """The night for a day is the one checking in on it."""
        for night in Night:
            assert night_calendar.night_for_day(night_calendar.check_in_day(night)) == night

    def test_in_week_order(self) -> None:
        """Nights sort Sunday first regardless of input order."""
        ordered = night_calendar.in_week_order([Night.SATURDAY, Night.MONDAY, Night.SUNDAY])
        assert ordered == [Night.SUNDAY, Night.MONDAY, Night.SATURDAY]


# === Schedule Derivation ===


class TestDeriveSchedule:
    """Tests for derive_schedule."""

    def test_weekday_nights(self) -> None:
        """Monday-Thursday nights check in Monday and out Friday."""
        schedule = derive_schedule(
            {Night.THURSDAY, Night.MONDAY, Night.WEDNESDAY, Night.TUESDAY}
        )

        assert schedule is not None
        assert schedule.check_in_day == DayOfWeek.MONDAY
        assert schedule.check_out_day == DayOfWeek.FRIDAY
        assert schedule.days_selected == [
            DayOfWeek.MONDAY,
            DayOfWeek.TUESDAY,
            DayOfWeek.WEDNESDAY,
            DayOfWeek.THURSDAY,
        ]
        assert schedule.nights_per_week == 4

    def test_saturday_only(self) -> None:
        """A single Saturday night checks out on Sunday."""
        schedule = derive_schedule({Night.SATURDAY})

        assert schedule is not None
        assert schedule.check_in_day == DayOfWeek.SATURDAY
        assert schedule.check_out_day == DayOfWeek.SUNDAY

    def test_non_contiguous_wraparound(self) -> None:
        """Sunday and Saturday nights check in and out on Sunday."""
        schedule = derive_schedule({Night.SUNDAY, Night.SATURDAY})

        assert schedule is not None
        assert schedule.check_in_day == DayOfWeek.SUNDAY
        assert schedule.check_out_day == DayOfWeek.SUNDAY
        assert schedule.days_selected == [DayOfWeek.SUNDAY, DayOfWeek.SATURDAY]

    def test_empty_selection_is_undetermined(self) -> None:
        """No nights means no schedule."""
        assert derive_schedule(set()) is None

    @pytest.mark.parametrize(
        "nights",
        [
            {Night.FRIDAY},
            {Night.SUNDAY, Night.WEDNESDAY},
            {Night.TUESDAY, Night.FRIDAY, Night.SATURDAY},
            set(Night),
        ],
    )
    def test_bounds_follow_lowest_and_highest_rank(self, nights: set[Night]) -> None:
        """Check-in comes from the lowest rank, check-out from the highest."""
        schedule = derive_schedule(nights)
        lowest = min(nights, key=night_calendar.rank)
        highest = max(nights, key=night_calendar.rank)

        assert schedule is not None
        assert schedule.check_in_day == night_calendar.check_in_day(lowest)
        assert schedule.check_out_day == night_calendar.check_out_day(highest)


# === Toggle Rules ===


class TestToggleNight:
    """Tests for add_night, remove_night and toggle_night."""

    def test_add_then_remove_is_idempotent(self) -> None:
        """Toggling the same night twice restores the selection."""
        initial = frozenset({Night.MONDAY, Night.TUESDAY})

        added = toggle_night(initial, Night.FRIDAY)
        assert Night.FRIDAY in added
        assert toggle_night(added, Night.FRIDAY) == initial

    def test_adding_to_full_week_is_noop(self) -> None:
        """A full week stays unchanged when a selected night is added again."""
        full = frozenset(ALL_NIGHTS)
        assert len(full) == MAX_NIGHTS_PER_WEEK
        assert add_night(full, Night.MONDAY) == full

    def test_add_rejected_at_capacity(self) -> None:
        """Adding an eighth night is refused once seven are selected."""

        class _FullSelection(frozenset):
            def __len__(self) -> int:
                return MAX_NIGHTS_PER_WEEK

        selection = _FullSelection({Night.MONDAY})
        assert add_night(selection, Night.TUESDAY) is selection

    def test_unavailable_night_is_rejected(self) -> None:
        """Nights the listing does not offer cannot be added."""
        selection = frozenset({Night.MONDAY})
        available = [Night.MONDAY, Night.TUESDAY]

        assert toggle_night(selection, Night.SATURDAY, available) == selection
        assert toggle_night(selection, Night.TUESDAY, available) == {Night.MONDAY, Night.TUESDAY}

    def test_none_availability_allows_every_night(self) -> None:
        """Omitted availability means every night is offered."""
        assert add_night(frozenset(), Night.SUNDAY, None) == {Night.SUNDAY}

    def test_remove_is_always_allowed(self) -> None:
        """Removal ignores availability."""
        selection = frozenset({Night.MONDAY, Night.SATURDAY})
        assert toggle_night(selection, Night.SATURDAY, [Night.MONDAY]) == {Night.MONDAY}
        assert remove_night(selection, Night.MONDAY) == {Night.SATURDAY}

    def test_remove_last_night_leaves_empty_selection(self) -> None:
        """Removing the only night empties the selection."""
        assert toggle_night(frozenset({Night.MONDAY}), Night.MONDAY) == frozenset()
