"""Static table of the seven bookable nights.

Each night has a rank (Sunday night = 1 through Saturday night = 7) used
only for ordering, checks guests in on its own weekday and out on the
following weekday. Saturday night checks out on Sunday.
"""

from typing import Iterable, NamedTuple

from proposals.models.enums import DayOfWeek, Night


class NightInfo(NamedTuple):
    rank: int
    check_in: DayOfWeek
    check_out: DayOfWeek
    single_letter: str


NIGHT_CALENDAR: dict[Night, NightInfo] = {
    Night.SUNDAY: NightInfo(1, DayOfWeek.SUNDAY, DayOfWeek.MONDAY, "S"),
    Night.MONDAY: NightInfo(2, DayOfWeek.MONDAY, DayOfWeek.TUESDAY, "M"),
    Night.TUESDAY: NightInfo(3, DayOfWeek.TUESDAY, DayOfWeek.WEDNESDAY, "T"),
    Night.WEDNESDAY: NightInfo(4, DayOfWeek.WEDNESDAY, DayOfWeek.THURSDAY, "W"),
    Night.THURSDAY: NightInfo(5, DayOfWeek.THURSDAY, DayOfWeek.FRIDAY, "T"),
    Night.FRIDAY: NightInfo(6, DayOfWeek.FRIDAY, DayOfWeek.SATURDAY, "F"),
    Night.SATURDAY: NightInfo(7, DayOfWeek.SATURDAY, DayOfWeek.SUNDAY, "S"),
}

_NIGHT_BY_CHECK_IN: dict[DayOfWeek, Night] = {
    info.check_in: night for night, info in NIGHT_CALENDAR.items()
}

ALL_NIGHTS: tuple[Night, ...] = tuple(
    sorted(NIGHT_CALENDAR, key=lambda night: NIGHT_CALENDAR[night].rank)
)


def rank(night: Night) -> int:
    return NIGHT_CALENDAR[night].rank


def check_in_day(night: Night) -> DayOfWeek:
    return NIGHT_CALENDAR[night].check_in


def check_out_day(night: Night) -> DayOfWeek:
    return NIGHT_CALENDAR[night].check_out


def night_for_day(day: DayOfWeek) -> Night:
    """Return the night that checks in on ``day``."""
    return _NIGHT_BY_CHECK_IN[day]


def in_week_order(nights: Iterable[Night]) -> list[Night]:
    """Sort nights by rank, Sunday night first."""
    return sorted(nights, key=rank)
