"""Night selection toggling and schedule derivation.

Check-in is the check-in day of the earliest selected night in the week
and check-out is the check-out day of the latest one. The selection does
not have to be contiguous: {Sunday, Saturday} checks in on Sunday and
out on Sunday.
"""

from typing import Iterable, Optional

from proposals.models.draft import Schedule
from proposals.models.enums import Night
from proposals.utils.logging import get_logger

from . import night_calendar

logger = get_logger(__name__)

MAX_NIGHTS_PER_WEEK = 7


def derive_schedule(nights: Iterable[Night]) -> Optional[Schedule]:
    """Derive check-in/out days and the day list from selected nights.

    Args:
        nights: Selected nights, in any order

    Returns:
        Schedule, or None when no night is selected (undetermined)
    """
    ordered = night_calendar.in_week_order(set(nights))
    if not ordered:
        return None

    return Schedule(
        check_in_day=night_calendar.check_in_day(ordered[0]),
        check_out_day=night_calendar.check_out_day(ordered[-1]),
        nights_selected=ordered,
        days_selected=[night_calendar.check_in_day(night) for night in ordered],
    )


def _is_available(night: Night, available: Optional[Iterable[Night]]) -> bool:
    # None means the listing offers every night
    return available is None or night in set(available)


def add_night(
    selection: frozenset[Night],
    night: Night,
    available: Optional[Iterable[Night]] = None,
) -> frozenset[Night]:
    """Add a night unless the week is full or the night is unavailable."""
    if night in selection:
        return selection
    if len(selection) >= MAX_NIGHTS_PER_WEEK:
        logger.debug("Rejected %s: %d nights already selected", night.value, len(selection))
        return selection
    if not _is_available(night, available):
        logger.debug("Rejected %s: not available on this listing", night.value)
        return selection
    return selection | {night}


def remove_night(selection: frozenset[Night], night: Night) -> frozenset[Night]:
    """Remove a night. Always allowed."""
    return selection - {night}


def toggle_night(
    selection: frozenset[Night],
    night: Night,
    available: Optional[Iterable[Night]] = None,
) -> frozenset[Night]:
    """Remove ``night`` if selected, otherwise try to add it.

    Rejected additions return the selection unchanged.
    """
    if night in selection:
        return remove_night(selection, night)
    return add_night(selection, night, available)
