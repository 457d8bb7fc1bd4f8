"""Change detection between an editing draft and the original proposal.

The comparison always uses the proposal's original fields, never the
hc_ counteroffer fields the draft may have been seeded from.

Equality policy per tracked field:
- move-in date: same calendar day
- reservation span: same span id and same week count; when either side
  is the 'other' span only the week count is compared
- check-in / check-out day: direct equality
- house rules: same set of rule ids
- nights: same set of nights
"""

import datetime as dt
from typing import Optional

from proposals.models.changes import ChangeSet, FieldChange
from proposals.models.draft import EditingDraft
from proposals.models.enums import DayOfWeek, TrackedField
from proposals.models.proposal import Proposal
from proposals.utils.formatting import (
    format_short_date,
    house_rules_label,
    nights_per_week_label,
    reservation_length_label,
)


def _calendar_day(value: dt.date) -> dt.date:
    return value.date() if isinstance(value, dt.datetime) else value


def _day_label(day: Optional[DayOfWeek]) -> str:
    return day.value if day is not None else "Not set"


def span_changed(draft: EditingDraft, proposal: Proposal) -> bool:
    weeks_differ = draft.weeks != proposal.reservation_span_weeks
    if draft.reservation_span.is_other or proposal.reservation_span.is_other:
        return weeks_differ
    return weeks_differ or draft.reservation_span.value != proposal.reservation_span.value


def detect_changes(draft: EditingDraft, proposal: Proposal) -> ChangeSet:
    """Compare every tracked draft field with the original proposal.

    Args:
        draft: Current editing draft
        proposal: The proposal as received

    Returns:
        ChangeSet with a flag and display values per field
    """
    original_rule_ids = {rule.id for rule in proposal.house_rules}
    original_nights = set(proposal.nights_selected)

    fields = {
        TrackedField.MOVE_IN_DATE: FieldChange(
            changed=_calendar_day(draft.move_in_date) != _calendar_day(proposal.move_in_range_start),
            current=format_short_date(draft.move_in_date),
            original=format_short_date(proposal.move_in_range_start),
        ),
        TrackedField.RESERVATION_SPAN: FieldChange(
            changed=span_changed(draft, proposal),
            current=reservation_length_label(draft.reservation_span, draft.weeks),
            original=reservation_length_label(
                proposal.reservation_span, proposal.reservation_span_weeks
            ),
        ),
        TrackedField.CHECK_IN_DAY: FieldChange(
            changed=draft.check_in_day != proposal.check_in_day,
            current=_day_label(draft.check_in_day),
            original=_day_label(proposal.check_in_day),
        ),
        TrackedField.CHECK_OUT_DAY: FieldChange(
            changed=draft.check_out_day != proposal.check_out_day,
            current=_day_label(draft.check_out_day),
            original=_day_label(proposal.check_out_day),
        ),
        TrackedField.HOUSE_RULES: FieldChange(
            changed=set(draft.house_rule_ids) != original_rule_ids,
            current=house_rules_label(draft.house_rules),
            original=house_rules_label(proposal.house_rules, empty="None"),
        ),
        TrackedField.NIGHTS_SELECTED: FieldChange(
            changed=set(draft.nights_selected) != original_nights,
            current=nights_per_week_label(draft.nights_per_week),
            original=nights_per_week_label(len(original_nights)),
        ),
    }

    return ChangeSet(
        fields=fields,
        weeks_changed=draft.weeks != proposal.reservation_span_weeks,
    )


def has_changes(draft: EditingDraft, proposal: Proposal) -> bool:
    """Whether submitting the draft would be a counteroffer."""
    return detect_changes(draft, proposal).any_changed
