"""Builds the reservation breakdown shown when previewing a draft."""

from typing import Optional

from proposals.models.breakdown import BreakdownRow, ReservationBreakdown
from proposals.models.changes import ChangeSet
from proposals.models.draft import EditingDraft
from proposals.models.enums import TrackedField
from proposals.models.pricing import PricingSnapshot
from proposals.models.proposal import Proposal
from proposals.utils.formatting import (
    format_currency,
    format_long_date,
    house_rules_label,
    nights_per_week_label,
)


def _was(changes: ChangeSet, field: TrackedField) -> Optional[str]:
    change = changes.fields[field]
    return change.original if change.changed else None


def build_breakdown(
    draft: EditingDraft,
    proposal: Proposal,
    pricing: PricingSnapshot,
    changes: ChangeSet,
) -> ReservationBreakdown:
    """Format the draft's terms and pricing with "was" hints for changes."""
    original_total_nights = len(proposal.nights_selected) * proposal.reservation_span_weeks

    rows = [
        BreakdownRow(
            label="Move-in",
            value=format_long_date(draft.move_in_date),
            was=_was(changes, TrackedField.MOVE_IN_DATE),
        ),
        BreakdownRow(
            label="Check-in",
            value=changes.fields[TrackedField.CHECK_IN_DAY].current,
            was=_was(changes, TrackedField.CHECK_IN_DAY),
        ),
        BreakdownRow(
            label="Check-out",
            value=changes.fields[TrackedField.CHECK_OUT_DAY].current,
            was=_was(changes, TrackedField.CHECK_OUT_DAY),
        ),
        BreakdownRow(
            label="Reservation Length",
            value=changes.fields[TrackedField.RESERVATION_SPAN].current,
            was=_was(changes, TrackedField.RESERVATION_SPAN),
        ),
        BreakdownRow(
            label="Your House Rules",
            value=house_rules_label(draft.house_rules),
            was=_was(changes, TrackedField.HOUSE_RULES),
        ),
        BreakdownRow(
            label="Weekly Pattern",
            value=nights_per_week_label(draft.nights_per_week),
            was=_was(changes, TrackedField.NIGHTS_SELECTED),
        ),
        BreakdownRow(
            label="Actual Weeks Used",
            value=str(pricing.weeks),
            was=str(proposal.reservation_span_weeks) if changes.weeks_changed else None,
        ),
        BreakdownRow(label="Compensation/night", value=format_currency(pricing.nightly_compensation)),
        BreakdownRow(label="Price per night", value=format_currency(pricing.nightly_price)),
        BreakdownRow(
            label="Nights reserved",
            value=str(pricing.total_nights),
            was=str(original_total_nights) if changes.scheduling_changed else None,
        ),
        BreakdownRow(label="Total Compensation", value=format_currency(pricing.total_compensation)),
        BreakdownRow(label="Total Price", value=format_currency(pricing.total_price)),
        BreakdownRow(
            label="Compensation / 4 weeks",
            value=format_currency(pricing.compensation_per_4_weeks),
        ),
        BreakdownRow(label="Price per 4 weeks", value=format_currency(pricing.price_per_4_weeks)),
        BreakdownRow(
            label="Refundable Damage Deposit",
            value=format_currency(proposal.damage_deposit),
        ),
        BreakdownRow(label="Maintenance Fee", value=format_currency(proposal.cleaning_fee)),
    ]

    return ReservationBreakdown(rows=rows, has_changes=changes.any_changed)
