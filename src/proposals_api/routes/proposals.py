"""Proposal review endpoints.

Provides REST endpoints for:
- The reservation span catalogue
- Reviewing a draft against its proposal (change set, pricing, and
  whether submitting would accept as-is or counteroffer)
"""

import datetime as dt

from fastapi import APIRouter, Depends

from proposals.models.draft import EditingDraft
from proposals.models.errors import ErrorCode, ProposalError
from proposals.models.proposal import RESERVATION_SPANS, ReservationSpan, get_reservation_span
from proposals.services.change_detector import detect_changes
from proposals.services.editing_session import configured_max_weeks, prepare_submission
from proposals.services.pricing import PricingCalculator
from proposals.services.schedule import derive_schedule
from proposals_api.dependencies import get_pricing_calculator
from proposals_api.models.pricing import PricingQuoteResponse
from proposals_api.models.proposals import (
    DraftInput,
    ProposalReviewRequest,
    ProposalReviewResponse,
)

router = APIRouter(tags=["proposals"])


@router.get(
    "/reservation-spans",
    summary="List reservation spans",
    response_model=list[ReservationSpan],
)
async def list_reservation_spans() -> list[ReservationSpan]:
    """Return the reservation span catalogue, 'other' last."""
    return RESERVATION_SPANS


@router.get(
    "/reservation-spans/{value}",
    summary="Get a reservation span",
    response_model=ReservationSpan,
    responses={404: {"description": "Unknown reservation span"}},
)
async def get_span(value: str) -> ReservationSpan:
    """Look up one reservation span by identifier."""
    return get_reservation_span(value)


def _build_draft(draft_in: DraftInput) -> EditingDraft:
    span = get_reservation_span(draft_in.reservation_span)
    if span.is_other:
        weeks = draft_in.weeks
        max_weeks = configured_max_weeks()
        if weeks is not None and weeks > max_weeks:
            raise ProposalError(
                ErrorCode.INVALID_WEEKS,
                {"weeks": str(weeks), "max_weeks": str(max_weeks)},
            )
    else:
        weeks = span.weeks

    nights = frozenset(draft_in.nights_selected)
    schedule = derive_schedule(nights)

    return EditingDraft(
        move_in_date=draft_in.move_in_date,
        reservation_span=span,
        weeks=weeks,
        nights_selected=nights,
        check_in_day=schedule.check_in_day if schedule else None,
        check_out_day=schedule.check_out_day if schedule else None,
        days_selected=schedule.days_selected if schedule else [],
        house_rules=draft_in.house_rules,
    )


@router.post(
    "/proposals/review",
    summary="Review a draft against its proposal",
    description="""
Compare a host's draft with the original proposal.

Returns the per-field change set, the derived schedule and pricing, and
which submission branch the draft would take.

**Notes:**
- Comparison is always against the proposal's original fields
- Pricing and action are null while the draft is incomplete (no nights,
  or an 'other' span without a week count)
""",
    response_model=ProposalReviewResponse,
    responses={
        400: {"description": "Week count out of range"},
        404: {"description": "Unknown reservation span"},
    },
)
async def review(
    request: ProposalReviewRequest,
    calculator: PricingCalculator = Depends(get_pricing_calculator),
) -> ProposalReviewResponse:
    """Review a draft."""
    proposal = request.proposal
    draft = _build_draft(request.draft)
    changes = detect_changes(draft, proposal)

    pricing = None
    action = None
    if draft.is_complete:
        pricing = PricingQuoteResponse.from_snapshot(
            calculator.price_draft(draft, proposal.nightly_price)
        )
        action = prepare_submission(draft, proposal).kind

    approx_move_out = None
    if draft.weeks is not None:
        approx_move_out = draft.move_in_date + dt.timedelta(weeks=draft.weeks)

    return ProposalReviewResponse(
        any_changed=changes.any_changed,
        changes=changes.fields,
        schedule=derive_schedule(draft.nights_selected),
        pricing=pricing,
        approx_move_out=approx_move_out,
        action=action,
    )
