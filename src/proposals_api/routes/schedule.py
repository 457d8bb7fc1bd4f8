"""Schedule endpoints.

Provides REST endpoints for:
- Deriving check-in/out days from a night selection
- Toggling a night with the weekly capacity and availability rules
"""

from fastapi import APIRouter

from proposals.models.draft import Schedule
from proposals.models.errors import ErrorCode, ProposalError
from proposals.services import night_calendar
from proposals.services.schedule import derive_schedule, toggle_night
from proposals_api.models.schedule import (
    DeriveScheduleRequest,
    ToggleNightRequest,
    ToggleNightResponse,
)

router = APIRouter(tags=["schedule"])


@router.post(
    "/schedule/derive",
    summary="Derive schedule from nights",
    description="""
Derive check-in day, check-out day and the list of days from selected nights.

**Notes:**
- Check-in is the earliest selected night's own weekday (Sunday first)
- Check-out is the day after the latest selected night
- Selections need not be contiguous; Saturday night checks out on Sunday
""",
    response_model=Schedule,
    responses={
        400: {"description": "No night selected"},
    },
)
async def derive(request: DeriveScheduleRequest) -> Schedule:
    """Derive the schedule for a selection."""
    schedule = derive_schedule(request.nights_selected)
    if schedule is None:
        raise ProposalError(ErrorCode.INCOMPLETE_DRAFT, {"nights_selected": "0"})
    return schedule


@router.post(
    "/schedule/toggle",
    summary="Toggle a night",
    description="""
Add or remove a night and return the new selection with its schedule.

Adding is rejected when seven nights are already selected or the night is
not available on the listing; removing is always allowed. Rejected toggles
return the unchanged selection with `changed: false`.
""",
    response_model=ToggleNightResponse,
)
async def toggle(request: ToggleNightRequest) -> ToggleNightResponse:
    """Toggle a night in the selection."""
    current = frozenset(request.nights_selected)
    selection = toggle_night(current, request.night, request.available_nights)

    return ToggleNightResponse(
        nights_selected=night_calendar.in_week_order(selection),
        changed=selection != current,
        schedule=derive_schedule(selection),
    )
