"""API models for proposal review endpoints."""

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from proposals.models.changes import FieldChange
from proposals.models.draft import Schedule
from proposals.models.enums import Night, TrackedField
from proposals.models.proposal import HouseRule, Proposal, to_calendar_date

from .pricing import PricingQuoteResponse


class DraftInput(BaseModel):
    """The host's edited terms as sent by the presentation layer.

    Check-in/out days are derived from the nights server-side.
    """

    model_config = ConfigDict(strict=False)

    move_in_date: dt.date
    reservation_span: str = Field(..., description="Reservation span identifier, e.g. '8-weeks'")
    weeks: Optional[int] = Field(
        default=None,
        ge=1,
        description="Week count; required for the 'other' span, ignored otherwise",
    )
    nights_selected: list[Night] = Field(default_factory=list, max_length=7)
    house_rules: list[HouseRule] = Field(default_factory=list)

    @field_validator("move_in_date", mode="before")
    @classmethod
    def _move_in_as_date(cls, value: object) -> object:
        return to_calendar_date(value)


class ProposalReviewRequest(BaseModel):
    """A proposal and a draft to compare against it."""

    model_config = ConfigDict(strict=False)

    proposal: Proposal
    draft: DraftInput


class ProposalReviewResponse(BaseModel):
    """Change set, pricing and submission decision for a draft."""

    any_changed: bool
    changes: dict[TrackedField, FieldChange]
    schedule: Optional[Schedule] = None
    pricing: Optional[PricingQuoteResponse] = Field(
        default=None,
        description="Null while the draft is incomplete",
    )
    approx_move_out: Optional[dt.date] = None
    action: Optional[Literal["accept_as_is", "counteroffer"]] = Field(
        default=None,
        description="Submission branch; null while the draft is incomplete",
    )
