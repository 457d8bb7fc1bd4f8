"""Proposal model and its reference data.

The proposal is owned by the surrounding product and is read-only here.
Fields prefixed with ``hc_`` hold a previously submitted host counteroffer.
"""

import datetime as dt
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

from .enums import DayOfWeek, Night, ProposalStatus, RentalType
from .errors import ErrorCode, ProposalError

OTHER_SPAN_VALUE = "other"


def to_calendar_date(value: object) -> object:
    """Reduce a datetime to its calendar date; other values pass through."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return dt.datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


class HouseRule(BaseModel):
    """A house rule, unique by id."""

    id: str = Field(..., min_length=1, description="House rule identifier")
    name: str = Field(..., description="Display name")
    description: Optional[str] = None


class ReservationSpan(BaseModel):
    """A named reservation duration.

    The ``other`` span has no canonical week count (``weeks == 0``) and
    defers to the manually entered number of weeks.
    """

    value: str = Field(..., description="Span identifier, e.g. '8-weeks'")
    label: str = Field(..., description="Display label")
    weeks: int = Field(..., ge=0, description="Canonical week count, 0 for 'other'")
    months: float = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)

    @property
    def is_other(self) -> bool:
        """Whether this is the custom-length sentinel span."""
        return self.value == OTHER_SPAN_VALUE


RESERVATION_SPANS: list[ReservationSpan] = [
    ReservationSpan(value="6-weeks", label="6 weeks", weeks=6, months=1.5, days=42),
    ReservationSpan(value="7-weeks", label="7 weeks", weeks=7, months=1.75, days=49),
    ReservationSpan(value="8-weeks", label="8 weeks", weeks=8, months=2, days=56),
    ReservationSpan(value="9-weeks", label="9 weeks (~2 months)", weeks=9, months=2, days=63),
    ReservationSpan(value="10-weeks", label="10 weeks", weeks=10, months=2.5, days=70),
    ReservationSpan(value="12-weeks", label="12 weeks", weeks=12, months=3, days=84),
    ReservationSpan(value="13-weeks", label="13 weeks (3 months)", weeks=13, months=3, days=91),
    ReservationSpan(value="16-weeks", label="16 weeks", weeks=16, months=4, days=112),
    ReservationSpan(value="17-weeks", label="17 weeks (~4 months)", weeks=17, months=4, days=119),
    ReservationSpan(value=OTHER_SPAN_VALUE, label="Other", weeks=0, months=0, days=0),
]


def get_reservation_span(value: str) -> ReservationSpan:
    """Look up a span from the catalogue by identifier.

    Raises:
        ProposalError: UNKNOWN_RESERVATION_SPAN if no span has this identifier.
    """
    for span in RESERVATION_SPANS:
        if span.value == value:
            return span
    raise ProposalError(ErrorCode.UNKNOWN_RESERVATION_SPAN, {"value": value})


class ProposalStatusInfo(NamedTuple):
    display_text: str
    usual_order: int


PROPOSAL_STATUSES: dict[ProposalStatus, ProposalStatusInfo] = {
    ProposalStatus.SUBMITTED_FOR_REVIEW: ProposalStatusInfo("Proposal Submitted for Review", 0),
    ProposalStatus.SUBMITTED_BY_GUEST: ProposalStatusInfo("Proposal Submitted by Guest", 1),
    ProposalStatus.HOST_REVIEW: ProposalStatusInfo("Host Review", 2),
    ProposalStatus.HOST_COUNTEROFFER_SUBMITTED: ProposalStatusInfo("Host Counteroffer Submitted", 3),
    ProposalStatus.ACCEPTED: ProposalStatusInfo("Proposal or Counteroffer Accepted", 4),
    ProposalStatus.LEASE_DOCUMENTS_SENT_TO_GUEST: ProposalStatusInfo("Lease Documents Sent to Guest", 5),
    ProposalStatus.LEASE_DOCUMENTS_SENT_TO_HOST: ProposalStatusInfo("Lease Documents Sent to Host", 6),
    ProposalStatus.LEASE_DOCUMENTS_SIGNED: ProposalStatusInfo("Lease Documents Signed", 7),
    ProposalStatus.INITIAL_PAYMENT_SUBMITTED: ProposalStatusInfo("Initial Payment Submitted", 8),
    ProposalStatus.CANCELLED_BY_GUEST: ProposalStatusInfo("Proposal Cancelled by Guest", 9),
    ProposalStatus.REJECTED_BY_HOST: ProposalStatusInfo("Proposal Rejected by Host", 10),
    ProposalStatus.CANCELLED_BY_SYSTEM: ProposalStatusInfo("Proposal Cancelled by System", 11),
    ProposalStatus.GUEST_IGNORED_SUGGESTION: ProposalStatusInfo("Guest Ignored Suggestion", 12),
}

# Statuses at or past this order seed the draft from the hc_ fields
COUNTEROFFER_STAGE_ORDER = PROPOSAL_STATUSES[ProposalStatus.HOST_COUNTEROFFER_SUBMITTED].usual_order


class Listing(BaseModel):
    """The listing a proposal was made for."""

    id: str
    title: str
    rental_type: RentalType = RentalType.NIGHTLY
    nights_available: Optional[list[Night]] = Field(
        default=None,
        description="Nights the host offers; None means every night",
    )


class Guest(BaseModel):
    """The guest who made the proposal."""

    id: str
    first_name: str
    last_name: str
    email: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Proposal(BaseModel):
    """A guest's reservation proposal as received from the product."""

    id: str = Field(..., description="Proposal ID")

    # Scheduling
    check_in_day: DayOfWeek
    check_out_day: DayOfWeek
    move_in_range_start: dt.date
    move_in_range_end: Optional[dt.date] = None
    days_selected: list[DayOfWeek] = Field(default_factory=list)
    nights_selected: list[Night] = Field(default_factory=list)

    # Duration
    reservation_span: ReservationSpan
    reservation_span_weeks: int = Field(..., ge=1)

    # Pricing
    nightly_price: float = Field(..., ge=0, description="Guest nightly price")
    damage_deposit: float = Field(default=0, ge=0)
    cleaning_fee: float = Field(default=0, ge=0)

    house_rules: list[HouseRule] = Field(default_factory=list)

    status: ProposalStatus = ProposalStatus.HOST_REVIEW
    listing: Listing
    guest: Guest

    # Host counteroffer shadow fields
    hc_move_in_date: Optional[dt.date] = None
    hc_reservation_span: Optional[ReservationSpan] = None
    hc_reservation_span_weeks: Optional[int] = Field(default=None, ge=1)
    hc_check_in_day: Optional[DayOfWeek] = None
    hc_check_out_day: Optional[DayOfWeek] = None
    hc_nights_selected: Optional[list[Night]] = None
    hc_days_selected: Optional[list[DayOfWeek]] = None
    hc_house_rules: Optional[list[HouseRule]] = None

    @field_validator(
        "move_in_range_start", "move_in_range_end", "hc_move_in_date", mode="before"
    )
    @classmethod
    def _move_in_as_date(cls, value: object) -> object:
        # Move-in dates arrive with a time of day; only the calendar day counts
        return to_calendar_date(value)

    @property
    def status_order(self) -> int:
        """Usual workflow order of the current status."""
        return PROPOSAL_STATUSES[self.status].usual_order
