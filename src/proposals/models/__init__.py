"""Pydantic models for host proposal review."""

from .breakdown import BreakdownRow, ReservationBreakdown
from .changes import ChangeSet, FieldChange
from .draft import (
    AcceptAsIs,
    Counteroffer,
    CounterofferParams,
    EditingDraft,
    Schedule,
    SubmissionAction,
)
from .enums import (
    Baseline,
    DayOfWeek,
    Night,
    NotificationType,
    ProposalStatus,
    RentalType,
    SessionState,
    TrackedField,
    WeeklySelection,
)
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ErrorCode,
    ErrorResponse,
    ProposalError,
)
from .notification import ConfirmationPrompt, Notification
from .pricing import PricingSnapshot
from .proposal import (
    COUNTEROFFER_STAGE_ORDER,
    OTHER_SPAN_VALUE,
    PROPOSAL_STATUSES,
    RESERVATION_SPANS,
    Guest,
    HouseRule,
    Listing,
    Proposal,
    ProposalStatusInfo,
    ReservationSpan,
    get_reservation_span,
)

__all__ = [
    # Enums
    "Baseline",
    "DayOfWeek",
    "Night",
    "NotificationType",
    "ProposalStatus",
    "RentalType",
    "SessionState",
    "TrackedField",
    "WeeklySelection",
    # Proposal
    "COUNTEROFFER_STAGE_ORDER",
    "OTHER_SPAN_VALUE",
    "PROPOSAL_STATUSES",
    "RESERVATION_SPANS",
    "Guest",
    "HouseRule",
    "Listing",
    "Proposal",
    "ProposalStatusInfo",
    "ReservationSpan",
    "get_reservation_span",
    # Draft
    "AcceptAsIs",
    "Counteroffer",
    "CounterofferParams",
    "EditingDraft",
    "Schedule",
    "SubmissionAction",
    # Derived views
    "BreakdownRow",
    "ChangeSet",
    "ConfirmationPrompt",
    "FieldChange",
    "Notification",
    "PricingSnapshot",
    "ReservationBreakdown",
    # Errors
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "ErrorCode",
    "ErrorResponse",
    "ProposalError",
]
