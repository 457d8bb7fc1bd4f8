"""Enumeration types for proposal review data models."""

from enum import Enum


class DayOfWeek(str, Enum):
    """Day of the week, used as calendar label and check-in/out marker."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class Night(str, Enum):
    """A bookable weekday night."""

    SUNDAY = "Sunday Night"
    MONDAY = "Monday Night"
    TUESDAY = "Tuesday Night"
    WEDNESDAY = "Wednesday Night"
    THURSDAY = "Thursday Night"
    FRIDAY = "Friday Night"
    SATURDAY = "Saturday Night"


class ProposalStatus(str, Enum):
    """Workflow status of a proposal."""

    SUBMITTED_FOR_REVIEW = "proposal_submitted_for_review"
    SUBMITTED_BY_GUEST = "proposal_submitted_by_guest"
    HOST_REVIEW = "host_review"
    HOST_COUNTEROFFER_SUBMITTED = "host_counteroffer_submitted"
    ACCEPTED = "proposal_accepted"
    LEASE_DOCUMENTS_SENT_TO_GUEST = "lease_documents_sent_to_guest"
    LEASE_DOCUMENTS_SENT_TO_HOST = "lease_documents_sent_to_host"
    LEASE_DOCUMENTS_SIGNED = "lease_documents_signed"
    INITIAL_PAYMENT_SUBMITTED = "initial_payment_submitted"
    CANCELLED_BY_GUEST = "proposal_cancelled_by_guest"
    REJECTED_BY_HOST = "proposal_rejected_by_host"
    CANCELLED_BY_SYSTEM = "proposal_cancelled_by_system"
    GUEST_IGNORED_SUGGESTION = "guest_ignored_suggestion"


class RentalType(str, Enum):
    """How a listing is rented."""

    NIGHTLY = "nightly"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class WeeklySelection(str, Enum):
    """Weekly pattern shown in the reservation breakdown."""

    FULL_WEEK = "full-week"
    PARTIAL_WEEK = "partial-week"
    CUSTOM = "custom"


class Baseline(str, Enum):
    """Which proposal fields seed the editing draft."""

    ORIGINAL = "original"
    COUNTEROFFER_SHADOW = "counteroffer_shadow"


class TrackedField(str, Enum):
    """Draft fields compared against the original proposal."""

    MOVE_IN_DATE = "move_in_date"
    RESERVATION_SPAN = "reservation_span"
    CHECK_IN_DAY = "check_in_day"
    CHECK_OUT_DAY = "check_out_day"
    HOUSE_RULES = "house_rules"
    NIGHTS_SELECTED = "nights_selected"


class NotificationType(str, Enum):
    """Severity of a user-visible notification."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


class SessionState(str, Enum):
    """States of a proposal editing session."""

    IDLE = "idle"
    EDITING = "editing"
    PREVIEWING = "previewing"
    CONFIRM_PENDING = "confirm_pending"
    SUBMITTING = "submitting"
    ACCEPTED = "accepted"
    COUNTERED = "countered"
    REJECTED = "rejected"
