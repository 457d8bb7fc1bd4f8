"""Proposal editing session.

Owns one EditingDraft and walks it through the review workflow:

    idle -> editing -> previewing -> confirm_pending -> submitting
         -> accepted | countered

Submitting is the single-flight guard: a confirm issued while a
submission is in flight is ignored. A failed submission returns to
confirm_pending. Reject is independent of the accept/counteroffer branch
and is refused while submitting.

Collaborators (accept, counteroffer, reject) are async callables supplied
by the caller. Their failures never propagate out of the session; they
become error notifications that the caller drains and displays.
"""

import datetime as dt
import os
from collections import deque
from typing import Awaitable, Callable, Iterable, Optional, TypeVar

from proposals.models.breakdown import ReservationBreakdown
from proposals.models.changes import ChangeSet
from proposals.models.draft import (
    AcceptAsIs,
    Counteroffer,
    CounterofferParams,
    EditingDraft,
    SubmissionAction,
)
from proposals.models.enums import (
    Baseline,
    Night,
    NotificationType,
    RentalType,
    SessionState,
    WeeklySelection,
)
from proposals.models.errors import ERROR_MESSAGES, ErrorCode, ProposalError
from proposals.models.notification import ConfirmationPrompt, Notification
from proposals.models.pricing import PricingSnapshot
from proposals.models.proposal import (
    COUNTEROFFER_STAGE_ORDER,
    HouseRule,
    Proposal,
    ReservationSpan,
    get_reservation_span,
)
from proposals.utils.formatting import format_long_date
from proposals.utils.logging import generate_correlation_id, get_logger, log_proposal_action

from . import night_calendar
from .breakdown import build_breakdown
from .change_detector import detect_changes
from .pricing import PricingCalculator
from .schedule import MAX_NIGHTS_PER_WEEK, derive_schedule, toggle_night

logger = get_logger(__name__)

AcceptHandler = Callable[[Proposal], Awaitable[None]]
CounterofferHandler = Callable[[CounterofferParams], Awaitable[None]]
RejectHandler = Callable[[Proposal, str], Awaitable[None]]

T = TypeVar("T")

DEFAULT_MAX_WEEKS = 52


def configured_max_weeks() -> int:
    """Upper bound for a manually entered week count (MAX_RESERVATION_WEEKS)."""
    return int(os.getenv("MAX_RESERVATION_WEEKS", str(DEFAULT_MAX_WEEKS)))


_EDITABLE_STATES = frozenset({SessionState.EDITING})
_TERMINAL_STATES = frozenset({SessionState.ACCEPTED, SessionState.COUNTERED, SessionState.REJECTED})

_TRANSITIONS: dict[SessionState, frozenset[SessionState]] = {
    SessionState.IDLE: frozenset({SessionState.EDITING, SessionState.REJECTED}),
    SessionState.EDITING: frozenset(
        {SessionState.PREVIEWING, SessionState.IDLE, SessionState.REJECTED}
    ),
    SessionState.PREVIEWING: frozenset(
        {
            SessionState.EDITING,
            SessionState.CONFIRM_PENDING,
            SessionState.IDLE,
            SessionState.REJECTED,
        }
    ),
    SessionState.CONFIRM_PENDING: frozenset(
        {
            SessionState.PREVIEWING,
            SessionState.SUBMITTING,
            SessionState.IDLE,
            SessionState.REJECTED,
        }
    ),
    SessionState.SUBMITTING: frozenset(
        {SessionState.ACCEPTED, SessionState.COUNTERED, SessionState.CONFIRM_PENDING}
    ),
    SessionState.ACCEPTED: frozenset(),
    SessionState.COUNTERED: frozenset(),
    SessionState.REJECTED: frozenset(),
}


def resolve_baseline(proposal: Proposal) -> Baseline:
    """Choose the fields that seed the draft.

    A proposal at or past the counteroffer stage that carries a previous
    counteroffer is edited from that counteroffer.
    """
    if proposal.status_order >= COUNTEROFFER_STAGE_ORDER and proposal.hc_move_in_date is not None:
        return Baseline.COUNTEROFFER_SHADOW
    return Baseline.ORIGINAL


def _shadow(value: Optional[list[T]], fallback: list[T]) -> list[T]:
    return value if value is not None else fallback


def seed_draft(proposal: Proposal) -> EditingDraft:
    """Create a fresh draft from the proposal or its previous counteroffer."""
    baseline = resolve_baseline(proposal)

    if baseline is Baseline.COUNTEROFFER_SHADOW:
        move_in = proposal.hc_move_in_date or proposal.move_in_range_start
        span = proposal.hc_reservation_span or proposal.reservation_span
        weeks = proposal.hc_reservation_span_weeks or proposal.reservation_span_weeks
        check_in = proposal.hc_check_in_day or proposal.check_in_day
        check_out = proposal.hc_check_out_day or proposal.check_out_day
        # A present but empty list is kept as the counteroffer value
        nights = _shadow(proposal.hc_nights_selected, proposal.nights_selected)
        days = _shadow(proposal.hc_days_selected, proposal.days_selected)
        rules = _shadow(proposal.hc_house_rules, proposal.house_rules)
    else:
        move_in = proposal.move_in_range_start
        span = proposal.reservation_span
        weeks = proposal.reservation_span_weeks
        check_in = proposal.check_in_day
        check_out = proposal.check_out_day
        nights = proposal.nights_selected
        days = proposal.days_selected
        rules = proposal.house_rules

    if not nights and days:
        nights = [night_calendar.night_for_day(day) for day in days]

    return EditingDraft(
        baseline=baseline,
        move_in_date=move_in,
        reservation_span=span,
        weeks=weeks,
        nights_selected=frozenset(nights),
        check_in_day=check_in,
        check_out_day=check_out,
        days_selected=list(days),
        house_rules=list(rules),
    )


def prepare_submission(draft: EditingDraft, proposal: Proposal) -> SubmissionAction:
    """Decide between accepting as-is and sending a counteroffer.

    Raises:
        ProposalError: INCOMPLETE_DRAFT if the draft cannot be submitted.
    """
    if not draft.is_complete or draft.check_in_day is None or draft.check_out_day is None:
        raise ProposalError(ErrorCode.INCOMPLETE_DRAFT)

    if not detect_changes(draft, proposal).any_changed:
        return AcceptAsIs(proposal=proposal)

    return Counteroffer(
        params=CounterofferParams(
            proposal=proposal,
            number_of_weeks=draft.weeks,
            reservation_span=draft.reservation_span,
            check_in=draft.check_in_day,
            check_out=draft.check_out_day,
            nights_selected=night_calendar.in_week_order(draft.nights_selected),
            days_selected=list(draft.days_selected),
            new_house_rules=list(draft.house_rules),
            move_in_date=draft.move_in_date,
        )
    )


class ProposalEditingSession:
    """Host-side editing session for one proposal."""

    def __init__(
        self,
        proposal: Proposal,
        *,
        available_house_rules: Iterable[HouseRule] = (),
        is_internal_usage: bool = False,
        on_accept_as_is: Optional[AcceptHandler] = None,
        on_counteroffer: Optional[CounterofferHandler] = None,
        on_reject: Optional[RejectHandler] = None,
        pricing: Optional[PricingCalculator] = None,
        max_weeks: Optional[int] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the session in the idle state.

        Args:
            proposal: Proposal under review
            available_house_rules: Rules the host can choose from
            is_internal_usage: Disables schedule editing when True
            on_accept_as_is: Async collaborator for accepting unchanged
            on_counteroffer: Async collaborator for sending a counteroffer
            on_reject: Async collaborator for rejecting with a reason
            pricing: Pricing calculator (defaults to the configured rate)
            max_weeks: Upper bound for a manual week count; defaults to
                MAX_RESERVATION_WEEKS from the environment, then 52
            session_id: Identifier included in every log record
        """
        self.proposal = proposal
        self.available_house_rules = list(available_house_rules)
        self.is_internal_usage = is_internal_usage
        self._on_accept_as_is = on_accept_as_is
        self._on_counteroffer = on_counteroffer
        self._on_reject = on_reject
        self._pricing = pricing or PricingCalculator()
        self.max_weeks = max_weeks or configured_max_weeks()
        self.session_id = session_id or generate_correlation_id()

        self._state = SessionState.IDLE
        self._draft: Optional[EditingDraft] = None
        self._notifications: deque[Notification] = deque()

    # === State ===

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state is SessionState.SUBMITTING

    @property
    def is_finished(self) -> bool:
        return self._state in _TERMINAL_STATES

    @property
    def draft(self) -> EditingDraft:
        """The current draft.

        Raises:
            ProposalError: INVALID_TRANSITION if the session has not been opened.
        """
        if self._draft is None:
            raise ProposalError(ErrorCode.INVALID_TRANSITION, {"state": self._state.value})
        return self._draft

    @property
    def schedule_editable(self) -> bool:
        return not self.is_internal_usage and self.proposal.listing.rental_type is RentalType.NIGHTLY

    def _transition(self, target: SessionState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise ProposalError(
                ErrorCode.INVALID_TRANSITION,
                {"from": self._state.value, "to": target.value},
            )
        self._state = target

    def _require_editing(self) -> EditingDraft:
        if self._state not in _EDITABLE_STATES:
            raise ProposalError(ErrorCode.INVALID_TRANSITION, {"state": self._state.value})
        return self.draft

    def _log(
        self,
        action: str,
        error: str | None = None,
        any_changed: bool | None = None,
        **extra: object,
    ) -> None:
        log_proposal_action(
            logger,
            action,
            proposal_id=self.proposal.id,
            state=self._state.value,
            any_changed=any_changed,
            error=error,
            session_id=self.session_id,
            **extra,
        )

    # === Notifications ===

    def _notify(self, type_: NotificationType, title: str, content: str | None = None) -> None:
        self._notifications.append(Notification(type=type_, title=title, content=content))

    @property
    def pending_notifications(self) -> tuple[Notification, ...]:
        return tuple(self._notifications)

    def drain_notifications(self) -> list[Notification]:
        """Return and clear the notifications emitted since the last drain."""
        drained = list(self._notifications)
        self._notifications.clear()
        return drained

    # === Workflow transitions ===

    def open(self) -> EditingDraft:
        """Seed the draft and start editing."""
        self._transition(SessionState.EDITING)
        self._draft = seed_draft(self.proposal)
        self._log("open", baseline=self._draft.baseline.value)
        return self._draft

    def preview(self) -> None:
        """Switch from the editing form to the breakdown preview."""
        self._transition(SessionState.PREVIEWING)
        self._log("preview", any_changed=self.has_changes)

    def edit(self) -> None:
        """Return from the preview to the editing form."""
        self._transition(SessionState.EDITING)
        self._log("edit")

    def request_confirmation(self) -> ConfirmationPrompt:
        """Open the confirmation popup for the current draft.

        Raises:
            ProposalError: INCOMPLETE_DRAFT if the draft cannot be submitted,
                INVALID_TRANSITION outside the preview.
        """
        if self._state is not SessionState.PREVIEWING:
            raise ProposalError(ErrorCode.INVALID_TRANSITION, {"state": self._state.value})
        if not self.draft.is_complete:
            raise ProposalError(ErrorCode.INCOMPLETE_DRAFT)

        self._transition(SessionState.CONFIRM_PENDING)
        prompt = self.confirmation_prompt()
        self._log("request_confirmation", any_changed=prompt.is_counteroffer)
        return prompt

    def go_back(self) -> None:
        """Close the confirmation popup without submitting."""
        self._transition(SessionState.PREVIEWING)
        self._log("go_back")

    def cancel(self) -> None:
        """Discard the draft. Opening again re-seeds from the proposal."""
        self._transition(SessionState.IDLE)
        self._draft = None
        self._log("cancel")

    async def confirm(self) -> Optional[SubmissionAction]:
        """Submit the draft as an accept-as-is or a counteroffer.

        Returns:
            The submitted action, or None if a submission was already in
            flight or the collaborator failed.
        """
        if self.is_submitting:
            logger.debug("Submission already in flight for proposal %s", self.proposal.id)
            return None

        if SessionState.SUBMITTING not in _TRANSITIONS[self._state]:
            raise ProposalError(ErrorCode.INVALID_TRANSITION, {"state": self._state.value})

        action = prepare_submission(self.draft, self.proposal)
        any_changed = isinstance(action, Counteroffer)
        self._transition(SessionState.SUBMITTING)
        self._log("submit_started", any_changed=any_changed, kind=action.kind)

        try:
            if isinstance(action, AcceptAsIs):
                if self._on_accept_as_is is not None:
                    await self._on_accept_as_is(action.proposal)
            elif self._on_counteroffer is not None:
                await self._on_counteroffer(action.params)
        except Exception as exc:
            logger.exception("Submission failed for proposal %s", self.proposal.id)
            self._state = SessionState.CONFIRM_PENDING
            self._notify(
                NotificationType.ERROR,
                "Error",
                ERROR_MESSAGES[ErrorCode.SUBMISSION_FAILED],
            )
            self._log(
                "submit",
                error=str(exc) or type(exc).__name__,
                any_changed=any_changed,
                kind=action.kind,
                error_code=ErrorCode.SUBMISSION_FAILED.value,
            )
            return None
        except BaseException:
            # Cancelled while awaiting the collaborator: release the lock and re-raise
            self._state = SessionState.CONFIRM_PENDING
            self._log("submit", error="cancelled", any_changed=any_changed, kind=action.kind)
            raise

        if isinstance(action, AcceptAsIs):
            self._transition(SessionState.ACCEPTED)
            self._notify(
                NotificationType.INFORMATION,
                "Proposal Accepted!",
                "The proposal has been accepted as-is.",
            )
        else:
            self._transition(SessionState.COUNTERED)
            self._notify(
                NotificationType.INFORMATION,
                "Modifications submitted!",
                "Awaiting Guest Review.",
            )
        self._log("submit", any_changed=any_changed, kind=action.kind)
        return action

    async def reject(self, reason: str = "") -> bool:
        """Reject the proposal with an optional free-text reason.

        Returns:
            True if the proposal was rejected, False if the collaborator failed.

        Raises:
            ProposalError: INVALID_TRANSITION while submitting or after the
                session has finished.
        """
        if SessionState.REJECTED not in _TRANSITIONS[self._state]:
            raise ProposalError(ErrorCode.INVALID_TRANSITION, {"state": self._state.value})

        try:
            if self._on_reject is not None:
                await self._on_reject(self.proposal, reason)
        except Exception as exc:
            logger.exception("Rejection failed for proposal %s", self.proposal.id)
            self._notify(
                NotificationType.ERROR,
                "Error",
                ERROR_MESSAGES[ErrorCode.REJECTION_FAILED],
            )
            self._log(
                "reject",
                error=str(exc) or type(exc).__name__,
                error_code=ErrorCode.REJECTION_FAILED.value,
            )
            return False

        self._transition(SessionState.REJECTED)
        self._notify(
            NotificationType.INFORMATION,
            "Proposal Rejected",
            "The proposal has been rejected.",
        )
        self._log("reject", has_reason=bool(reason))
        return True

    # === Draft edits ===

    def toggle_night(self, night: Night) -> bool:
        """Toggle a night and re-derive the schedule.

        Returns:
            True if the selection changed. Rejected toggles (full week,
            unavailable night, schedule editing disabled) return False.
        """
        draft = self._require_editing()
        if not self.schedule_editable:
            logger.debug("Schedule editing disabled for proposal %s", self.proposal.id)
            return False

        selection = toggle_night(
            draft.nights_selected, night, self.proposal.listing.nights_available
        )
        if selection == draft.nights_selected:
            return False

        schedule = derive_schedule(selection)
        if schedule is None:
            # Undetermined: check-in/out keep their previous values
            self._draft = draft.model_copy(
                update={"nights_selected": selection, "days_selected": []}
            )
        else:
            self._draft = draft.model_copy(
                update={
                    "nights_selected": selection,
                    "check_in_day": schedule.check_in_day,
                    "check_out_day": schedule.check_out_day,
                    "days_selected": schedule.days_selected,
                }
            )
        return True

    def set_move_in_date(self, value: dt.date) -> None:
        """Set the move-in date; any time of day is dropped."""
        draft = self._require_editing()
        if isinstance(value, dt.datetime):
            value = value.date()
        self._draft = draft.model_copy(update={"move_in_date": value})

    def select_reservation_span(self, span: ReservationSpan | str) -> None:
        """Choose a reservation span.

        A canonical span sets the week count to its weeks; 'other' clears
        the week count until one is entered with set_weeks.
        """
        draft = self._require_editing()
        if isinstance(span, str):
            span = get_reservation_span(span)
        weeks = None if span.is_other else span.weeks
        self._draft = draft.model_copy(update={"reservation_span": span, "weeks": weeks})

    def set_weeks(self, weeks: int) -> None:
        """Enter the week count for an 'other' span.

        Raises:
            ProposalError: INVALID_WEEKS if the span is not 'other' or the
                count is outside 1..max_weeks.
        """
        draft = self._require_editing()
        if not draft.reservation_span.is_other:
            raise ProposalError(
                ErrorCode.INVALID_WEEKS,
                {"reservation_span": draft.reservation_span.value},
            )
        if not 1 <= weeks <= self.max_weeks:
            raise ProposalError(
                ErrorCode.INVALID_WEEKS,
                {"weeks": str(weeks), "max_weeks": str(self.max_weeks)},
            )
        self._draft = draft.model_copy(update={"weeks": weeks})

    def set_house_rules(self, rules: Iterable[HouseRule]) -> None:
        draft = self._require_editing()
        unique: dict[str, HouseRule] = {}
        for rule in rules:
            unique.setdefault(rule.id, rule)
        self._draft = draft.model_copy(update={"house_rules": list(unique.values())})

    def add_house_rule(self, rule: HouseRule) -> None:
        draft = self._require_editing()
        if rule.id not in draft.house_rule_ids:
            self._draft = draft.model_copy(update={"house_rules": [*draft.house_rules, rule]})

    def remove_house_rule(self, rule_id: str) -> None:
        draft = self._require_editing()
        remaining = [rule for rule in draft.house_rules if rule.id != rule_id]
        self._draft = draft.model_copy(update={"house_rules": remaining})

    # === Derived views ===

    @property
    def changes(self) -> ChangeSet:
        return detect_changes(self.draft, self.proposal)

    @property
    def has_changes(self) -> bool:
        return self.changes.any_changed

    @property
    def pricing(self) -> Optional[PricingSnapshot]:
        """Pricing of the draft, or None while the draft is incomplete."""
        draft = self.draft
        if not draft.is_complete:
            return None
        return self._pricing.price_draft(draft, self.proposal.nightly_price)

    @property
    def approx_move_out(self) -> Optional[dt.date]:
        draft = self.draft
        if draft.weeks is None:
            return None
        return draft.move_in_date + dt.timedelta(weeks=draft.weeks)

    @property
    def weekly_pattern(self) -> WeeklySelection:
        if self.draft.nights_per_week == MAX_NIGHTS_PER_WEEK:
            return WeeklySelection.FULL_WEEK
        return WeeklySelection.PARTIAL_WEEK

    @property
    def move_in_suggestion(self) -> str:
        return format_long_date(self.proposal.move_in_range_start)

    @property
    def submit_label(self) -> str:
        return "Submit Counteroffer" if self.has_changes else "Accept As-Is"

    def confirmation_prompt(self) -> ConfirmationPrompt:
        if self.has_changes:
            return ConfirmationPrompt(
                title="Confirm Counteroffer",
                content=(
                    "You have made changes to the proposal terms. This will send "
                    "a counteroffer to the guest for their review."
                ),
                confirm_label="Yes, Proceed",
                is_counteroffer=True,
            )
        return ConfirmationPrompt(
            title="Accept Proposal",
            content="You are accepting the proposal as-is without any modifications.",
            confirm_label="Yes, Proceed",
            is_counteroffer=False,
        )

    def breakdown(self) -> ReservationBreakdown:
        """Formatted breakdown of the draft.

        Raises:
            ProposalError: INCOMPLETE_DRAFT while the draft cannot be priced.
        """
        draft = self.draft
        pricing = self._pricing.price_draft(draft, self.proposal.nightly_price)
        return build_breakdown(draft, self.proposal, pricing, self.changes)
