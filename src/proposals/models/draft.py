"""Editing draft, derived schedule and submission payloads."""

import datetime as dt
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Baseline, DayOfWeek, Night
from .proposal import HouseRule, Proposal, ReservationSpan, to_calendar_date


class Schedule(BaseModel):
    """Check-in/out days and day list derived from a night selection.

    Nights and days are listed in week order (Sunday first).
    """

    model_config = ConfigDict(frozen=True)

    check_in_day: DayOfWeek
    check_out_day: DayOfWeek
    nights_selected: list[Night]
    days_selected: list[DayOfWeek]

    @property
    def nights_per_week(self) -> int:
        return len(self.nights_selected)


class EditingDraft(BaseModel):
    """The host's in-progress edit of a proposal's terms.

    ``weeks`` is None while an 'other' span has no entered week count.
    The schedule fields are replaced together whenever the night
    selection changes.
    """

    baseline: Baseline = Baseline.ORIGINAL
    move_in_date: dt.date
    reservation_span: ReservationSpan
    weeks: Optional[int] = Field(default=None, ge=1)
    nights_selected: frozenset[Night] = frozenset()
    check_in_day: Optional[DayOfWeek] = None
    check_out_day: Optional[DayOfWeek] = None
    days_selected: list[DayOfWeek] = Field(default_factory=list)
    house_rules: list[HouseRule] = Field(default_factory=list)

    @field_validator("move_in_date", mode="before")
    @classmethod
    def _move_in_as_date(cls, value: object) -> object:
        return to_calendar_date(value)

    @field_validator("house_rules")
    @classmethod
    def _unique_rule_ids(cls, rules: list[HouseRule]) -> list[HouseRule]:
        seen: set[str] = set()
        unique = []
        for rule in rules:
            if rule.id not in seen:
                seen.add(rule.id)
                unique.append(rule)
        return unique

    @property
    def house_rule_ids(self) -> frozenset[str]:
        return frozenset(rule.id for rule in self.house_rules)

    @property
    def nights_per_week(self) -> int:
        return len(self.nights_selected)

    @property
    def is_complete(self) -> bool:
        """Whether the draft can be priced and submitted."""
        return self.weeks is not None and bool(self.nights_selected)


class CounterofferParams(BaseModel):
    """Payload handed to the counteroffer collaborator."""

    proposal: Proposal
    number_of_weeks: int = Field(..., ge=1)
    reservation_span: ReservationSpan
    check_in: DayOfWeek
    check_out: DayOfWeek
    nights_selected: list[Night]
    days_selected: list[DayOfWeek]
    new_house_rules: list[HouseRule]
    move_in_date: dt.date


class AcceptAsIs(BaseModel):
    """Submission action taken when the draft matches the proposal."""

    kind: Literal["accept_as_is"] = "accept_as_is"
    proposal: Proposal


class Counteroffer(BaseModel):
    """Submission action taken when any tracked field changed."""

    kind: Literal["counteroffer"] = "counteroffer"
    params: CounterofferParams


SubmissionAction = Union[AcceptAsIs, Counteroffer]
