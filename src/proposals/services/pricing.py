"""Pricing calculator for proposal drafts.

Totals are nightly amounts times nights per week times weeks; the
4-week figures normalise a total to a standard four-week period so
spans of different lengths can be compared.
"""

import os
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from proposals.models.errors import ErrorCode, ProposalError
from proposals.models.pricing import PricingSnapshot

if TYPE_CHECKING:
    from proposals.models.draft import EditingDraft

CENTS = Decimal("0.01")


def _to_decimal(value: Decimal | float | int) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class PricingCalculator:
    """Derives compensation and price from nightly price, nights and weeks."""

    DEFAULT_COMPENSATION_RATE = Decimal("0.85")  # host share of the nightly price
    PERIOD_WEEKS = 4

    def __init__(self, compensation_rate: Decimal | float | None = None) -> None:
        """Initialize pricing calculator.

        Args:
            compensation_rate: Host share of the nightly price. Defaults to
                HOST_COMPENSATION_RATE from the environment, then 0.85.

        Raises:
            ValueError: If the rate is not in (0, 1].
        """
        if compensation_rate is None:
            compensation_rate = os.getenv(
                "HOST_COMPENSATION_RATE", str(self.DEFAULT_COMPENSATION_RATE)
            )
        rate = Decimal(str(compensation_rate))
        if not Decimal(0) < rate <= Decimal(1):
            raise ValueError(f"Compensation rate must be in (0, 1], got {rate}")
        self.compensation_rate = rate

    def calculate(
        self,
        nightly_price: Decimal | float | int,
        nights_per_week: int,
        weeks: int,
        compensation_rate: Decimal | float | None = None,
    ) -> PricingSnapshot:
        """Calculate the pricing snapshot.

        Args:
            nightly_price: Guest price per night
            nights_per_week: Number of selected nights
            weeks: Reservation length in weeks, at least 1
            compensation_rate: Overrides the calculator's rate for this call

        Returns:
            PricingSnapshot with money rounded to cents

        Raises:
            ProposalError: INCOMPLETE_DRAFT if weeks is below 1.
        """
        if weeks < 1:
            raise ProposalError(ErrorCode.INCOMPLETE_DRAFT, {"weeks": str(weeks)})

        rate = self.compensation_rate if compensation_rate is None else _to_decimal(compensation_rate)
        price = _to_decimal(nightly_price)

        total_nights = nights_per_week * weeks
        nightly_compensation = price * rate
        total_price = price * total_nights
        total_compensation = nightly_compensation * total_nights

        return PricingSnapshot(
            nightly_price=_money(price),
            nightly_compensation=_money(nightly_compensation),
            nights_per_week=nights_per_week,
            weeks=weeks,
            total_nights=total_nights,
            total_price=_money(total_price),
            total_compensation=_money(total_compensation),
            price_per_4_weeks=_money(total_price / weeks * self.PERIOD_WEEKS),
            compensation_per_4_weeks=_money(total_compensation / weeks * self.PERIOD_WEEKS),
        )

    def price_draft(
        self,
        draft: "EditingDraft",
        nightly_price: Decimal | float | int,
    ) -> PricingSnapshot:
        """Price an editing draft.

        Raises:
            ProposalError: INCOMPLETE_DRAFT if the week count is unresolved
                or no night is selected.
        """
        if draft.weeks is None or not draft.nights_selected:
            raise ProposalError(
                ErrorCode.INCOMPLETE_DRAFT,
                {
                    "weeks": str(draft.weeks),
                    "nights_selected": str(draft.nights_per_week),
                },
            )
        return self.calculate(nightly_price, draft.nights_per_week, draft.weeks)


def compute_pricing(
    nightly_price: Decimal | float | int,
    nights_per_week: int,
    weeks: int,
    compensation_rate: Decimal | float | None = None,
) -> PricingSnapshot:
    """Calculate pricing with the configured or given compensation rate."""
    return PricingCalculator(compensation_rate).calculate(nightly_price, nights_per_week, weeks)
