"""Unit tests for PricingCalculator.

Tests verify:
- Compensation and totals for a weekly night pattern
- 4-week normalisation
- Rounding to cents
- Configured compensation rate (HOST_COMPENSATION_RATE)
- Incomplete inputs are refused
"""

import datetime as dt
from decimal import Decimal

import pytest

from proposals.models.draft import EditingDraft
from proposals.models.enums import Night
from proposals.models.errors import ErrorCode, ProposalError
from proposals.models.proposal import get_reservation_span
from proposals.services.pricing import PricingCalculator, compute_pricing


# === Calculation ===


class TestCalculate:
    """Tests for PricingCalculator.calculate."""

    def test_reference_quote(self) -> None:
        """$85/night, 4 nights/week, 8 weeks at 0.85."""
        snapshot = PricingCalculator(Decimal("0.85")).calculate(85, 4, 8)

        assert snapshot.nightly_compensation == Decimal("72.25")
        assert snapshot.total_nights == 32
        assert snapshot.total_price == Decimal("2720.00")
        assert snapshot.total_compensation == Decimal("2312.00")
        assert snapshot.price_per_4_weeks == Decimal("1360.00")
        assert snapshot.compensation_per_4_weeks == Decimal("1156.00")

    def test_default_rate_is_085(self) -> None:
        """Without configuration the host keeps 85%."""
        assert PricingCalculator().compensation_rate == Decimal("0.85")

    def test_four_week_figures_scale_with_weeks(self) -> None:
        """4-week figures do not depend on the span length."""
        calculator = PricingCalculator()
        short = calculator.calculate(100, 3, 4)
        long = calculator.calculate(100, 3, 12)

        assert short.price_per_4_weeks == long.price_per_4_weeks == Decimal("1200.00")
        assert long.total_price == Decimal("3600.00")

    def test_rounds_half_up_to_cents(self) -> None:
        """Money is rounded half-up after full-precision arithmetic."""
        snapshot = PricingCalculator(Decimal("0.85")).calculate(Decimal("10.10"), 1, 1)

        # 10.10 * 0.85 = 8.585
        assert snapshot.nightly_compensation == Decimal("8.59")

    def test_no_nights_prices_zero(self) -> None:
        """Zero nights per week is a valid zero-cost quote."""
        snapshot = PricingCalculator().calculate(85, 0, 8)

        assert snapshot.total_nights == 0
        assert snapshot.total_price == Decimal("0.00")

    @pytest.mark.parametrize("weeks", [0, -1])
    def test_weeks_below_one_is_incomplete(self, weeks: int) -> None:
        """A week count below 1 cannot be priced."""
        with pytest.raises(ProposalError) as exc_info:
            PricingCalculator().calculate(85, 4, weeks)

        assert exc_info.value.code == ErrorCode.INCOMPLETE_DRAFT

    def test_per_call_rate_override(self) -> None:
        """A rate passed to calculate applies to that call only."""
        calculator = PricingCalculator()
        snapshot = calculator.calculate(100, 1, 1, compensation_rate=0.5)

        assert snapshot.nightly_compensation == Decimal("50.00")
        assert calculator.compensation_rate == Decimal("0.85")

    def test_compute_pricing_helper(self) -> None:
        """The module helper matches the calculator."""
        assert compute_pricing(85, 4, 8) == PricingCalculator().calculate(85, 4, 8)


# === Configuration ===


class TestCompensationRateConfig:
    """Tests for HOST_COMPENSATION_RATE."""

    def test_reads_rate_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment rate is used when none is passed."""
        monkeypatch.setenv("HOST_COMPENSATION_RATE", "0.9")

        snapshot = PricingCalculator().calculate(100, 1, 1)
        assert snapshot.nightly_compensation == Decimal("90.00")

    @pytest.mark.parametrize("rate", ["0", "1.5", "-0.1"])
    def test_rejects_rate_outside_unit_interval(self, rate: str) -> None:
        """Rates must be in (0, 1]."""
        with pytest.raises(ValueError):
            PricingCalculator(Decimal(rate))

    def test_accepts_full_rate(self) -> None:
        """A rate of 1 gives the host the whole nightly price."""
        snapshot = PricingCalculator(1).calculate(85, 4, 8)
        assert snapshot.total_compensation == snapshot.total_price


# === Drafts ===


class TestPriceDraft:
    """Tests for PricingCalculator.price_draft."""

    def _draft(self, **overrides: object) -> EditingDraft:
        data: dict[str, object] = {
            "move_in_date": dt.date(2025, 1, 15),
            "reservation_span": get_reservation_span("8-weeks"),
            "weeks": 8,
            "nights_selected": frozenset(
                {Night.MONDAY, Night.TUESDAY, Night.WEDNESDAY, Night.THURSDAY}
            ),
        }
        data.update(overrides)
        return EditingDraft(**data)

    def test_prices_complete_draft(self) -> None:
        """A complete draft uses its nights and weeks."""
        snapshot = PricingCalculator().price_draft(self._draft(), 85)

        assert snapshot.nights_per_week == 4
        assert snapshot.weeks == 8
        assert snapshot.total_price == Decimal("2720.00")

    def test_missing_weeks_is_incomplete(self) -> None:
        """An 'other' span without weeks cannot be priced."""
        draft = self._draft(reservation_span=get_reservation_span("other"), weeks=None)

        with pytest.raises(ProposalError) as exc_info:
            PricingCalculator().price_draft(draft, 85)

        assert exc_info.value.code == ErrorCode.INCOMPLETE_DRAFT

    def test_no_nights_is_incomplete(self) -> None:
        """A draft without nights cannot be priced."""
        with pytest.raises(ProposalError) as exc_info:
            PricingCalculator().price_draft(self._draft(nights_selected=frozenset()), 85)

        assert exc_info.value.details == {"weeks": "8", "nights_selected": "0"}
