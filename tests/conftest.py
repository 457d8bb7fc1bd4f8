"""Pytest configuration and fixtures for proposal review tests.

This module provides reusable fixtures for testing:
- Sample proposal data (Mon-Thu nights, 8 weeks, $85/night)
- House rule catalogue
- Environment isolation for configuration variables
"""

import datetime as dt
from typing import Any, Callable, Generator

import pytest

from proposals.models import (
    DayOfWeek,
    Guest,
    HouseRule,
    Listing,
    Night,
    Proposal,
    ProposalStatus,
    RentalType,
    get_reservation_span,
)

# === Environment Setup ===

CONFIG_ENV_VARS = (
    "HOST_COMPENSATION_RATE",
    "MAX_RESERVATION_WEEKS",
    "CURRENCY_SYMBOL",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test with default configuration.

    Also clears cached API dependencies so a test that changes the
    environment gets freshly configured services.
    """
    from proposals_api.dependencies import reset_services

    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_services()
    yield
    reset_services()


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


# === Sample Data Fixtures ===

WEEKDAY_NIGHTS = [Night.MONDAY, Night.TUESDAY, Night.WEDNESDAY, Night.THURSDAY]


@pytest.fixture
def house_rules() -> list[HouseRule]:
    """Catalogue of house rules a host can choose from."""
    return [
        HouseRule(id="1", name="No smoking", description="No smoking inside the property"),
        HouseRule(id="2", name="No pets", description="No pets allowed"),
        HouseRule(id="3", name="No parties", description="No parties or events"),
        HouseRule(id="4", name="Quiet hours", description="Quiet hours 10pm - 8am"),
        HouseRule(id="5", name="No guests", description="No overnight guests"),
    ]


def make_proposal(**overrides: Any) -> Proposal:
    """Build the sample proposal, with field overrides."""
    data: dict[str, Any] = {
        "id": "prop-001",
        "check_in_day": DayOfWeek.MONDAY,
        "check_out_day": DayOfWeek.FRIDAY,
        "move_in_range_start": dt.date(2025, 1, 15),
        "move_in_range_end": dt.date(2025, 1, 22),
        "days_selected": [
            DayOfWeek.MONDAY,
            DayOfWeek.TUESDAY,
            DayOfWeek.WEDNESDAY,
            DayOfWeek.THURSDAY,
        ],
        "nights_selected": list(WEEKDAY_NIGHTS),
        "reservation_span": get_reservation_span("8-weeks"),
        "reservation_span_weeks": 8,
        "nightly_price": 85,
        "damage_deposit": 300,
        "cleaning_fee": 75,
        "house_rules": [
            HouseRule(id="1", name="No smoking"),
            HouseRule(id="3", name="No parties"),
        ],
        "status": ProposalStatus.HOST_REVIEW,
        "listing": Listing(
            id="listing-001",
            title="Cozy Downtown Studio",
            rental_type=RentalType.NIGHTLY,
            nights_available=list(Night),
        ),
        "guest": Guest(
            id="guest-001",
            first_name="Sarah",
            last_name="Johnson",
            email="sarah.johnson@example.com",
        ),
    }
    data.update(overrides)
    return Proposal(**data)


@pytest.fixture
def proposal_factory() -> Callable[..., Proposal]:
    """Factory for sample proposals with field overrides."""
    return make_proposal


@pytest.fixture
def proposal() -> Proposal:
    """Sample proposal in host review."""
    return make_proposal()


@pytest.fixture
def countered_proposal() -> Proposal:
    """Proposal with a previous host counteroffer (3 nights, 'other' 10 weeks)."""
    return make_proposal(
        status=ProposalStatus.HOST_COUNTEROFFER_SUBMITTED,
        hc_move_in_date=dt.date(2025, 2, 1),
        hc_reservation_span=get_reservation_span("other"),
        hc_reservation_span_weeks=10,
        hc_check_in_day=DayOfWeek.TUESDAY,
        hc_check_out_day=DayOfWeek.FRIDAY,
        hc_nights_selected=[Night.TUESDAY, Night.WEDNESDAY, Night.THURSDAY],
        hc_days_selected=[DayOfWeek.TUESDAY, DayOfWeek.WEDNESDAY, DayOfWeek.THURSDAY],
        hc_house_rules=[HouseRule(id="2", name="No pets")],
    )
