"""Unit tests for proposal review API routes.

Tests for:
- GET /api/reservation-spans - Span catalogue
- GET /api/reservation-spans/{value} - Single span lookup
- POST /api/proposals/review - Draft review against a proposal
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from proposals.models import Proposal
from proposals_api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for API."""
    return TestClient(app)


@pytest.fixture
def unchanged_draft() -> dict[str, Any]:
    """Draft JSON equal to the sample proposal."""
    return {
        "move_in_date": "2025-01-15",
        "reservation_span": "8-weeks",
        "nights_selected": [
            "Monday Night",
            "Tuesday Night",
            "Wednesday Night",
            "Thursday Night",
        ],
        "house_rules": [
            {"id": "3", "name": "No parties"},
            {"id": "1", "name": "No smoking"},
        ],
    }


def _review(
    client: TestClient, proposal: Proposal, draft: dict[str, Any]
) -> Any:
    return client.post(
        "/api/proposals/review",
        json={"proposal": proposal.model_dump(mode="json"), "draft": draft},
    )


class TestReservationSpans:
    """Tests for the reservation span catalogue."""

    def test_lists_spans_with_other_last(self, client: TestClient) -> None:
        """The catalogue ends with the custom 'other' span."""
        response = client.get("/api/reservation-spans")
        assert response.status_code == HTTP_200_OK

        spans = response.json()
        assert spans[0]["value"] == "6-weeks"
        assert spans[-1]["value"] == "other"
        assert spans[-1]["weeks"] == 0

    def test_get_span(self, client: TestClient) -> None:
        """A span is looked up by identifier."""
        response = client.get("/api/reservation-spans/13-weeks")
        assert response.status_code == HTTP_200_OK
        assert response.json()["label"] == "13 weeks (3 months)"

    def test_unknown_span(self, client: TestClient) -> None:
        """Unknown identifiers return 404 with an error body."""
        response = client.get("/api/reservation-spans/5-weeks")
        assert response.status_code == HTTP_404_NOT_FOUND
        assert response.json()["error_code"] == "ERR_003"


class TestProposalReview:
    """Tests for POST /api/proposals/review endpoint."""

    def test_unchanged_draft_accepts_as_is(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """A draft equal to the proposal is accepted as-is."""
        response = _review(client, proposal, unchanged_draft)
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["any_changed"] is False
        assert data["action"] == "accept_as_is"
        assert data["pricing"]["total_price"] == 2720.0
        assert data["approx_move_out"] == "2025-03-12"
        assert data["schedule"]["check_out_day"] == "Friday"
        assert set(data["changes"]) == {
            "move_in_date",
            "reservation_span",
            "check_in_day",
            "check_out_day",
            "house_rules",
            "nights_selected",
        }

    def test_added_house_rule_is_counteroffer(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """Adding one house rule turns the draft into a counteroffer."""
        unchanged_draft["house_rules"].append({"id": "2", "name": "No pets"})

        data = _review(client, proposal, unchanged_draft).json()

        assert data["any_changed"] is True
        assert data["action"] == "counteroffer"
        assert data["changes"]["house_rules"]["changed"] is True
        assert data["changes"]["nights_selected"]["changed"] is False

    def test_other_span_without_weeks(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """An 'other' span without weeks has no pricing or action."""
        unchanged_draft["reservation_span"] = "other"

        data = _review(client, proposal, unchanged_draft).json()

        assert data["pricing"] is None
        assert data["action"] is None
        assert data["approx_move_out"] is None
        assert data["changes"]["reservation_span"]["current"] == "Not specified"

    def test_other_span_with_matching_weeks(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """'Other' with the proposal's week count is not a change."""
        unchanged_draft["reservation_span"] = "other"
        unchanged_draft["weeks"] = 8

        data = _review(client, proposal, unchanged_draft).json()

        assert data["any_changed"] is False
        assert data["action"] == "accept_as_is"

    def test_canonical_span_ignores_weeks(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """Canonical spans use their own week count."""
        unchanged_draft["reservation_span"] = "12-weeks"
        unchanged_draft["weeks"] = 3

        data = _review(client, proposal, unchanged_draft).json()

        assert data["pricing"]["weeks"] == 12
        assert data["changes"]["reservation_span"]["changed"] is True

    def test_weeks_above_maximum(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """'Other' week counts above MAX_RESERVATION_WEEKS are refused."""
        unchanged_draft["reservation_span"] = "other"
        unchanged_draft["weeks"] = 53

        response = _review(client, proposal, unchanged_draft)

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_002"

    def test_no_nights(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """A draft without nights has no schedule, pricing or action."""
        unchanged_draft["nights_selected"] = []

        data = _review(client, proposal, unchanged_draft).json()

        assert data["schedule"] is None
        assert data["pricing"] is None
        assert data["action"] is None
        assert data["any_changed"] is True

    def test_unknown_span(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """Unknown span identifiers return 404."""
        unchanged_draft["reservation_span"] = "5-weeks"

        response = _review(client, proposal, unchanged_draft)

        assert response.status_code == HTTP_404_NOT_FOUND

    def test_timed_move_in_dates(
        self, client: TestClient, proposal: Proposal, unchanged_draft: dict[str, Any]
    ) -> None:
        """Timestamps on the proposal and draft move-in compare by calendar day."""
        payload = proposal.model_dump(mode="json")
        payload["move_in_range_start"] = "2025-01-15T18:30:00Z"
        unchanged_draft["move_in_date"] = "2025-01-15T09:00:00"

        response = client.post(
            "/api/proposals/review", json={"proposal": payload, "draft": unchanged_draft}
        )

        assert response.status_code == HTTP_200_OK
        data = response.json()
        assert data["changes"]["move_in_date"]["changed"] is False
        assert data["any_changed"] is False
