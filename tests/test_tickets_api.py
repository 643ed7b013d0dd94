"""Integration tests for the ticket HTTP API.

Run with: pytest tests/test_tickets_api.py -v
"""

import io
from unittest.mock import patch

import pytest
import zxingcpp
from django.db import OperationalError
from PIL import Image
from rest_framework.test import APIClient

from events import models as event_orm
from tickets import models as orm
from tickets.domain.errors import StoreUnavailableError

REGISTRATION = {"name": "Ada", "email": "a@x.com", "phone": "555-0100", "age": 30}


def _register(client: APIClient, **overrides):
    return client.post("/api/tickets", {**REGISTRATION, **overrides}, format="json")


def _check_in(client: APIClient, code: str, **headers):
    return client.post("/api/check-ins", {"code": code}, format="json", **headers)


@pytest.mark.django_db
class TestIssueTicket:
    """Tests for POST /api/tickets"""

    def test_issue_returns_201_with_id(self, api_client: APIClient):
        """First registration creates a ticket."""
        response = _register(api_client)
        assert response.status_code == 201
        assert response.json()["created"] is True
        assert response.json()["id"].startswith("TKT-")

    def test_reissue_returns_200_with_same_id(self, api_client: APIClient):
        """Second registration for the same address resumes the ticket."""
        first = _register(api_client).json()["id"]
        response = _register(api_client, email="A@x.com")
        assert response.status_code == 200
        assert response.json() == {"id": first, "created": False}
        assert orm.Ticket.objects.count() == 1

    def test_ticket_embeds_current_event(self, api_client: APIClient, settings):
        """The ticket carries the event settings in force at issuance."""
        ticket_id = _register(api_client).json()["id"]
        ticket = api_client.get(f"/api/tickets/{ticket_id}").json()
        assert ticket["event"]["name"] == settings.DEFAULT_EVENT["name"]

    @pytest.mark.parametrize("age", [0, 121])
    def test_out_of_range_age_returns_400(self, api_client: APIClient, age):
        """Out-of-range age is rejected with the field named."""
        response = _register(api_client, age=age)
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_IDENTITY"
        assert response.json()["field"] == "age"
        assert orm.Ticket.objects.count() == 0

    def test_missing_email_returns_400(self, api_client: APIClient):
        """Malformed payloads are rejected by the serializer."""
        response = api_client.post("/api/tickets", {"name": "Ada", "age": 30}, format="json")
        assert response.status_code == 400

    def test_store_unavailable_returns_503(self, api_client: APIClient):
        """Store outages map to 503 with Retry-After."""
        with patch(
            "tickets.stores.django_store.DjangoTicketStore.find_by_identity",
            side_effect=StoreUnavailableError("find_by_identity"),
        ):
            response = _register(api_client)
        assert response.status_code == 503
        assert response["Retry-After"]
        assert response.json()["code"] == "STORE_UNAVAILABLE"

    def test_event_store_unavailable_returns_503(self, api_client: APIClient):
        """An unreachable event store is a retryable 503, not a 500."""
        with patch.object(event_orm.Event.objects, "order_by", side_effect=OperationalError("down")):
            response = _register(api_client)
        assert response.status_code == 503
        assert response["Retry-After"]
        assert response.json()["code"] == "EVENT_STORE_UNAVAILABLE"
        assert orm.Ticket.objects.count() == 0

    def test_invalid_registration_does_not_create_event(self, api_client: APIClient):
        """Rejected input leaves the event settings untouched."""
        assert _register(api_client, age=0).status_code == 400
        assert event_orm.Event.objects.count() == 0

    def test_resume_does_not_read_event_settings(self, api_client: APIClient):
        """Re-registering resumes the ticket even while event settings are unreachable."""
        first = _register(api_client).json()["id"]
        with patch.object(event_orm.Event.objects, "order_by", side_effect=OperationalError("down")):
            response = _register(api_client)
        assert response.status_code == 200
        assert response.json()["id"] == first


@pytest.mark.django_db
class TestTicketLookup:
    """Tests for GET /api/tickets/{id} and its QR code"""

    def test_lookup_returns_details(self, api_client: APIClient):
        """An issued ticket is shown unused."""
        ticket_id = _register(api_client).json()["id"]
        body = api_client.get(f"/api/tickets/{ticket_id}").json()
        assert body["id"] == ticket_id
        assert body["email"] == "a@x.com"
        assert body["check_state"] == "unused"
        assert body["checked_in_at"] is None

    def test_lookup_unknown_returns_404(self, api_client: APIClient):
        """An unknown id is 404."""
        response = api_client.get("/api/tickets/TKT-0-missing00")
        assert response.status_code == 404
        assert response.json()["code"] == "TICKET_NOT_FOUND"

    def test_code_png(self, api_client: APIClient):
        """The QR image is served as PNG by default."""
        ticket_id = _register(api_client).json()["id"]
        response = api_client.get(f"/api/tickets/{ticket_id}/code")
        assert response.status_code == 200
        assert response["Content-Type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")

    def test_code_png_scans_back_to_id(self, api_client: APIClient):
        """The served image decodes to exactly the ticket id."""
        ticket_id = _register(api_client).json()["id"]
        content = api_client.get(f"/api/tickets/{ticket_id}/code").content
        results = zxingcpp.read_barcodes(Image.open(io.BytesIO(content)).convert("L"))
        assert [result.text for result in results] == [ticket_id]

    def test_code_svg(self, api_client: APIClient):
        """kind=svg serves an SVG document."""
        ticket_id = _register(api_client).json()["id"]
        response = api_client.get(f"/api/tickets/{ticket_id}/code", {"kind": "svg"})
        assert response["Content-Type"] == "image/svg+xml"

    def test_code_unknown_ticket_returns_404(self, api_client: APIClient):
        """No image is rendered for an unknown id."""
        assert api_client.get("/api/tickets/TKT-0-missing00/code").status_code == 404

    def test_code_bad_kind_returns_400(self, api_client: APIClient):
        """Only png and svg are offered."""
        ticket_id = _register(api_client).json()["id"]
        assert api_client.get(f"/api/tickets/{ticket_id}/code", {"kind": "gif"}).status_code == 400


@pytest.mark.django_db
class TestCheckIn:
    """Tests for POST /api/check-ins"""

    def test_scenario(self, api_client: APIClient):
        """Issue, resume, admit, re-admit, and reject a bogus code."""
        t1 = _register(api_client, email="a@x.com", age=30).json()["id"]
        assert _register(api_client, email="a@x.com", age=30).json()["id"] == t1

        first = _check_in(api_client, t1).json()
        assert first["outcome"] == "admitted"
        assert first["ticket"]["check_state"] == "used"

        second = _check_in(api_client, t1).json()
        assert second["outcome"] == "already_admitted"
        assert second["checked_in_at"] == first["checked_in_at"]

        bogus = _check_in(api_client, "bogus-id").json()
        assert bogus == {"outcome": "unknown", "checked_in_at": None, "ticket": None}

    def test_scanned_text_with_newline(self, api_client: APIClient):
        """Scanner line endings are stripped before lookup."""
        t1 = _register(api_client).json()["id"]
        assert _check_in(api_client, f"{t1}\n").json()["outcome"] == "admitted"

    def test_whitespace_code_is_unknown(self, api_client: APIClient):
        """A scan of only whitespace is UNKNOWN."""
        assert _check_in(api_client, "   ").json()["outcome"] == "unknown"

    def test_empty_code_is_unknown(self, api_client: APIClient):
        """An empty scan is UNKNOWN, not a validation error."""
        response = _check_in(api_client, "")
        assert response.status_code == 200
        assert response.json()["outcome"] == "unknown"

    def test_requires_station_key_when_configured(self, api_client: APIClient, settings):
        """With SCANNER_API_KEY set, unauthenticated scans are refused."""
        settings.SCANNER_API_KEY = "station-secret"
        t1 = _register(api_client).json()["id"]
        assert _check_in(api_client, t1).status_code == 403
        assert _check_in(api_client, t1, HTTP_X_API_KEY="wrong").status_code == 403
        assert orm.Ticket.objects.get(pk=t1).checked_in_at is None

    def test_accepts_station_key(self, api_client: APIClient, settings):
        """X-API-Key and Bearer forms are both accepted."""
        settings.SCANNER_API_KEY = "station-secret"
        t1 = _register(api_client).json()["id"]
        assert _check_in(api_client, t1, HTTP_X_API_KEY="station-secret").json()["outcome"] == "admitted"
        response = _check_in(api_client, t1, HTTP_AUTHORIZATION="Bearer station-secret")
        assert response.json()["outcome"] == "already_admitted"

    def test_store_unavailable_returns_503(self, api_client: APIClient):
        """Infrastructure failures are not reported as an outcome."""
        t1 = _register(api_client).json()["id"]
        with patch(
            "tickets.stores.django_store.DjangoTicketStore.transition_to_used",
            side_effect=StoreUnavailableError("transition_to_used"),
        ):
            response = _check_in(api_client, t1)
        assert response.status_code == 503
        assert orm.Ticket.objects.get(pk=t1).checked_in_at is None


class TestHealth:
    """Tests for GET /api/health"""

    def test_health(self, api_client: APIClient):
        assert api_client.get("/api/health").json() == {"ok": True}
