"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date, datetime, timezone

import pytest

from events.domain import EventDetails
from tickets.domain import (
    Age,
    CheckState,
    ContactAddress,
    EventSnapshot,
    Identity,
    Ticket,
    TicketId,
)

NOW = datetime(2025, 3, 15, 9, 0, tzinfo=timezone.utc)


def _ticket(**overrides) -> Ticket:
    fields = dict(
        id=TicketId("TKT-1-abc"),
        identity=Identity(
            name="Ada",
            contact=ContactAddress("a@x.com"),
            phone="",
            age=Age(30),
        ),
        event=EventSnapshot(name="Launch", date=date(2025, 3, 15), time="", location="Hall"),
        created_at=NOW,
    )
    fields.update(overrides)
    return Ticket(**fields)


class TestTicketId:
    """Tests for TicketId value object."""

    def test_from_string_strips_whitespace(self):
        """TicketId.from_string trims scanner padding."""
        assert TicketId.from_string("  TKT-1-abc\n").value == "TKT-1-abc"

    def test_rejects_empty(self):
        """TicketId raises ValueError for an empty string."""
        with pytest.raises(ValueError):
            TicketId.from_string("   ")

    def test_rejects_overlong(self):
        """TicketId raises ValueError past the column width."""
        with pytest.raises(ValueError):
            TicketId("x" * 65)


class TestContactAddress:
    """Tests for ContactAddress value object."""

    def test_normalises_case_and_whitespace(self):
        """Differently typed spellings compare equal."""
        assert ContactAddress.from_string(" A@X.com ") == ContactAddress.from_string("a@x.com")

    def test_rejects_malformed_address(self):
        """ContactAddress raises ValueError without an @domain part."""
        with pytest.raises(ValueError):
            ContactAddress.from_string("not-an-email")

    def test_rejects_unnormalised_direct_construction(self):
        """Direct construction must already be normalised."""
        with pytest.raises(ValueError):
            ContactAddress("A@X.com")


class TestAge:
    """Tests for Age value object."""

    @pytest.mark.parametrize("value", [1, 30, 120])
    def test_accepts_range_bounds(self, value):
        """Age accepts 1 through 120 inclusive."""
        assert Age(value).value == value

    @pytest.mark.parametrize("value", [0, 121, -5])
    def test_rejects_out_of_range(self, value):
        """Age raises ValueError outside 1..120."""
        with pytest.raises(ValueError):
            Age(value)

    def test_rejects_bool(self):
        """True is not an age."""
        with pytest.raises(ValueError):
            Age(True)


class TestTicket:
    """Tests for Ticket check-state invariant."""

    def test_new_ticket_is_unused(self):
        """A ticket starts unused without a check-in time."""
        ticket = _ticket()
        assert ticket.check_state is CheckState.UNUSED
        assert ticket.checked_in_at is None

    def test_used_requires_checked_in_at(self):
        """A used ticket without a check-in time is rejected."""
        with pytest.raises(ValueError):
            _ticket(check_state=CheckState.USED)

    def test_unused_rejects_checked_in_at(self):
        """An unused ticket with a check-in time is rejected."""
        with pytest.raises(ValueError):
            _ticket(checked_in_at=NOW)

    def test_mark_used_sets_time(self):
        """mark_used returns a used copy and leaves the original alone."""
        ticket = _ticket()
        used = ticket.mark_used(NOW)
        assert used.is_used and used.checked_in_at == NOW
        assert not ticket.is_used


class TestEventDetails:
    """Tests for EventDetails validation."""

    def test_rejects_blank_name(self):
        """EventDetails requires a name."""
        with pytest.raises(ValueError):
            EventDetails(name=" ", date=date(2025, 1, 1), time="", location="Hall")

    def test_rejects_blank_location(self):
        """EventDetails requires a location."""
        with pytest.raises(ValueError):
            EventDetails(name="Launch", date=date(2025, 1, 1), time="", location="")
