"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from tickets.domain import EventSnapshot
from tickets.stores import InMemoryTicketStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def open_api_keys(settings):
    settings.SCANNER_API_KEY = ""
    settings.ADMIN_API_KEY = ""


@pytest.fixture
def snapshot() -> EventSnapshot:
    return EventSnapshot(
        name="Launch Night",
        date=date(2025, 3, 15),
        time="9:00 AM",
        location="Main Hall",
    )


@pytest.fixture
def memory_store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


class FixedClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 3, 15, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()
