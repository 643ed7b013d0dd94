"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class EventDetails:
    """Editable event settings, validated on construction."""

    name: str
    date: date
    time: str
    location: str
    description: str = ""
    logo_url: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Event name is required")
        if not self.location.strip():
            raise ValueError("Event location is required")
        if not isinstance(self.date, date):
            raise ValueError("Event date must be a date")


@dataclass(frozen=True)
class Event:
    """Domain representation of the configured event."""

    id: EventId
    name: str
    date: date
    time: str
    location: str
    description: str
    logo_url: str | None
    created_at: datetime
    updated_at: datetime
