"""Event service - all business logic for the event settings lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from datetime import date

from events.domain import Event, EventDetails
from events.domain.errors import InvalidEventError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for reading and editing the configured event."""

    def __init__(self, store: EventStore, defaults: Mapping[str, str] | None = None) -> None:
        self._store = store
        self._defaults = dict(defaults or {})

    def get_current_event(self) -> Event:
        """Return the configured event, persisting the defaults on first use.

        Raises:
            InvalidEventError: If no event exists and the defaults are invalid.
        """
        event = self._store.get_current_event()
        if event is not None:
            return event
        logger.info("no event configured, saving defaults")
        return self.update_event(
            name=self._defaults.get("name", ""),
            date=self._defaults.get("date", ""),
            time=self._defaults.get("time", ""),
            location=self._defaults.get("location", ""),
            description=self._defaults.get("description", ""),
        )

    def update_event(
        self,
        *,
        name: str,
        date: date | str,
        time: str,
        location: str,
        description: str = "",
        logo_url: str | None = None,
    ) -> Event:
        """Replace the event settings. Tickets already issued keep their snapshot.

        Raises:
            InvalidEventError: If the settings are invalid.
        """
        try:
            details = EventDetails(
                name=(name or "").strip(),
                date=_parse_date(date),
                time=(time or "").strip(),
                location=(location or "").strip(),
                description=(description or "").strip(),
                logo_url=logo_url or None,
            )
        except ValueError as exc:
            raise InvalidEventError(str(exc)) from exc
        event = self._store.save_event(details)
        logger.info("event settings saved", extra={"event_id": str(event.id.value)})
        return event


def _parse_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValueError("Event date must be an ISO date (YYYY-MM-DD)") from None
