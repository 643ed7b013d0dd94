from events.domain.models import Event, EventDetails
from events.domain.value_objects import EventId

__all__ = [
    "Event",
    "EventDetails",
    "EventId",
]
