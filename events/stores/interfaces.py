"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventDetails


class EventStore(ABC):
    """Interface for event settings persistence operations."""

    @abstractmethod
    def get_current_event(self) -> Event | None:
        """Return the most recently updated event, or None if none is configured."""
        ...

    @abstractmethod
    def save_event(self, details: EventDetails) -> Event:
        """Overwrite the current event with ``details``, creating it if absent."""
        ...
