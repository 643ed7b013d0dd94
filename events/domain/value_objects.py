"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID
