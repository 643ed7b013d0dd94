from tickets.domain.models import (
    CheckInOutcome,
    CheckInResult,
    CheckState,
    EventSnapshot,
    Identity,
    InsertResult,
    Issuance,
    Ticket,
    TransitionResult,
    TransitionStatus,
)
from tickets.domain.value_objects import Age, ContactAddress, TicketId

__all__ = [
    "Ticket",
    "Identity",
    "EventSnapshot",
    "CheckState",
    "InsertResult",
    "TransitionResult",
    "TransitionStatus",
    "Issuance",
    "CheckInOutcome",
    "CheckInResult",
    "TicketId",
    "ContactAddress",
    "Age",
]
