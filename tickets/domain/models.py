"""Domain models for tickets and the outcomes of store and service operations.

These are pure domain objects. Django ORM models are in tickets/models.py.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum

from tickets.domain.value_objects import Age, ContactAddress, TicketId


class CheckState(Enum):
    UNUSED = "unused"
    USED = "used"


@dataclass(frozen=True)
class Identity:
    """Registrant attributes captured at issuance."""

    name: str
    contact: ContactAddress
    phone: str
    age: Age


@dataclass(frozen=True)
class EventSnapshot:
    """Event details copied onto a ticket when it is issued."""

    name: str
    date: date
    time: str
    location: str


@dataclass(frozen=True)
class Ticket:
    """Domain representation of an admission ticket."""

    id: TicketId
    identity: Identity
    event: EventSnapshot
    created_at: datetime
    check_state: CheckState = CheckState.UNUSED
    checked_in_at: datetime | None = None

    def __post_init__(self) -> None:
        used = self.check_state is CheckState.USED
        if used != (self.checked_in_at is not None):
            raise ValueError("checked_in_at must be set if and only if the ticket is used")

    @property
    def is_used(self) -> bool:
        return self.check_state is CheckState.USED

    def mark_used(self, at: datetime) -> "Ticket":
        return replace(self, check_state=CheckState.USED, checked_in_at=at)


@dataclass(frozen=True)
class InsertResult:
    """Outcome of TicketStore.insert_if_absent.

    ``ticket_id`` is the inserted ticket's id, or the id of the ticket that
    already holds the contact address.
    """

    inserted: bool
    ticket_id: TicketId

    @classmethod
    def created(cls, ticket_id: TicketId) -> "InsertResult":
        return cls(inserted=True, ticket_id=ticket_id)

    @classmethod
    def already_exists(cls, existing_id: TicketId) -> "InsertResult":
        return cls(inserted=False, ticket_id=existing_id)


class TransitionStatus(Enum):
    TRANSITIONED = "transitioned"
    ALREADY_USED = "already_used"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of TicketStore.transition_to_used."""

    status: TransitionStatus
    checked_in_at: datetime | None = None

    @classmethod
    def transitioned(cls, at: datetime) -> "TransitionResult":
        return cls(TransitionStatus.TRANSITIONED, at)

    @classmethod
    def already_used(cls, at: datetime) -> "TransitionResult":
        return cls(TransitionStatus.ALREADY_USED, at)

    @classmethod
    def not_found(cls) -> "TransitionResult":
        return cls(TransitionStatus.NOT_FOUND)


@dataclass(frozen=True)
class Issuance:
    """Result of issuing a ticket. ``created`` is False when an existing ticket was resumed."""

    ticket_id: TicketId
    created: bool


class CheckInOutcome(Enum):
    ADMITTED = "admitted"
    ALREADY_ADMITTED = "already_admitted"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CheckInResult:
    """Outcome of a scan at the door."""

    outcome: CheckInOutcome
    ticket: Ticket | None = None

    @property
    def checked_in_at(self) -> datetime | None:
        return self.ticket.checked_in_at if self.ticket else None
