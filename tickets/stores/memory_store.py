"""In-process TicketStore.

Backs unit tests and single-process demos. A lock makes each operation
atomic, mirroring the conditional statements of the database store.
"""

import threading
from datetime import datetime

from tickets.domain import ContactAddress, InsertResult, Ticket, TicketId, TransitionResult
from tickets.stores.interfaces import TicketStore


class InMemoryTicketStore(TicketStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[TicketId, Ticket] = {}
        self._by_contact: dict[ContactAddress, TicketId] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)

    def find_by_identity(self, contact: ContactAddress) -> Ticket | None:
        with self._lock:
            ticket_id = self._by_contact.get(contact)
            return self._by_id.get(ticket_id) if ticket_id else None

    def find_by_id(self, ticket_id: TicketId) -> Ticket | None:
        with self._lock:
            return self._by_id.get(ticket_id)

    def insert_if_absent(self, ticket: Ticket) -> InsertResult:
        contact = ticket.identity.contact
        with self._lock:
            existing = self._by_contact.get(contact)
            if existing is not None:
                return InsertResult.already_exists(existing)
            if ticket.id in self._by_id:
                raise ValueError(f"Duplicate ticket id {ticket.id}")
            self._by_id[ticket.id] = ticket
            self._by_contact[contact] = ticket.id
            return InsertResult.created(ticket.id)

    def transition_to_used(self, ticket_id: TicketId, now: datetime) -> TransitionResult:
        with self._lock:
            ticket = self._by_id.get(ticket_id)
            if ticket is None:
                return TransitionResult.not_found()
            if ticket.is_used:
                return TransitionResult.already_used(ticket.checked_in_at)
            self._by_id[ticket_id] = ticket.mark_used(now)
            return TransitionResult.transitioned(now)
