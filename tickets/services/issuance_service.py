"""Issuance service - creates one ticket per registrant contact address.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from tickets import codec
from tickets.domain import (
    Age,
    ContactAddress,
    EventSnapshot,
    Identity,
    Issuance,
    Ticket,
    TicketId,
)
from tickets.domain.errors import InvalidIdentityError
from tickets.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IssuanceService:
    """Service for issuing admission tickets."""

    def __init__(
        self,
        store: TicketStore,
        mint: Callable[[], TicketId] = codec.mint,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._mint = mint
        self._clock = clock

    def issue(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        age: int,
        event: EventSnapshot | Callable[[], EventSnapshot],
    ) -> Issuance:
        """Return the ticket for this registrant, creating it on first registration.

        Re-registering with the same contact address resumes the existing
        ticket, including when two registrations race. ``event`` may be a
        callable; it is only invoked once a new ticket is about to be minted.

        Raises:
            InvalidIdentityError: If the registrant data is invalid.
            StoreUnavailableError: If the ticket store cannot be reached.
        """
        identity = self._build_identity(name=name, email=email, phone=phone, age=age)

        existing = self._store.find_by_identity(identity.contact)
        if existing is not None:
            logger.info("resumed existing ticket", extra={"ticket_id": str(existing.id)})
            return Issuance(ticket_id=existing.id, created=False)

        if callable(event):
            event = event()

        ticket = Ticket(
            id=self._mint(),
            identity=identity,
            event=event,
            created_at=self._clock(),
        )
        result = self._store.insert_if_absent(ticket)
        if not result.inserted:
            logger.info(
                "concurrent registration resolved to existing ticket",
                extra={"ticket_id": str(result.ticket_id)},
            )
            return Issuance(ticket_id=result.ticket_id, created=False)

        logger.info("issued ticket", extra={"ticket_id": str(ticket.id)})
        return Issuance(ticket_id=ticket.id, created=True)

    @staticmethod
    def _build_identity(*, name: str, email: str, phone: str, age: int) -> Identity:
        name = (name or "").strip()
        if not name:
            raise InvalidIdentityError("name", "Name is required")
        try:
            contact = ContactAddress.from_string(email)
        except ValueError as exc:
            raise InvalidIdentityError("email", str(exc)) from exc
        try:
            declared_age = Age(age)
        except ValueError as exc:
            raise InvalidIdentityError("age", str(exc)) from exc
        return Identity(
            name=name,
            contact=contact,
            phone=(phone or "").strip(),
            age=declared_age,
        )
