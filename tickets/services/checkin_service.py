"""Check-in service - admits each ticket at most once.

The only mutation is the store's conditional transition, so any number of
stations may scan the same code concurrently.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from tickets.domain import (
    CheckInOutcome,
    CheckInResult,
    Ticket,
    TicketId,
    TransitionStatus,
)
from tickets.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse(ticket_id: str) -> TicketId | None:
    try:
        return TicketId.from_string(ticket_id)
    except ValueError:
        return None


class CheckInService:
    """Service for validating tickets at the door."""

    def __init__(self, store: TicketStore, clock: Callable[[], datetime] = _utcnow) -> None:
        self._store = store
        self._clock = clock

    def lookup(self, ticket_id: str) -> Ticket | None:
        """Return a ticket for display, or None. Never changes state."""
        parsed = _parse(ticket_id)
        if parsed is None:
            return None
        return self._store.find_by_id(parsed)

    def check_in(self, ticket_id: str) -> CheckInResult:
        """Admit the holder of ``ticket_id`` if the ticket is unused.

        ADMITTED and ALREADY_ADMITTED carry the ticket as it now stands.
        UNKNOWN covers forged, garbled and foreign codes.

        Raises:
            StoreUnavailableError: If the ticket store cannot be reached.
        """
        parsed = _parse(ticket_id)
        ticket = self._store.find_by_id(parsed) if parsed is not None else None
        if ticket is None:
            logger.info("check-in rejected: unknown code")
            return CheckInResult(CheckInOutcome.UNKNOWN)

        result = self._store.transition_to_used(ticket.id, self._clock())
        if result.status is TransitionStatus.TRANSITIONED:
            logger.info("admitted", extra={"ticket_id": str(ticket.id)})
            return CheckInResult(CheckInOutcome.ADMITTED, ticket.mark_used(result.checked_in_at))
        if result.status is TransitionStatus.ALREADY_USED:
            logger.info(
                "already admitted",
                extra={"ticket_id": str(ticket.id), "checked_in_at": result.checked_in_at.isoformat()},
            )
            return CheckInResult(
                CheckInOutcome.ALREADY_ADMITTED, ticket.mark_used(result.checked_in_at)
            )

        logger.warning("ticket vanished during check-in", extra={"ticket_id": str(ticket.id)})
        return CheckInResult(CheckInOutcome.UNKNOWN)
