"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every mutating operation
is a single atomic effect; callers never combine a read with a later write.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from tickets.domain import ContactAddress, InsertResult, Ticket, TicketId, TransitionResult


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def find_by_identity(self, contact: ContactAddress) -> Ticket | None:
        """Return the ticket held by a contact address, or None."""
        ...

    @abstractmethod
    def find_by_id(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def insert_if_absent(self, ticket: Ticket) -> InsertResult:
        """Insert a ticket unless its contact address already holds one.

        Uniqueness is enforced by the store itself, so of two concurrent
        inserts for one address exactly one succeeds and the other reports
        the winner's id.
        """
        ...

    @abstractmethod
    def transition_to_used(self, ticket_id: TicketId, now: datetime) -> TransitionResult:
        """Mark an unused ticket used, as one conditional update.

        Returns the time of the first transition when the ticket was already used.
        """
        ...
