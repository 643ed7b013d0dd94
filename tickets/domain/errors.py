"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_IDENTITY = "INVALID_IDENTITY"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    retryable: ClassVar[bool] = False

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidIdentityError(DomainError):
    """Raised when registrant data fails validation. Never retried."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_IDENTITY,
            message=reason,
        )
        self.field = field


class TicketNotFoundError(DomainError):
    """Raised when a ticket lookup for display finds nothing."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class StoreUnavailableError(DomainError):
    """Raised when the ticket store cannot be reached. Safe to retry."""

    retryable: ClassVar[bool] = True

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Ticket store is temporarily unavailable",
        )
        self.operation = operation
