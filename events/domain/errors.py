"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_EVENT = "INVALID_EVENT"
    EVENT_STORE_UNAVAILABLE = "EVENT_STORE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    retryable: ClassVar[bool] = False

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidEventError(DomainError):
    """Raised when event settings fail validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT,
            message=reason,
        )


class EventStoreUnavailableError(DomainError):
    """Raised when the event store cannot be reached. Safe to retry."""

    retryable: ClassVar[bool] = True

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_STORE_UNAVAILABLE,
            message="Event settings are temporarily unavailable",
        )
        self.operation = operation
