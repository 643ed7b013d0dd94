"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self

MAX_TICKET_ID_LENGTH = 64
MIN_AGE = 1
MAX_AGE = 120

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class TicketId:
    """Opaque scannable identifier of a Ticket."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.value != self.value.strip():
            raise ValueError("Ticket id must be a non-empty string without surrounding whitespace")
        if len(self.value) > MAX_TICKET_ID_LENGTH:
            raise ValueError("Ticket id is too long")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=(value or "").strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ContactAddress:
    """Registrant email address; the deduplication key.

    Stored normalised (stripped, lower-cased) so that differently typed
    spellings of one address map to one ticket.
    """

    value: str

    def __post_init__(self) -> None:
        if not _EMAIL_RE.match(self.value):
            raise ValueError("Contact address must be a valid email address")
        if self.value != self.value.strip().lower():
            raise ValueError("Contact address must be normalised")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=(value or "").strip().lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Age:
    """Declared registrant age in whole years."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Age must be a whole number")
        if not MIN_AGE <= self.value <= MAX_AGE:
            raise ValueError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
