"""Ticket identifier codec.

Identifiers look like ``TKT-1718000000000-k3j9x0a2b``: a millisecond clock
reading followed by nine random base-36 characters. Minting needs no shared
counter, so any number of processes may mint concurrently.

The scannable code carries exactly the identifier string and nothing else.
"""

import io
import secrets
import string
import time
from dataclasses import dataclass, field

import qrcode
import qrcode.image.svg
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

from tickets.domain.value_objects import TicketId

TICKET_ID_PREFIX = "TKT"
SUFFIX_LENGTH = 9

_ALPHABET = string.digits + string.ascii_lowercase

ERROR_CORRECTION_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def mint() -> TicketId:
    """Return a fresh ticket identifier."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return TicketId(f"{TICKET_ID_PREFIX}-{millis}-{suffix}")


@dataclass(frozen=True)
class DisplayCode:
    """QR rendering of a ticket identifier."""

    payload: str
    _qr: qrcode.QRCode = field(repr=False, compare=False)

    @property
    def version(self) -> int:
        return self._qr.version

    @property
    def modules(self) -> list[list[bool]]:
        """Module matrix including the quiet-zone border."""
        return self._qr.get_matrix()

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self._qr.make_image().save(buf)
        return buf.getvalue()

    def to_svg(self) -> bytes:
        buf = io.BytesIO()
        self._qr.make_image(image_factory=qrcode.image.svg.SvgPathImage).save(buf)
        return buf.getvalue()


def encode_for_display(
    ticket_id: TicketId | str,
    *,
    error_correction: str = "M",
    box_size: int = 10,
    border: int = 4,
) -> DisplayCode:
    """Build the QR code for ``ticket_id``.

    Deterministic: the same id and options always yield the same module matrix.

    Raises:
        ValueError: If the id is empty or the error correction level is unknown.
    """
    payload = str(ticket_id)
    if not payload:
        raise ValueError("Cannot encode an empty ticket id")
    try:
        level = ERROR_CORRECTION_LEVELS[error_correction.upper()]
    except KeyError:
        raise ValueError(f"Unknown error correction level: {error_correction}") from None

    qr = qrcode.QRCode(
        version=None,
        error_correction=level,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    return DisplayCode(payload=payload, _qr=qr)


def decode(scanned: str) -> TicketId:
    """Recover the ticket identifier from the text a scanner read.

    Raises:
        ValueError: If the scan yielded nothing usable.
    """
    return TicketId.from_string(scanned)
