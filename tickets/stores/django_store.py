"""Django ORM implementation of the TicketStore.

Uniqueness of the contact address is the database's unique index on
``email``; check-in is one ``UPDATE ... WHERE checked_in_at IS NULL``.
"""

import functools
import logging
from collections.abc import Callable
from datetime import datetime
from typing import ParamSpec, TypeVar

from django.db import IntegrityError, InterfaceError, OperationalError, transaction

from tickets import models as orm
from tickets.domain import (
    Age,
    CheckState,
    ContactAddress,
    EventSnapshot,
    Identity,
    InsertResult,
    Ticket,
    TicketId,
    TransitionResult,
)
from tickets.domain.errors import StoreUnavailableError
from tickets.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _translate_db_errors(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Surface connectivity failures as retryable StoreUnavailableError."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except (OperationalError, InterfaceError) as exc:
                logger.warning(
                    "ticket store unavailable",
                    extra={"operation": operation, "error": type(exc).__name__},
                )
                raise StoreUnavailableError(operation) from exc

        return wrapper

    return decorator


def _to_domain(row: orm.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        identity=Identity(
            name=row.name,
            contact=ContactAddress(row.email),
            phone=row.phone,
            age=Age(row.age),
        ),
        event=EventSnapshot(
            name=row.event_name,
            date=row.event_date,
            time=row.event_time,
            location=row.event_location,
        ),
        created_at=row.created_at,
        check_state=CheckState(row.check_state),
        checked_in_at=row.checked_in_at,
    )


def _to_row(ticket: Ticket) -> orm.Ticket:
    return orm.Ticket(
        id=ticket.id.value,
        name=ticket.identity.name,
        email=ticket.identity.contact.value,
        phone=ticket.identity.phone,
        age=ticket.identity.age.value,
        event_name=ticket.event.name,
        event_date=ticket.event.date,
        event_time=ticket.event.time,
        event_location=ticket.event.location,
        created_at=ticket.created_at,
        check_state=ticket.check_state.value,
        checked_in_at=ticket.checked_in_at,
    )


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    @_translate_db_errors("find_by_identity")
    def find_by_identity(self, contact: ContactAddress) -> Ticket | None:
        row = orm.Ticket.objects.filter(email=contact.value).first()
        return _to_domain(row) if row else None

    @_translate_db_errors("find_by_id")
    def find_by_id(self, ticket_id: TicketId) -> Ticket | None:
        row = orm.Ticket.objects.filter(pk=ticket_id.value).first()
        return _to_domain(row) if row else None

    @_translate_db_errors("insert_if_absent")
    def insert_if_absent(self, ticket: Ticket) -> InsertResult:
        try:
            with transaction.atomic():
                _to_row(ticket).save(force_insert=True)
        except IntegrityError:
            winner = (
                orm.Ticket.objects.filter(email=ticket.identity.contact.value)
                .values_list("pk", flat=True)
                .first()
            )
            if winner is None:
                # Not the contact constraint, so it is not a dedup outcome.
                raise
            return InsertResult.already_exists(TicketId(winner))
        return InsertResult.created(ticket.id)

    @_translate_db_errors("transition_to_used")
    def transition_to_used(self, ticket_id: TicketId, now: datetime) -> TransitionResult:
        updated = orm.Ticket.objects.filter(
            pk=ticket_id.value,
            check_state=orm.Ticket.CheckState.UNUSED,
            checked_in_at__isnull=True,
        ).update(check_state=orm.Ticket.CheckState.USED, checked_in_at=now)
        if updated == 1:
            return TransitionResult.transitioned(now)

        checked_in_at = (
            orm.Ticket.objects.filter(pk=ticket_id.value)
            .values_list("checked_in_at", flat=True)
            .first()
        )
        if checked_in_at is None:
            return TransitionResult.not_found()
        return TransitionResult.already_used(checked_in_at)
