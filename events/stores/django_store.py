"""Django ORM implementation of the EventStore."""

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from django.db import InterfaceError, OperationalError, transaction

from events import models as orm
from events.domain import Event, EventDetails, EventId
from events.domain.errors import EventStoreUnavailableError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _translate_db_errors(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except (OperationalError, InterfaceError) as exc:
                logger.warning(
                    "event store unavailable",
                    extra={"operation": operation, "error": type(exc).__name__},
                )
                raise EventStoreUnavailableError(operation) from exc

        return wrapper

    return decorator


def _to_domain(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        date=row.date,
        time=row.time,
        location=row.location,
        description=row.description,
        logo_url=row.logo_url or None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    @_translate_db_errors("get_current_event")
    def get_current_event(self) -> Event | None:
        row = orm.Event.objects.order_by("-updated_at").first()
        return _to_domain(row) if row else None

    @_translate_db_errors("save_event")
    def save_event(self, details: EventDetails) -> Event:
        with transaction.atomic():
            row = orm.Event.objects.select_for_update().order_by("-updated_at").first()
            if row is None:
                row = orm.Event()
            row.name = details.name
            row.date = details.date
            row.time = details.time
            row.location = details.location
            row.description = details.description
            row.logo_url = details.logo_url
            row.save()
        return _to_domain(row)
