from tickets.stores.interfaces import TicketStore
from tickets.stores.memory_store import InMemoryTicketStore

__all__ = ["TicketStore", "InMemoryTicketStore"]
