from events.handlers.views import EventView

__all__ = ["EventView"]
