from tickets.handlers.views import CheckInView, TicketCodeView, TicketDetailView, TicketListView

__all__ = ["TicketListView", "TicketDetailView", "TicketCodeView", "CheckInView"]
