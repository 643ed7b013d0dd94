from django.urls import path

from tickets.handlers import CheckInView, TicketCodeView, TicketDetailView, TicketListView

urlpatterns = [
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path("tickets/<str:ticket_id>/code", TicketCodeView.as_view(), name="ticket-code"),
    path("check-ins", CheckInView.as_view(), name="check-in"),
]
