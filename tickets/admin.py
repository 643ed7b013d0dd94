from django.contrib import admin

from tickets.models import Ticket


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    """Read-only: tickets change only through issuance and check-in."""

    list_display = ["id", "name", "email", "event_name", "check_state", "checked_in_at"]
    list_filter = ["check_state", "event_name"]
    search_fields = ["id", "name", "email"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
