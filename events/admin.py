from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "date", "time", "location", "updated_at"]
    search_fields = ["name", "location"]
