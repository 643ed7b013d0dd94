from django.urls import path

from events.handlers import EventView

urlpatterns = [
    path("event", EventView.as_view(), name="event"),
]
