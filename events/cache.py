"""Cache keys for event settings reads."""

CURRENT_EVENT_KEY = "events:current"
