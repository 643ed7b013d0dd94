"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models
from django.db.models import Q


class Ticket(models.Model):
    """Persistence model for admission tickets."""

    class CheckState(models.TextChoices):
        UNUSED = "unused", "Unused"
        USED = "used", "Used"

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254, unique=True)
    phone = models.CharField(max_length=50, blank=True)
    age = models.PositiveSmallIntegerField()
    event_name = models.CharField(max_length=255)
    event_date = models.DateField()
    event_time = models.CharField(max_length=50, blank=True)
    event_location = models.CharField(max_length=255)
    created_at = models.DateTimeField()
    check_state = models.CharField(
        max_length=10, choices=CheckState.choices, default=CheckState.UNUSED
    )
    checked_in_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="ticket_created_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(check_state="unused", checked_in_at__isnull=True)
                    | Q(check_state="used", checked_in_at__isnull=False)
                ),
                name="ticket_checked_in_at_matches_state",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} ({self.name})"
