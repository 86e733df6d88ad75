"""Django ORM models (persistence layer).

Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from events.models import Event


class Application(models.Model):
    """Persistence model for event applications."""

    class Status(models.TextChoices):
        PENDING = "pending"
        CONFIRMED = "confirmed"
        WAITLIST = "waitlist"
        CANCELLED = "cancelled"
        COMPLETED = "completed"

    class Gender(models.TextChoices):
        MALE = "male"
        FEMALE = "female"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="applications")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="applications",
    )
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    # Copied out of form_snapshot so headcounts can be aggregated in SQL.
    gender = models.CharField(max_length=6, choices=Gender.choices)
    form_snapshot = models.JSONField()
    applied_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["-applied_at"]
        indexes = [
            models.Index(fields=["event", "status"], name="application_event_status_idx"),
            models.Index(fields=["user", "-applied_at"], name="application_user_applied_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "user"],
                condition=~models.Q(status="cancelled"),
                name="unique_active_application",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.form_snapshot.get('name', '?')} -> {self.event_id} ({self.status})"
