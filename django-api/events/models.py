"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    location = models.CharField(max_length=255, blank=True, null=True)
    capacity_male = models.PositiveIntegerField()
    capacity_female = models.PositiveIntegerField()
    price_male_standard = models.PositiveIntegerField(default=0)
    price_male_premium = models.PositiveIntegerField(default=0)
    price_female_standard = models.PositiveIntegerField(default=0)
    price_female_premium = models.PositiveIntegerField(default=0)
    application_deadline = models.DateTimeField()
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["starts_at"], name="event_starts_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(application_deadline__lte=models.F("starts_at")),
                name="event_deadline_before_start",
            ),
            models.CheckConstraint(
                condition=models.Q(ends_at__gt=models.F("starts_at")),
                name="event_ends_after_start",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.starts_at:%Y-%m-%d %H:%M}"


class TimePart(models.Model):
    """Persistence model for the named parts of an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="parts")
    label = models.CharField(max_length=50)
    starts = models.TimeField()
    ends = models.TimeField()
    position = models.PositiveSmallIntegerField(default=0)

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["event", "position"], name="timepart_event_position_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event.title} - {self.label}"
