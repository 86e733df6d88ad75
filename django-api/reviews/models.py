"""Django ORM models (persistence layer).

Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from events.models import Event


class Review(models.Model):
    """Persistence model for reviews."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="reviews")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    rating = models.PositiveSmallIntegerField()
    content = models.CharField(max_length=300)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "-created_at"], name="review_event_created_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["event", "user"], name="unique_review_per_event"),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1, rating__lte=5),
                name="review_rating_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.rating}/5 by {self.user_id} on {self.event_id}"
