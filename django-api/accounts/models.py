"""Django ORM models (persistence layer).

Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """Persistence model for user profiles, keyed by the auth user."""

    class Gender(models.TextChoices):
        MALE = "male"
        FEMALE = "female"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="profile",
    )
    email = models.EmailField()
    name = models.CharField(max_length=100)
    gender = models.CharField(max_length=6, choices=Gender.choices, blank=True, null=True)
    birth_year = models.PositiveSmallIntegerField(blank=True, null=True)
    phone = models.CharField(max_length=30, blank=True)
    height = models.PositiveSmallIntegerField(blank=True, null=True)
    weight = models.PositiveSmallIntegerField(blank=True, null=True)
    ideal_type = models.TextField(blank=True)
    # Ordered list of {"url": ..., "kind": "face" | "body"}
    photos = models.JSONField(default=list, blank=True)
    is_admin = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
