"""Domain models representing persisted state.

These are pure domain objects; EventDraft carries the administrator input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from common.domain.errors import FieldErrors
from common.domain.values import Gender
from events.domain.value_objects import Capacity, EventId, Pricing, TimePart


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    starts_at: datetime
    ends_at: datetime
    location: str | None
    capacity_male: Capacity
    capacity_female: Capacity
    pricing: Pricing
    application_deadline: datetime
    created_at: datetime
    updated_at: datetime
    parts: tuple[TimePart, ...] = ()

    def __post_init__(self) -> None:
        if self.application_deadline > self.starts_at:
            raise ValueError("Application deadline must not be after the event start")
        if self.ends_at <= self.starts_at:
            raise ValueError("Event must end after it starts")

    def capacity_for(self, gender: Gender) -> Capacity:
        return self.capacity_male if gender is Gender.MALE else self.capacity_female

    def has_ended(self, now: datetime) -> bool:
        return now >= self.ends_at


@dataclass(frozen=True)
class Headcount:
    """Per-gender application counts for one event.

    ``applied_*`` counts every non-cancelled application.
    """

    confirmed_male: int = 0
    confirmed_female: int = 0
    applied_male: int = 0
    applied_female: int = 0

    def confirmed_for(self, gender: Gender) -> int:
        return self.confirmed_male if gender is Gender.MALE else self.confirmed_female

    @property
    def total_confirmed(self) -> int:
        return self.confirmed_male + self.confirmed_female

    @property
    def total_applied(self) -> int:
        return self.applied_male + self.applied_female


@dataclass(frozen=True)
class EventListing:
    """An event together with its current headcount."""

    event: Event
    headcount: Headcount

    @property
    def remaining_male(self) -> int:
        return self.event.capacity_male.value - self.headcount.confirmed_male

    @property
    def remaining_female(self) -> int:
        return self.event.capacity_female.value - self.headcount.confirmed_female


@dataclass(frozen=True)
class EventDraft:
    """Administrator input for creating or replacing an event."""

    title: str
    description: str
    starts_at: datetime
    ends_at: datetime
    location: str | None
    capacity_male: int
    capacity_female: int
    price_male_standard: int
    price_male_premium: int
    price_female_standard: int
    price_female_premium: int
    application_deadline: datetime
    parts: tuple[TimePart, ...] = ()

    def validate(self) -> None:
        """Raise ValidationError listing every invalid field."""
        errors = FieldErrors()
        if not self.title.strip():
            errors.add("title", "Title is required")
        for field in ("capacity_male", "capacity_female"):
            if getattr(self, field) < 1:
                errors.add(field, "Capacity must be at least 1")
        for field in (
            "price_male_standard",
            "price_male_premium",
            "price_female_standard",
            "price_female_premium",
        ):
            if getattr(self, field) < 0:
                errors.add(field, "Price cannot be negative")
        if self.ends_at <= self.starts_at:
            errors.add("ends_at", "End time must be after the start time")
        if self.application_deadline > self.starts_at:
            errors.add("application_deadline", "Deadline must not be after the event start")
        errors.raise_if_any()
