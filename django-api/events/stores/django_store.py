"""Django ORM implementation of the EventStore."""

from datetime import datetime

from django.db import transaction

from accounts.domain import UserId
from events import models
from events.domain import Capacity, Event, EventDraft, EventId, Money, Pricing, TimePart
from events.stores.interfaces import EventStore


def event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        location=row.location or None,
        capacity_male=Capacity(row.capacity_male),
        capacity_female=Capacity(row.capacity_female),
        pricing=Pricing(
            male_standard=Money(row.price_male_standard),
            male_premium=Money(row.price_male_premium),
            female_standard=Money(row.price_female_standard),
            female_premium=Money(row.price_female_premium),
        ),
        application_deadline=row.application_deadline,
        created_at=row.created_at,
        updated_at=row.updated_at,
        parts=tuple(
            TimePart(label=part.label, starts=part.starts, ends=part.ends)
            for part in row.parts.all()
        ),
    )


def _draft_fields(draft: EventDraft) -> dict:
    return {
        "title": draft.title.strip(),
        "description": draft.description,
        "starts_at": draft.starts_at,
        "ends_at": draft.ends_at,
        "location": draft.location,
        "capacity_male": draft.capacity_male,
        "capacity_female": draft.capacity_female,
        "price_male_standard": draft.price_male_standard,
        "price_male_premium": draft.price_male_premium,
        "price_female_standard": draft.price_female_standard,
        "price_female_premium": draft.price_female_premium,
        "application_deadline": draft.application_deadline,
    }


def _replace_parts(row: models.Event, parts: tuple[TimePart, ...]) -> None:
    row.parts.all().delete()
    models.TimePart.objects.bulk_create(
        models.TimePart(event=row, label=part.label, starts=part.starts, ends=part.ends, position=index)
        for index, part in enumerate(parts)
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(
        self, starts_from: datetime | None = None, starts_before: datetime | None = None
    ) -> list[Event]:
        queryset = models.Event.objects.prefetch_related("parts").order_by("starts_at")
        if starts_from is not None:
            queryset = queryset.filter(starts_at__gte=starts_from)
        if starts_before is not None:
            queryset = queryset.filter(starts_at__lt=starts_before)
        return [event_to_domain(row) for row in queryset]

    def get_event(self, event_id: EventId, for_update: bool = False) -> Event | None:
        queryset = models.Event.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.filter(id=event_id.value).first()
        return event_to_domain(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def create_event(self, draft: EventDraft, created_by: UserId | None = None) -> Event:
        with transaction.atomic():
            row = models.Event.objects.create(
                created_by_id=created_by.value if created_by else None,
                **_draft_fields(draft),
            )
            _replace_parts(row, draft.parts)
        return event_to_domain(row)

    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        with transaction.atomic():
            row = models.Event.objects.select_for_update().get(id=event_id.value)
            for field, value in _draft_fields(draft).items():
                setattr(row, field, value)
            row.save()
            _replace_parts(row, draft.parts)
        return event_to_domain(row)

    def atomic(self):
        return transaction.atomic()
