"""Serializers for transforming event domain models to API responses."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from django.utils import timezone
from rest_framework import serializers

from events.domain import AvailabilityStatus, EventDraft, EventListing, TimePart


@dataclass(frozen=True)
class EventView:
    """What one viewer gets to see of an event at one moment."""

    listing: EventListing
    status: AvailabilityStatus
    show_location: bool


class TimePartSerializer(serializers.Serializer):
    """Serializer for TimePart domain value."""

    label = serializers.CharField()
    starts = serializers.TimeField(format="%H:%M")
    ends = serializers.TimeField(format="%H:%M")


class PricingSerializer(serializers.Serializer):
    """Serializer for Pricing domain value."""

    male_standard = serializers.IntegerField(source="male_standard.amount")
    male_premium = serializers.IntegerField(source="male_premium.amount")
    female_standard = serializers.IntegerField(source="female_standard.amount")
    female_premium = serializers.IntegerField(source="female_premium.amount")


class EventSerializer(serializers.Serializer):
    """Serializer for an EventView."""

    id = serializers.CharField(source="listing.event.id")
    title = serializers.CharField(source="listing.event.title")
    description = serializers.CharField(source="listing.event.description")
    date = serializers.SerializerMethodField()
    starts_at = serializers.DateTimeField(source="listing.event.starts_at")
    ends_at = serializers.DateTimeField(source="listing.event.ends_at")
    parts = TimePartSerializer(source="listing.event.parts", many=True)
    location = serializers.SerializerMethodField()
    capacity_male = serializers.IntegerField(source="listing.event.capacity_male.value")
    capacity_female = serializers.IntegerField(source="listing.event.capacity_female.value")
    pricing = PricingSerializer(source="listing.event.pricing")
    application_deadline = serializers.DateTimeField(source="listing.event.application_deadline")
    counts = serializers.SerializerMethodField()
    status = serializers.CharField(source="status.value")
    status_label = serializers.CharField(source="status.label")
    can_apply = serializers.BooleanField(source="status.accepts_applications")

    def get_date(self, view: EventView) -> str:
        return timezone.localtime(view.listing.event.starts_at).date().isoformat()

    def get_location(self, view: EventView) -> str | None:
        return view.listing.event.location if view.show_location else None

    def get_counts(self, view: EventView) -> dict:
        headcount = view.listing.headcount
        return {
            "confirmed_male": headcount.confirmed_male,
            "confirmed_female": headcount.confirmed_female,
            "applied_male": headcount.applied_male,
            "applied_female": headcount.applied_female,
        }


class TimePartInput(serializers.Serializer):
    label = serializers.CharField(max_length=50)
    starts = serializers.TimeField()
    ends = serializers.TimeField()


class EventDraftInput(serializers.Serializer):
    """Shape of an administrator's event form; rules live on EventDraft."""

    title = serializers.CharField(allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    event_date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    capacity_male = serializers.IntegerField()
    capacity_female = serializers.IntegerField()
    price_male_standard = serializers.IntegerField(default=0)
    price_male_premium = serializers.IntegerField(default=0)
    price_female_standard = serializers.IntegerField(default=0)
    price_female_premium = serializers.IntegerField(default=0)
    application_deadline = serializers.DateTimeField()
    parts = TimePartInput(many=True, required=False, default=list)


def draft_from_input(data: dict) -> EventDraft:
    """Build an EventDraft, placing the end time on the next day if it wraps midnight."""
    starts_at = timezone.make_aware(datetime.combine(data["event_date"], data["start_time"]))
    ends_at = timezone.make_aware(datetime.combine(data["event_date"], data["end_time"]))
    if ends_at <= starts_at:
        ends_at += timedelta(days=1)
    return EventDraft(
        title=data["title"],
        description=data["description"],
        starts_at=starts_at,
        ends_at=ends_at,
        location=data["location"] or None,
        capacity_male=data["capacity_male"],
        capacity_female=data["capacity_female"],
        price_male_standard=data["price_male_standard"],
        price_male_premium=data["price_male_premium"],
        price_female_standard=data["price_female_standard"],
        price_female_premium=data["price_female_premium"],
        application_deadline=data["application_deadline"],
        parts=tuple(
            TimePart(label=part["label"], starts=part["starts"], ends=part["ends"])
            for part in data["parts"]
        ),
    )
