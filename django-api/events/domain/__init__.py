from events.domain.availability import AvailabilityStatus, resolve_status
from events.domain.models import Event, EventDraft, EventListing, Headcount
from events.domain.value_objects import (
    Capacity,
    EventId,
    Money,
    Pricing,
    TicketTier,
    TimePart,
)

__all__ = [
    "Event",
    "EventDraft",
    "EventListing",
    "Headcount",
    "AvailabilityStatus",
    "resolve_status",
    "EventId",
    "Money",
    "Capacity",
    "Pricing",
    "TicketTier",
    "TimePart",
]
