"""Availability of an event for new applications.

Derived on every request from the deadline and confirmed headcount; never
stored.
"""

from datetime import datetime
from enum import Enum

from events.domain.models import EventListing


class AvailabilityStatus(Enum):
    OPEN = "OPEN"
    WAIT = "WAIT"
    CLOSED = "CLOSED"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @property
    def accepts_applications(self) -> bool:
        return self is not AvailabilityStatus.CLOSED


STATUS_LABELS: dict[AvailabilityStatus, str] = {
    AvailabilityStatus.OPEN: "Available",
    AvailabilityStatus.WAIT: "Waitlist",
    AvailabilityStatus.CLOSED: "Sold Out",
}


def resolve_status(listing: EventListing, now: datetime) -> AvailabilityStatus:
    """Resolve OPEN / WAIT / CLOSED for an event at ``now``.

    Past the deadline the event is CLOSED whatever its capacity. Before it,
    the event goes to WAIT only when both genders are out of room; one
    exhausted gender alone still leaves the event OPEN.
    """
    if now > listing.event.application_deadline:
        return AvailabilityStatus.CLOSED
    if listing.remaining_male <= 0 and listing.remaining_female <= 0:
        return AvailabilityStatus.WAIT
    return AvailabilityStatus.OPEN
