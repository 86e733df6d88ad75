"""Domain models for the application lifecycle.

Django ORM models are in applications/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Self
from uuid import UUID

from accounts.domain import UserId
from common.domain.values import Gender
from events.domain import EventId, TicketTier


@dataclass(frozen=True)
class ApplicationId:
    """Unique identifier for an Application."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class ApplicationStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    WAITLIST = "waitlist"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return not TRANSITIONS[self]

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    def can_move_to(self, target: "ApplicationStatus") -> bool:
        return target in TRANSITIONS[self]


TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset(
        {ApplicationStatus.CONFIRMED, ApplicationStatus.WAITLIST, ApplicationStatus.CANCELLED}
    ),
    ApplicationStatus.CONFIRMED: frozenset(
        {ApplicationStatus.COMPLETED, ApplicationStatus.CANCELLED}
    ),
    ApplicationStatus.WAITLIST: frozenset(
        {ApplicationStatus.CONFIRMED, ApplicationStatus.CANCELLED}
    ),
    ApplicationStatus.CANCELLED: frozenset(),
    ApplicationStatus.COMPLETED: frozenset(),
}

# Targets an administrator may choose; completion only happens by sweep.
ADMIN_TARGETS = frozenset(
    {ApplicationStatus.CONFIRMED, ApplicationStatus.WAITLIST, ApplicationStatus.CANCELLED}
)

STATUS_LABELS: dict[ApplicationStatus, str] = {
    ApplicationStatus.PENDING: "Pending review",
    ApplicationStatus.CONFIRMED: "Confirmed",
    ApplicationStatus.WAITLIST: "Waitlisted",
    ApplicationStatus.CANCELLED: "Cancelled",
    ApplicationStatus.COMPLETED: "Attended",
}

CURRENT_STATUSES = frozenset(
    {ApplicationStatus.PENDING, ApplicationStatus.WAITLIST, ApplicationStatus.CONFIRMED}
)
SEAT_STATUSES = frozenset({ApplicationStatus.CONFIRMED, ApplicationStatus.COMPLETED})


class ParticipationType(Enum):
    PART1 = "part1"
    PART2 = "part2"
    BOTH = "both"


@dataclass(frozen=True)
class FormSnapshot:
    """The applicant's details exactly as submitted."""

    name: str
    gender: Gender
    age: int
    phone: str
    height: int
    weight: int
    photos: tuple[str, ...]
    ideal_type: str
    participation_type: ParticipationType | None = None
    ticket_tier: TicketTier | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "gender": self.gender.value,
            "age": self.age,
            "phone": self.phone,
            "height": self.height,
            "weight": self.weight,
            "photos": list(self.photos),
            "ideal_type": self.ideal_type,
            "participation_type": self.participation_type.value if self.participation_type else None,
            "ticket_tier": self.ticket_tier.value if self.ticket_tier else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        participation_type = data.get("participation_type")
        ticket_tier = data.get("ticket_tier")
        return cls(
            name=data["name"],
            gender=Gender(data["gender"]),
            age=data["age"],
            phone=data["phone"],
            height=data["height"],
            weight=data["weight"],
            photos=tuple(data["photos"]),
            ideal_type=data["ideal_type"],
            participation_type=ParticipationType(participation_type) if participation_type else None,
            ticket_tier=TicketTier(ticket_tier) if ticket_tier else None,
        )


@dataclass(frozen=True)
class Application:
    """Domain representation of an Application."""

    id: ApplicationId
    event_id: EventId
    user_id: UserId
    status: ApplicationStatus
    form_snapshot: FormSnapshot
    applied_at: datetime
    updated_at: datetime


def partition_by_tab(
    applications: list[Application],
) -> tuple[list[Application], list[Application]]:
    """Split into the "current" and "completed" tabs; cancelled ones show in neither."""
    current = [app for app in applications if app.status in CURRENT_STATUSES]
    completed = [app for app in applications if app.status is ApplicationStatus.COMPLETED]
    return current, completed
