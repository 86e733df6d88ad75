"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from accounts.domain import UserId
from events.domain import Event, EventDraft, EventId, Headcount


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(
        self, starts_from: datetime | None = None, starts_before: datetime | None = None
    ) -> list[Event]:
        """Return events ordered by starts_at ascending, optionally in a range."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId, for_update: bool = False) -> Event | None:
        """Return an event by ID, or None if not found.

        With ``for_update`` the event row stays locked until the surrounding
        ``atomic()`` block ends.
        """
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft, created_by: UserId | None = None) -> Event:
        """Persist a new event built from a validated draft."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        """Replace an existing event's fields and parts with the draft."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager wrapping a single transaction."""
        ...


class ParticipationStore(ABC):
    """Read-side view of applications needed by the event catalog."""

    @abstractmethod
    def headcount(self, event_id: EventId) -> Headcount:
        """Return confirmed and applied counts per gender for one event."""
        ...

    @abstractmethod
    def headcounts(self, event_ids: list[EventId]) -> dict[EventId, Headcount]:
        """Return headcounts for many events; missing events count zero."""
        ...

    @abstractmethod
    def holds_seat(self, event_id: EventId, user_id: UserId) -> bool:
        """Check if the user has a confirmed or completed application."""
        ...
