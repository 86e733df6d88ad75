"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from accounts.domain import UserId
from applications.domain import Application, ApplicationId, ApplicationStatus, FormSnapshot
from events.domain import EventId
from events.stores.interfaces import ParticipationStore


class ApplicationStore(ParticipationStore):
    """Interface for application persistence operations."""

    @abstractmethod
    def create_application(
        self,
        event_id: EventId,
        user_id: UserId,
        snapshot: FormSnapshot,
        applied_at: datetime,
    ) -> Application:
        """Persist a new pending application.

        Raises:
            DuplicateApplicationError: If the user already holds a
                non-cancelled application for the event.
        """
        ...

    @abstractmethod
    def get_application(
        self, application_id: ApplicationId, for_update: bool = False
    ) -> Application | None:
        """Return an application by ID, or None if not found.

        With ``for_update`` the row stays locked until the surrounding
        ``atomic()`` block ends.
        """
        ...

    @abstractmethod
    def update_status(
        self, application_id: ApplicationId, status: ApplicationStatus, updated_at: datetime
    ) -> Application:
        """Set the status of an existing application."""
        ...

    @abstractmethod
    def find_active(self, event_id: EventId, user_id: UserId) -> Application | None:
        """Return the user's non-cancelled application for the event, if any."""
        ...

    @abstractmethod
    def has_completed(self, event_id: EventId, user_id: UserId) -> bool:
        """Check if the user holds a completed application for the event."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[Application]:
        """Return a user's applications, newest first."""
        ...

    @abstractmethod
    def list_for_event(
        self, event_id: EventId, status: ApplicationStatus | None = None
    ) -> list[Application]:
        """Return an event's applications, newest first, optionally by status."""
        ...

    @abstractmethod
    def list_confirmed_ended(
        self, now: datetime, user_id: UserId | None = None
    ) -> list[Application]:
        """Return confirmed applications whose event ended at or before ``now``."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager wrapping a single transaction."""
        ...
