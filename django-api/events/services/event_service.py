"""Event service - all catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import datetime

from accounts.domain import Actor
from common.domain.clock import Clock, utcnow
from common.domain.errors import AuthorizationError
from events.domain import (
    AvailabilityStatus,
    Event,
    EventDraft,
    EventId,
    EventListing,
    resolve_status,
)
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore, ParticipationStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    """Parse a raw event ID.

    Raises:
        InvalidEventIdError: If the event_id is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidEventIdError()


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        participation: ParticipationStore,
        clock: Clock = utcnow,
    ) -> None:
        self._store = store
        self._participation = participation
        self._clock = clock

    def list_events(
        self, starts_from: datetime | None = None, starts_before: datetime | None = None
    ) -> list[Event]:
        """Return events ordered by start time."""
        return self._store.list_events(starts_from=starts_from, starts_before=starts_before)

    def list_listings(self, events: list[Event]) -> list[EventListing]:
        """Pair events with fresh headcounts."""
        headcounts = self._participation.headcounts([event.id for event in events])
        return [EventListing(event=event, headcount=headcounts[event.id]) for event in events]

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_listing(self, event: Event) -> EventListing:
        return EventListing(event=event, headcount=self._participation.headcount(event.id))

    def status_of(self, listing: EventListing) -> AvailabilityStatus:
        """Resolve availability against the current time."""
        return resolve_status(listing, self._clock())

    def can_see_location(self, event: Event, actor: Actor | None) -> bool:
        """Location is withheld until the viewer holds a seat, except for admins."""
        if actor is None:
            return False
        return actor.is_admin or self._participation.holds_seat(event.id, actor.user_id)

    def create_event(self, draft: EventDraft, actor: Actor) -> Event:
        """Create an event from an administrator's draft.

        Raises:
            AuthorizationError: If the actor is not an administrator.
            ValidationError: If the draft is invalid.
        """
        self._require_admin(actor, "create an event")
        draft.validate()
        event = self._store.create_event(draft, created_by=actor.user_id)
        logger.info(f"Event {event.id} '{event.title}' created by user {actor.user_id.value}")
        return event

    def update_event(self, event_id: str, draft: EventDraft, actor: Actor) -> Event:
        """Replace an event's details.

        Raises:
            AuthorizationError: If the actor is not an administrator.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            ValidationError: If the draft is invalid.
        """
        self._require_admin(actor, "update an event")
        key = parse_event_id(event_id)
        draft.validate()
        if not self._store.event_exists(key):
            raise EventNotFoundError(event_id)
        event = self._store.update_event(key, draft)
        logger.info(f"Event {event.id} updated by user {actor.user_id.value}")
        return event

    @staticmethod
    def _require_admin(actor: Actor, action: str) -> None:
        if not actor.is_admin:
            logger.warning(f"Non-admin user {actor.user_id.value} attempted to {action}")
            raise AuthorizationError("Administrator privileges required")
