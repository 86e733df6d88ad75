"""Reporting service - administrator read models over applications and reviews."""

import logging

from accounts.domain import Actor
from applications.stores.interfaces import ApplicationStore
from common.domain.errors import AuthorizationError
from events.domain import Event
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore
from reporting.domain import EventExport, EventSummary, ExportRow
from reviews.domain import Review, ReviewStats, summarize
from reviews.services.review_service import parse_rating_filter
from reviews.stores.interfaces import ReviewStore

logger = logging.getLogger(__name__)


class ReportingService:
    """Service for administrator exports and statistics."""

    def __init__(
        self,
        applications: ApplicationStore,
        events: EventStore,
        reviews: ReviewStore,
    ) -> None:
        self._applications = applications
        self._events = events
        self._reviews = reviews

    def export_applications(self, event_id: str, actor: Actor) -> EventExport:
        """Return every application of an event as export rows, newest first.

        Raises:
            AuthorizationError: If the actor is not an administrator.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        self._require_admin(actor, f"export applications of event {event_id}")
        event = self._get_event(event_id)
        rows = [
            ExportRow.from_application(application)
            for application in self._applications.list_for_event(event.id)
        ]
        logger.info(f"Admin {actor.user_id.value} exported {len(rows)} applications of event {event_id}")
        return EventExport(event=event, rows=rows)

    def event_summary(self, event_id: str, actor: Actor) -> EventSummary:
        """Confirmed counts per gender next to capacity for one event."""
        self._require_admin(actor, f"view summary of event {event_id}")
        event = self._get_event(event_id)
        return EventSummary(
            event=event,
            headcount=self._applications.headcount(event.id),
            total_applications=len(self._applications.list_for_event(event.id)),
        )

    def list_reviews(
        self, actor: Actor, rating: str | int | None = None, event_id: str | None = None
    ) -> list[Review]:
        """Return reviews newest first for the administrator browser.

        Raises:
            AuthorizationError: If the actor is not an administrator.
            ValidationError: If the rating filter is not 1-5.
            InvalidEventIdError: If the event filter is not a valid UUID.
        """
        self._require_admin(actor, "list reviews")
        key = parse_event_id(event_id) if event_id else None
        return self._reviews.list_reviews(rating=parse_rating_filter(rating), event_id=key)

    def review_stats(self, actor: Actor, event_id: str | None = None) -> ReviewStats:
        """Count, average and 1-5 histogram, over all reviews or one event's."""
        self._require_admin(actor, "view review statistics")
        key = parse_event_id(event_id) if event_id else None
        return summarize(self._reviews.list_reviews(event_id=key))

    def _get_event(self, event_id: str) -> Event:
        event = self._events.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _require_admin(self, actor: Actor, action: str) -> None:
        if not actor.is_admin:
            logger.warning(f"Non-admin user {actor.user_id.value} attempted to {action}")
            raise AuthorizationError("Administrator privileges required")
