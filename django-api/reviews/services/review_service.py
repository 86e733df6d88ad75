"""Review service.

Only attendees whose application reached ``completed`` may review an event,
once per event. Authors may edit their review afterwards.
"""

import logging

from accounts.domain import UserId
from applications.services.application_service import ApplicationService
from applications.stores.interfaces import ApplicationStore
from common.domain.clock import Clock, utcnow
from common.domain.errors import AuthorizationError, ValidationError
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore
from reviews.domain import Review, ReviewId, clean_review_input
from reviews.domain.errors import (
    DuplicateReviewError,
    InvalidReviewIdError,
    NotEligibleError,
    ReviewNotFoundError,
)
from reviews.domain.models import RATING_RANGE
from reviews.stores.interfaces import ReviewStore

logger = logging.getLogger(__name__)


def parse_review_id(review_id: str) -> ReviewId:
    try:
        return ReviewId.from_string(review_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidReviewIdError()


def parse_rating_filter(rating: str | int | None) -> int | None:
    """Turn an optional query value into a star rating, or None for 'all'."""
    if rating in (None, ""):
        return None
    low, high = RATING_RANGE
    try:
        value = int(rating)
    except (TypeError, ValueError):
        value = None
    if value is None or not low <= value <= high:
        raise ValidationError.single("rating", f"Rating must be between {low} and {high}")
    return value


class ReviewService:
    """Service for writing and reading event reviews."""

    def __init__(
        self,
        reviews: ReviewStore,
        applications: ApplicationStore,
        events: EventStore,
        clock: Clock = utcnow,
    ) -> None:
        self._reviews = reviews
        self._applications = applications
        self._events = events
        self._clock = clock
        self._lifecycle = ApplicationService(applications, events, clock=clock)

    def create_review(
        self, event_id: str, user_id: UserId, rating: int | None, content: str | None
    ) -> Review:
        """Create the user's review of an event.

        Raises:
            ValidationError: If rating or content is invalid (checked first).
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotEligibleError: If the user has no completed application for it.
            DuplicateReviewError: If the user already reviewed it.
        """
        rating, content = clean_review_input(rating, content)
        key = parse_event_id(event_id)
        if not self._events.event_exists(key):
            raise EventNotFoundError(event_id)
        self._lifecycle.complete_elapsed(user_id=user_id)
        if not self._applications.has_completed(key, user_id):
            logger.warning(f"User {user_id.value} tried to review event {event_id} without attending")
            raise NotEligibleError(event_id)
        if self._reviews.find_review(key, user_id) is not None:
            raise DuplicateReviewError(event_id)
        review = self._reviews.create_review(key, user_id, rating, content, self._clock())
        logger.info(f"Review {review.id} ({rating}/5) created by user {user_id.value} for event {event_id}")
        return review

    def update_review(
        self, review_id: str, user_id: UserId, rating: int | None, content: str | None
    ) -> Review:
        """Edit a review; only its author may do so.

        Raises:
            ValidationError: If rating or content is invalid.
            InvalidReviewIdError: If the id is malformed.
            ReviewNotFoundError: If the review does not exist.
            AuthorizationError: If the user is not the author.
        """
        rating, content = clean_review_input(rating, content)
        key = parse_review_id(review_id)
        review = self._reviews.get_review(key)
        if review is None:
            raise ReviewNotFoundError(review_id)
        if review.user_id != user_id:
            logger.warning(f"User {user_id.value} attempted to edit review {review_id}")
            raise AuthorizationError("Only the author can edit this review")
        updated = self._reviews.update_review(key, rating, content, self._clock())
        logger.info(f"Review {review_id} updated by user {user_id.value}")
        return updated

    def get_user_review(self, event_id: str, user_id: UserId) -> Review | None:
        """Return the user's review of an event, or None if they have not written one."""
        return self._reviews.find_review(parse_event_id(event_id), user_id)

    def can_review(self, event_id: str, user_id: UserId) -> bool:
        """True once the user holds a completed application, counting events that just ended."""
        key = parse_event_id(event_id)
        self._lifecycle.complete_elapsed(user_id=user_id)
        return self._applications.has_completed(key, user_id)

    def list_reviews(
        self, rating: str | int | None = None, event_id: str | None = None
    ) -> list[Review]:
        """Return reviews newest first, optionally by star rating and event."""
        key = parse_event_id(event_id) if event_id else None
        return self._reviews.list_reviews(rating=parse_rating_filter(rating), event_id=key)
