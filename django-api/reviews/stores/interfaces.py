"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from accounts.domain import UserId
from events.domain import EventId
from reviews.domain import Review, ReviewId


class ReviewStore(ABC):
    """Interface for review persistence operations."""

    @abstractmethod
    def create_review(
        self,
        event_id: EventId,
        user_id: UserId,
        rating: int,
        content: str,
        created_at: datetime,
    ) -> Review:
        """Persist a new review.

        Raises:
            DuplicateReviewError: If the user already reviewed the event.
        """
        ...

    @abstractmethod
    def get_review(self, review_id: ReviewId) -> Review | None:
        """Return a review by ID, or None if not found."""
        ...

    @abstractmethod
    def find_review(self, event_id: EventId, user_id: UserId) -> Review | None:
        """Return the user's review of an event, or None."""
        ...

    @abstractmethod
    def update_review(
        self, review_id: ReviewId, rating: int, content: str, updated_at: datetime
    ) -> Review:
        """Replace rating and content, leaving created_at untouched."""
        ...

    @abstractmethod
    def list_reviews(
        self, rating: int | None = None, event_id: EventId | None = None
    ) -> list[Review]:
        """Return reviews newest first, optionally filtered."""
        ...
