"""Domain models for post-event reviews."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self
from uuid import UUID

from accounts.domain import UserId
from common.domain.errors import FieldErrors
from events.domain import EventId

RATING_RANGE = (1, 5)
CONTENT_MAX_LENGTH = 300


@dataclass(frozen=True)
class ReviewId:
    """Unique identifier for a Review."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Review:
    """Domain representation of a Review."""

    id: ReviewId
    event_id: EventId
    user_id: UserId
    rating: int
    content: str
    created_at: datetime
    updated_at: datetime


def clean_review_input(rating: int | None, content: str | None) -> tuple[int, str]:
    """Validate a rating and comment, returning the stripped content.

    Raises:
        ValidationError: If the rating is outside 1-5 or the content is
            empty or longer than 300 characters.
    """
    errors = FieldErrors()
    low, high = RATING_RANGE
    if rating is None or isinstance(rating, bool) or not low <= rating <= high:
        errors.add("rating", f"Rating must be between {low} and {high}")
    content = (content or "").strip()
    if not content:
        errors.add("content", "Review content is required")
    elif len(content) > CONTENT_MAX_LENGTH:
        errors.add("content", f"Review must be at most {CONTENT_MAX_LENGTH} characters")
    errors.raise_if_any()
    return rating, content
