"""Domain errors for reviews."""

from common.domain.errors import DomainError, ErrorCode


class ReviewNotFoundError(DomainError):
    """Raised when a review is not found."""

    def __init__(self, review_id: str) -> None:
        super().__init__(
            code=ErrorCode.REVIEW_NOT_FOUND,
            message="Review not found",
        )
        self.review_id = review_id


class InvalidReviewIdError(DomainError):
    """Raised when a review ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REVIEW_ID,
            message="Invalid review ID format",
        )


class NotEligibleError(DomainError):
    """Raised when the user has not completed the event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_ELIGIBLE,
            message="Only attendees of a completed event can review it",
        )
        self.event_id = event_id


class DuplicateReviewError(DomainError):
    """Raised when the user already reviewed the event; edit it instead."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REVIEW,
            message="You have already reviewed this event",
        )
        self.event_id = event_id
