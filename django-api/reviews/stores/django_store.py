"""Django ORM implementation of the ReviewStore."""

from datetime import datetime

from django.db import IntegrityError, transaction

from accounts.domain import UserId
from events.domain import EventId
from reviews import models
from reviews.domain import Review, ReviewId
from reviews.domain.errors import DuplicateReviewError
from reviews.stores.interfaces import ReviewStore


def review_to_domain(row: models.Review) -> Review:
    return Review(
        id=ReviewId(row.id),
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        rating=row.rating,
        content=row.content,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoReviewStore(ReviewStore):
    """Database-backed review store using Django ORM."""

    def create_review(
        self,
        event_id: EventId,
        user_id: UserId,
        rating: int,
        content: str,
        created_at: datetime,
    ) -> Review:
        try:
            with transaction.atomic():
                row = models.Review.objects.create(
                    event_id=event_id.value,
                    user_id=user_id.value,
                    rating=rating,
                    content=content,
                    created_at=created_at,
                    updated_at=created_at,
                )
        except IntegrityError as e:
            raise DuplicateReviewError(str(event_id)) from e
        return review_to_domain(row)

    def get_review(self, review_id: ReviewId) -> Review | None:
        row = models.Review.objects.filter(id=review_id.value).first()
        return review_to_domain(row) if row else None

    def find_review(self, event_id: EventId, user_id: UserId) -> Review | None:
        row = models.Review.objects.filter(event_id=event_id.value, user_id=user_id.value).first()
        return review_to_domain(row) if row else None

    def update_review(
        self, review_id: ReviewId, rating: int, content: str, updated_at: datetime
    ) -> Review:
        models.Review.objects.filter(id=review_id.value).update(
            rating=rating, content=content, updated_at=updated_at
        )
        return review_to_domain(models.Review.objects.get(id=review_id.value))

    def list_reviews(
        self, rating: int | None = None, event_id: EventId | None = None
    ) -> list[Review]:
        rows = models.Review.objects.all()
        if rating is not None:
            rows = rows.filter(rating=rating)
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        return [review_to_domain(row) for row in rows.order_by("-created_at")]
