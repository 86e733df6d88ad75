"""HTTP handlers for reviews."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actors import current_user_id
from applications.stores.django_store import DjangoApplicationStore
from common.handlers.parsing import parse
from events.stores.django_store import DjangoEventStore
from reviews.handlers.serializers import ReviewInput, ReviewSerializer
from reviews.services.review_service import ReviewService
from reviews.stores.django_store import DjangoReviewStore


def review_service() -> ReviewService:
    return ReviewService(DjangoReviewStore(), DjangoApplicationStore(), DjangoEventStore())


class EventReviewView(APIView):
    """Handler for GET/POST /api/events/{event_id}/review"""

    def get(self, request: Request, event_id: str) -> Response:
        service = review_service()
        user_id = current_user_id(request)
        review = service.get_user_review(event_id, user_id)
        return Response(
            {
                "can_review": service.can_review(event_id, user_id),
                "review": ReviewSerializer(review).data if review else None,
            }
        )

    def post(self, request: Request, event_id: str) -> Response:
        data = parse(ReviewInput, request.data)
        review = review_service().create_review(
            event_id, current_user_id(request), data["rating"], data["content"]
        )
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class ReviewDetailView(APIView):
    """Handler for PUT /api/reviews/{review_id}"""

    def put(self, request: Request, review_id: str) -> Response:
        data = parse(ReviewInput, request.data)
        review = review_service().update_review(
            review_id, current_user_id(request), data["rating"], data["content"]
        )
        return Response(ReviewSerializer(review).data)
