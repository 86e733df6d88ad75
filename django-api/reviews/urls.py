from django.urls import path

from reviews.handlers.views import EventReviewView, ReviewDetailView

urlpatterns = [
    path("events/<str:event_id>/review", EventReviewView.as_view(), name="event-review"),
    path("reviews/<str:review_id>", ReviewDetailView.as_view(), name="review-detail"),
]
