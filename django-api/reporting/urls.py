from django.urls import path

from reporting.handlers.views import (
    AdminReviewListView,
    ApplicationExportView,
    EventSummaryView,
    ReviewStatsView,
)

urlpatterns = [
    path(
        "admin/events/<str:event_id>/applications/export",
        ApplicationExportView.as_view(),
        name="admin-application-export",
    ),
    path(
        "admin/events/<str:event_id>/summary",
        EventSummaryView.as_view(),
        name="admin-event-summary",
    ),
    path("admin/reviews", AdminReviewListView.as_view(), name="admin-reviews"),
    path("admin/reviews/stats", ReviewStatsView.as_view(), name="admin-review-stats"),
]
