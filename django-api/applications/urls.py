from django.urls import path

from applications.handlers.views import (
    AdminApplicationStatusView,
    AdminEventApplicationsView,
    ApplicationDetailView,
    MyApplicationsView,
    PrefillApplicationView,
    SubmitApplicationView,
    WithdrawApplicationView,
)

urlpatterns = [
    path(
        "events/<str:event_id>/applications",
        SubmitApplicationView.as_view(),
        name="application-submit",
    ),
    path(
        "events/<str:event_id>/applications/prefill",
        PrefillApplicationView.as_view(),
        name="application-prefill",
    ),
    path("me/applications", MyApplicationsView.as_view(), name="my-applications"),
    path(
        "applications/<str:application_id>",
        ApplicationDetailView.as_view(),
        name="application-detail",
    ),
    path(
        "applications/<str:application_id>/withdraw",
        WithdrawApplicationView.as_view(),
        name="application-withdraw",
    ),
    path(
        "admin/events/<str:event_id>/applications",
        AdminEventApplicationsView.as_view(),
        name="admin-event-applications",
    ),
    path(
        "admin/applications/<str:application_id>/status",
        AdminApplicationStatusView.as_view(),
        name="admin-application-status",
    ),
]
