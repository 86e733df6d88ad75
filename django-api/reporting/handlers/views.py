"""HTTP handlers for administrator reports."""

import csv

from django.http import HttpResponse
from django.utils import timezone
from django.utils.http import content_disposition_header
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actors import current_actor
from applications.stores.django_store import DjangoApplicationStore
from events.stores.django_store import DjangoEventStore
from reporting.domain import EXPORT_HEADERS, EventExport
from reporting.handlers.serializers import EventSummarySerializer, ReviewStatsSerializer
from reporting.services.reporting_service import ReportingService
from reviews.handlers.serializers import ReviewSerializer
from reviews.stores.django_store import DjangoReviewStore

APPLIED_AT_FORMAT = "%Y-%m-%d %H:%M"
FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def reporting_service() -> ReportingService:
    return ReportingService(DjangoApplicationStore(), DjangoEventStore(), DjangoReviewStore())


def spreadsheet_safe(value: str) -> str:
    """Quote free text that a spreadsheet would otherwise evaluate as a formula."""
    if value and value.startswith(FORMULA_PREFIXES):
        return f"'{value}"
    return value


def csv_response(export: EventExport) -> HttpResponse:
    response = HttpResponse(content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = content_disposition_header(True, export.filename)
    writer = csv.writer(response)
    writer.writerow(EXPORT_HEADERS)
    for row in export.rows:
        writer.writerow(
            [
                spreadsheet_safe(row.name),
                row.gender,
                row.age,
                spreadsheet_safe(row.phone),
                row.height,
                row.weight,
                row.status,
                timezone.localtime(row.applied_at).strftime(APPLIED_AT_FORMAT),
            ]
        )
    return response


class ApplicationExportView(APIView):
    """Handler for GET /api/admin/events/{event_id}/applications/export"""

    def get(self, request: Request, event_id: str) -> HttpResponse:
        export = reporting_service().export_applications(event_id, current_actor(request))
        return csv_response(export)


class EventSummaryView(APIView):
    """Handler for GET /api/admin/events/{event_id}/summary"""

    def get(self, request: Request, event_id: str) -> Response:
        summary = reporting_service().event_summary(event_id, current_actor(request))
        return Response(EventSummarySerializer(summary).data)


class AdminReviewListView(APIView):
    """Handler for GET /api/admin/reviews?rating=&event="""

    def get(self, request: Request) -> Response:
        reviews = reporting_service().list_reviews(
            current_actor(request),
            rating=request.query_params.get("rating"),
            event_id=request.query_params.get("event"),
        )
        return Response(
            {"count": len(reviews), "results": ReviewSerializer(reviews, many=True).data}
        )


class ReviewStatsView(APIView):
    """Handler for GET /api/admin/reviews/stats?event="""

    def get(self, request: Request) -> Response:
        stats = reporting_service().review_stats(
            current_actor(request), event_id=request.query_params.get("event")
        )
        return Response(ReviewStatsSerializer(stats).data)
