"""HTTP handlers for applications."""

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actors import current_actor, current_user_id
from accounts.services.profile_service import ProfileService
from accounts.stores.django_store import DjangoProfileStore
from applications.domain import partition_by_tab, prefill
from applications.handlers.serializers import (
    ApplicationFormSerializer,
    ApplicationSerializer,
    HeadcountSerializer,
    StatusInput,
    TransitionResultSerializer,
    form_from_input,
)
from applications.services.application_service import ApplicationService
from applications.stores.django_store import DjangoApplicationStore
from common.handlers.parsing import parse
from events.services.event_service import parse_event_id
from events.stores.django_store import DjangoEventStore


def application_service() -> ApplicationService:
    return ApplicationService(DjangoApplicationStore(), DjangoEventStore())


class SubmitApplicationView(APIView):
    """Handler for POST /api/events/{event_id}/applications"""

    def post(self, request: Request, event_id: str) -> Response:
        form = form_from_input(parse(ApplicationFormSerializer, request.data))
        application = application_service().submit(event_id, current_user_id(request), form)
        return Response(
            {
                "detail": "Application submitted",
                "application": ApplicationSerializer(application).data,
            },
            status=status.HTTP_201_CREATED,
        )


class PrefillApplicationView(APIView):
    """Handler for GET /api/events/{event_id}/applications/prefill"""

    def get(self, request: Request, event_id: str) -> Response:
        parse_event_id(event_id)
        profile = ProfileService(DjangoProfileStore()).get_profile(current_user_id(request))
        form = prefill(profile, timezone.localdate())
        return Response(ApplicationFormSerializer(form).data)


class MyApplicationsView(APIView):
    """Handler for GET /api/me/applications"""

    def get(self, request: Request) -> Response:
        applications = application_service().list_for_user(current_user_id(request))
        current, completed = partition_by_tab(applications)
        return Response(
            {
                "current": ApplicationSerializer(current, many=True).data,
                "completed": ApplicationSerializer(completed, many=True).data,
            }
        )


class ApplicationDetailView(APIView):
    """Handler for GET /api/applications/{application_id}"""

    def get(self, request: Request, application_id: str) -> Response:
        application = application_service().get_application(
            application_id, current_actor(request)
        )
        return Response(ApplicationSerializer(application).data)


class WithdrawApplicationView(APIView):
    """Handler for POST /api/applications/{application_id}/withdraw"""

    def post(self, request: Request, application_id: str) -> Response:
        application = application_service().withdraw(application_id, current_actor(request))
        return Response(ApplicationSerializer(application).data)


class AdminEventApplicationsView(APIView):
    """Handler for GET /api/admin/events/{event_id}/applications?status="""

    def get(self, request: Request, event_id: str) -> Response:
        result = application_service().list_for_event(
            event_id, current_actor(request), status=request.query_params.get("status")
        )
        return Response(
            {
                "event_id": str(result.event.id),
                "capacity_male": result.event.capacity_male.value,
                "capacity_female": result.event.capacity_female.value,
                "headcount": HeadcountSerializer(result.headcount).data,
                "results": ApplicationSerializer(result.applications, many=True).data,
            }
        )


class AdminApplicationStatusView(APIView):
    """Handler for POST /api/admin/applications/{application_id}/status"""

    def post(self, request: Request, application_id: str) -> Response:
        actor = current_actor(request)
        data = parse(StatusInput, request.data)
        result = application_service().transition_status(application_id, data["status"], actor)
        return Response(TransitionResultSerializer(result).data)
