"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the project exception handler
- Never contain business logic
- Never expose internal error details
"""

from datetime import datetime, time, timedelta

from django.core.cache import cache
from django.utils import timezone
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actors import current_actor
from applications.stores.django_store import DjangoApplicationStore
from common.handlers.parsing import parse
from events.cache import EVENT_LIST_KEY, cache_timeout, event_detail_key
from events.handlers.serializers import (
    EventDraftInput,
    EventSerializer,
    EventView,
    draft_from_input,
)
from events.services.event_service import EventService, parse_event_id
from events.stores.django_store import DjangoEventStore


def event_service() -> EventService:
    return EventService(DjangoEventStore(), DjangoApplicationStore())


class DateRangeInput(serializers.Serializer):
    """Optional local-date window for the calendar (``to`` inclusive)."""

    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)


def _local_midnight(day) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min))


def _optional_actor(request: Request):
    return current_actor(request) if request.user.is_authenticated else None


class EventListView(APIView):
    """Handler for GET /api/events?from=YYYY-MM-DD&to=YYYY-MM-DD"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        window = parse(
            DateRangeInput,
            {
                key: value
                for key, value in (
                    ("date_from", request.query_params.get("from")),
                    ("date_to", request.query_params.get("to")),
                )
                if value
            },
        )
        service = event_service()
        if window:
            # Only the unfiltered catalog is cached.
            events = service.list_events(
                starts_from=(
                    _local_midnight(window["date_from"]) if "date_from" in window else None
                ),
                starts_before=(
                    _local_midnight(window["date_to"] + timedelta(days=1))
                    if "date_to" in window
                    else None
                ),
            )
        else:
            events = cache.get(EVENT_LIST_KEY)
            if events is None:
                events = service.list_events()
                cache.set(EVENT_LIST_KEY, events, cache_timeout())

        actor = _optional_actor(request)
        views = [
            EventView(
                listing=listing,
                status=service.status_of(listing),
                show_location=service.can_see_location(listing.event, actor),
            )
            for listing in service.list_listings(events)
        ]
        return Response(
            {"count": len(views), "results": EventSerializer(views, many=True).data}
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    permission_classes = [AllowAny]

    def get(self, request: Request, event_id: str) -> Response:
        key = parse_event_id(event_id)
        service = event_service()
        event = cache.get(event_detail_key(key))
        if event is None:
            event = service.get_event(event_id)
            cache.set(event_detail_key(key), event, cache_timeout())

        listing = service.get_listing(event)
        view = EventView(
            listing=listing,
            status=service.status_of(listing),
            show_location=service.can_see_location(event, _optional_actor(request)),
        )
        return Response(EventSerializer(view).data)


class AdminEventListView(APIView):
    """Handler for POST /api/admin/events"""

    def post(self, request: Request) -> Response:
        draft = draft_from_input(parse(EventDraftInput, request.data))
        service = event_service()
        event = service.create_event(draft, current_actor(request))
        listing = service.get_listing(event)
        view = EventView(listing=listing, status=service.status_of(listing), show_location=True)
        return Response(EventSerializer(view).data, status=status.HTTP_201_CREATED)


class AdminEventDetailView(APIView):
    """Handler for PUT /api/admin/events/{event_id}"""

    def put(self, request: Request, event_id: str) -> Response:
        draft = draft_from_input(parse(EventDraftInput, request.data))
        service = event_service()
        event = service.update_event(event_id, draft, current_actor(request))
        listing = service.get_listing(event)
        view = EventView(listing=listing, status=service.status_of(listing), show_location=True)
        return Response(EventSerializer(view).data)
