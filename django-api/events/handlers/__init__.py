from events.handlers.views import (
    AdminEventDetailView,
    AdminEventListView,
    EventDetailView,
    EventListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "AdminEventListView",
    "AdminEventDetailView",
]
