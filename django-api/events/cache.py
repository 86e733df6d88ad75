"""Cache keys for the event catalog.

Only the event records are cached; headcounts and availability are
recomputed on every request.
"""

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_detail_key(event_id) -> str:
    return f"events:{event_id}"


def cache_timeout() -> int:
    return settings.EVENT_CACHE_TIMEOUT


def invalidate_event(event_id) -> None:
    cache.delete_many([EVENT_LIST_KEY, event_detail_key(event_id)])
