"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache
from django.utils import timezone

from events.cache import EVENT_LIST_KEY, event_detail_key
from events.models import TimePart


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, api_client, make_event_row):
        event = make_event_row(title="Before")
        api_client.get("/api/events")
        assert cache.get(EVENT_LIST_KEY) is not None

        event.title = "After"
        event.save()

        assert cache.get(EVENT_LIST_KEY) is None
        assert api_client.get("/api/events").data["results"][0]["title"] == "After"

    def test_event_save_invalidates_detail_cache(self, api_client, make_event_row):
        event = make_event_row()
        api_client.get(f"/api/events/{event.id}")
        assert cache.get(event_detail_key(event.id)) is not None

        event.save()

        assert cache.get(event_detail_key(event.id)) is None

    def test_time_part_save_invalidates_detail_cache(self, api_client, make_event_row):
        event = make_event_row()
        api_client.get(f"/api/events/{event.id}")

        TimePart.objects.create(event=event, label="Part 1", starts="20:00", ends="23:00")

        assert cache.get(event_detail_key(event.id)) is None
        assert len(api_client.get(f"/api/events/{event.id}").data["parts"]) == 1

    def test_stale_refill_before_commit_is_dropped(
        self, make_event_row, django_capture_on_commit_callbacks
    ):
        event = make_event_row()

        with django_capture_on_commit_callbacks(execute=True):
            event.title = "Renamed"
            event.save()
            cache.set(EVENT_LIST_KEY, ["stale"])
            cache.set(event_detail_key(event.id), "stale")

        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(event_detail_key(event.id)) is None

    def test_event_delete_invalidates_caches(self, api_client, make_event_row):
        event = make_event_row()
        event_id = event.id
        api_client.get("/api/events")
        api_client.get(f"/api/events/{event_id}")

        event.delete()

        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(event_detail_key(event_id)) is None


    def test_date_filtered_list_is_not_cached(self, api_client, make_event_row):
        event = make_event_row()
        day = timezone.localtime(event.starts_at).date()

        response = api_client.get("/api/events", {"from": day.isoformat()})

        assert response.data["count"] == 1
        assert cache.get(EVENT_LIST_KEY) is None

@pytest.mark.django_db
class TestCountsAreNeverCached:
    def test_confirmation_shows_up_despite_cached_event(
        self, api_client, member, make_event_row, make_application_row
    ):
        event = make_event_row()
        api_client.get(f"/api/events/{event.id}")

        make_application_row(event, member, "confirmed")

        response = api_client.get(f"/api/events/{event.id}")
        assert response.data["counts"]["confirmed_female"] == 1
