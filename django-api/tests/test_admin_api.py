"""Integration tests for administrator reports.

Run with: pytest tests/test_admin_api.py -v
"""

import csv
import io
from datetime import timedelta

import pytest
from django.core.management import call_command
from django.utils import timezone

from reviews.models import Review


@pytest.mark.django_db
class TestApplicationExport:
    """Tests for GET /api/admin/events/{id}/applications/export"""

    def test_csv_download(self, staff_client, member, make_event_row, make_application_row):
        event = make_event_row(title="Friday Mixer")
        application = make_application_row(event, member, "confirmed", name="Kim Minji")

        response = staff_client.get(f"/api/admin/events/{event.id}/applications/export")

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/csv")
        assert 'filename="Friday Mixer_applications.csv"' in response["Content-Disposition"]
        rows = list(csv.reader(io.StringIO(response.content.decode("utf-8"))))
        assert rows[0] == [
            "Name", "Gender", "Age", "Phone", "Height", "Weight", "Status", "Applied At",
        ]
        applied_at = timezone.localtime(application.applied_at).strftime("%Y-%m-%d %H:%M")
        assert rows[1] == [
            "Kim Minji", "female", "29", "010-1234-5678", "165", "52", "confirmed", applied_at,
        ]

    def test_formula_cells_are_quoted(
        self, staff_client, member, make_event_row, make_application_row
    ):
        event = make_event_row()
        make_application_row(
            event, member, "pending", name='=HYPERLINK("http://x")', phone="+82-10-1234-5678"
        )

        response = staff_client.get(f"/api/admin/events/{event.id}/applications/export")

        rows = list(csv.reader(io.StringIO(response.content.decode("utf-8"))))
        assert rows[1][0] == '\'=HYPERLINK("http://x")'
        assert rows[1][3] == "'+82-10-1234-5678"

    def test_members_cannot_export(self, member_client, make_event_row):
        event = make_event_row()
        response = member_client.get(f"/api/admin/events/{event.id}/applications/export")
        assert response.status_code == 403

    def test_unknown_event(self, staff_client):
        response = staff_client.get(
            "/api/admin/events/00000000-0000-0000-0000-000000000000/applications/export"
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestEventSummary:
    """Tests for GET /api/admin/events/{id}/summary"""

    def test_summary(self, staff_client, make_user, make_event_row, make_application_row):
        event = make_event_row()
        make_application_row(event, make_user("a@example.com"), "confirmed", "male")
        make_application_row(event, make_user("b@example.com"), "pending")

        response = staff_client.get(f"/api/admin/events/{event.id}/summary")

        assert response.status_code == 200
        assert response.data["confirmed_male"] == 1
        assert response.data["confirmed_female"] == 0
        assert response.data["total_applications"] == 2
        assert response.data["capacity_male"] == 2

    def test_attendees_still_counted_after_completion_sweep(
        self, staff_client, member, make_event_row, make_application_row
    ):
        start = timezone.now() - timedelta(days=2)
        event = make_event_row(
            starts_at=start,
            ends_at=start + timedelta(hours=3),
            application_deadline=start - timedelta(days=1),
        )
        make_application_row(event, member, "confirmed")

        call_command("complete_applications", stdout=io.StringIO())

        response = staff_client.get(f"/api/admin/events/{event.id}/summary")
        assert response.data["confirmed_female"] == 1
        assert response.data["total_confirmed"] == 1


@pytest.mark.django_db
class TestAdminReviews:
    """Tests for GET /api/admin/reviews and /api/admin/reviews/stats"""

    @pytest.fixture
    def reviews(self, make_user, make_event_row):
        event = make_event_row()
        other_event = make_event_row()
        now = timezone.now()
        for index, (target, rating) in enumerate(((event, 5), (event, 4), (other_event, 2))):
            Review.objects.create(
                event=target,
                user=make_user(f"r{index}@example.com"),
                rating=rating,
                content="fine",
                created_at=now,
                updated_at=now,
            )
        return event

    def test_filter_by_rating(self, staff_client, reviews):
        response = staff_client.get("/api/admin/reviews", {"rating": "5"})
        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["results"][0]["rating"] == 5

    def test_filter_by_event(self, staff_client, reviews):
        response = staff_client.get("/api/admin/reviews", {"event": str(reviews.id)})
        assert response.data["count"] == 2

    def test_bad_rating_filter(self, staff_client, reviews):
        response = staff_client.get("/api/admin/reviews", {"rating": "9"})
        assert response.status_code == 400

    def test_stats(self, staff_client, reviews):
        response = staff_client.get("/api/admin/reviews/stats")

        assert response.data["count"] == 3
        assert response.data["average"] == 3.7
        assert response.data["histogram"] == {"1": 0, "2": 1, "3": 0, "4": 1, "5": 1}

    def test_stats_for_event(self, staff_client, reviews):
        response = staff_client.get("/api/admin/reviews/stats", {"event": str(reviews.id)})
        assert response.data["average"] == 4.5

    def test_members_cannot_browse(self, member_client):
        assert member_client.get("/api/admin/reviews").status_code == 403
        assert member_client.get("/api/admin/reviews/stats").status_code == 403
