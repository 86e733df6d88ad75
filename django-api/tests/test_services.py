"""Unit tests for EventService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import timedelta

import pytest

from accounts.domain import Actor, UserId
from applications.domain import ApplicationStatus
from common.domain.errors import AuthorizationError, ValidationError
from events.domain import AvailabilityStatus, EventDraft
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.services.event_service import EventService
from tests.fakes import NOW, FakeClock, InMemoryApplicationStore, InMemoryEventStore, make_event

ADMIN = Actor(UserId(99), is_admin=True)
MEMBER = Actor(UserId(1))


def make_draft(**overrides) -> EventDraft:
    fields = dict(
        title="Saturday Wine Night",
        description="",
        starts_at=NOW + timedelta(days=3),
        ends_at=NOW + timedelta(days=3, hours=4),
        location="Hannam-dong 7",
        capacity_male=8,
        capacity_female=8,
        price_male_standard=45000,
        price_male_premium=60000,
        price_female_standard=35000,
        price_female_premium=50000,
        application_deadline=NOW + timedelta(days=2),
    )
    fields.update(overrides)
    return EventDraft(**fields)


@pytest.fixture
def events() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def applications(events) -> InMemoryApplicationStore:
    return InMemoryApplicationStore(events)


@pytest.fixture
def service(events, applications) -> EventService:
    return EventService(events, applications, clock=FakeClock())


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, service):
        with pytest.raises(EventNotFoundError):
            service.get_event("00000000-0000-0000-0000-000000000000")

    def test_get_event_returns_event(self, service, events):
        event = events.add(make_event())
        assert service.get_event(str(event.id)) == event

    def test_list_events_within_window(self, service, events):
        late = events.add(make_event())
        early = events.add(
            make_event(
                starts_at=NOW + timedelta(days=1),
                ends_at=NOW + timedelta(days=1, hours=3),
                application_deadline=NOW,
            )
        )

        assert service.list_events() == [early, late]
        assert service.list_events(starts_from=NOW + timedelta(days=2)) == [late]
        assert service.list_events(starts_before=NOW + timedelta(days=2)) == [early]

    def test_listing_status_reflects_confirmed_headcount(self, service, events, applications):
        event = events.add(make_event())
        for user_id, gender in ((1, "male"), (2, "male"), (3, "female"), (4, "female")):
            applications.seed(event, user_id, ApplicationStatus.CONFIRMED, gender=gender)

        [item] = service.list_listings([event])

        assert item.headcount.total_confirmed == 4
        assert service.status_of(item) is AvailabilityStatus.WAIT

    def test_pending_applications_do_not_consume_capacity(self, service, events, applications):
        event = events.add(make_event())
        for user_id in range(1, 6):
            applications.seed(event, user_id, ApplicationStatus.PENDING)

        item = service.get_listing(event)

        assert item.remaining_female == 2
        assert service.status_of(item) is AvailabilityStatus.OPEN


class TestLocationVisibility:
    def test_hidden_from_anonymous_viewers(self, service, events):
        assert not service.can_see_location(events.add(make_event()), None)

    def test_hidden_from_pending_applicants(self, service, events, applications):
        event = events.add(make_event())
        applications.seed(event, MEMBER.user_id.value, ApplicationStatus.PENDING)
        assert not service.can_see_location(event, MEMBER)

    def test_shown_to_confirmed_applicants(self, service, events, applications):
        event = events.add(make_event())
        applications.seed(event, MEMBER.user_id.value, ApplicationStatus.CONFIRMED)
        assert service.can_see_location(event, MEMBER)

    def test_shown_to_admins(self, service, events):
        assert service.can_see_location(events.add(make_event()), ADMIN)


class TestEventAdministration:
    def test_create_requires_admin(self, service):
        with pytest.raises(AuthorizationError):
            service.create_event(make_draft(), MEMBER)

    def test_create_persists_draft(self, service, events):
        event = service.create_event(make_draft(), ADMIN)
        assert events.event_exists(event.id)
        assert event.capacity_male.value == 8

    def test_create_reports_every_invalid_field(self, service):
        draft = make_draft(title=" ", capacity_female=0, price_male_premium=-1)

        with pytest.raises(ValidationError) as exc:
            service.create_event(draft, ADMIN)

        assert set(exc.value.fields) == {"title", "capacity_female", "price_male_premium"}

    def test_deadline_after_start_is_rejected(self, service):
        draft = make_draft(application_deadline=NOW + timedelta(days=4))
        with pytest.raises(ValidationError) as exc:
            service.create_event(draft, ADMIN)
        assert "application_deadline" in exc.value.fields

    def test_update_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.update_event("00000000-0000-0000-0000-000000000000", make_draft(), ADMIN)

    def test_update_replaces_fields(self, service, events):
        event = events.add(make_event())
        updated = service.update_event(str(event.id), make_draft(title="Renamed"), ADMIN)
        assert updated.id == event.id
        assert updated.title == "Renamed"
