"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from applications.models import Application
from events.models import Event
from tests.fakes import make_form


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user(db):
    """Create an account; the profile is created by signal."""

    def make(email: str = "member@example.com", is_staff: bool = False):
        return get_user_model().objects.create_user(
            username=email, email=email, password="correct-horse-9", is_staff=is_staff
        )

    return make


@pytest.fixture
def member(make_user):
    return make_user("member@example.com")


@pytest.fixture
def staff(make_user):
    return make_user("staff@example.com", is_staff=True)


@pytest.fixture
def member_client(member) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=member)
    return client


@pytest.fixture
def staff_client(staff) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=staff)
    return client


@pytest.fixture
def make_event_row(db):
    def make(**overrides) -> Event:
        now = timezone.now()
        fields = dict(
            title="Friday Mixer",
            description="Drinks and conversation",
            starts_at=now + timedelta(days=7),
            ends_at=now + timedelta(days=7, hours=3),
            location="Seongsu-dong 12",
            capacity_male=2,
            capacity_female=2,
            price_male_standard=45000,
            price_male_premium=60000,
            price_female_standard=35000,
            price_female_premium=50000,
            application_deadline=now + timedelta(days=6),
        )
        fields.update(overrides)
        return Event.objects.create(**fields)

    return make


@pytest.fixture
def make_application_row(db):
    def make(event: Event, user, status: str = "pending", gender: str = "female", **form):
        snapshot = make_form(gender=gender, **form).validate()
        now = timezone.now()
        return Application.objects.create(
            event=event,
            user=user,
            status=status,
            gender=gender,
            form_snapshot=snapshot.to_dict(),
            applied_at=now,
            updated_at=now,
        )

    return make
