"""In-memory store fakes and builders for service-level tests."""

import uuid
from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from accounts.domain import Photo, PhotoKind, Profile, UserId
from accounts.domain.models import merge_photos
from accounts.stores.interfaces import PhotoStorage, ProfileStore
from applications.domain import Application, ApplicationId, ApplicationStatus, ApplicationForm
from applications.domain.models import SEAT_STATUSES
from applications.stores.interfaces import ApplicationStore
from common.domain.values import Gender
from events.domain import Capacity, Event, EventDraft, EventId, Headcount, Money, Pricing
from events.stores.interfaces import EventStore
from reviews.domain import Review, ReviewId
from reviews.domain.errors import DuplicateReviewError
from reviews.stores.interfaces import ReviewStore

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_event(**overrides) -> Event:
    fields = dict(
        id=EventId(uuid.uuid4()),
        title="Friday Mixer",
        description="Drinks and conversation",
        starts_at=NOW + timedelta(days=7),
        ends_at=NOW + timedelta(days=7, hours=3),
        location="Seongsu-dong 12",
        capacity_male=Capacity(2),
        capacity_female=Capacity(2),
        pricing=Pricing(Money(45000), Money(60000), Money(35000), Money(50000)),
        application_deadline=NOW + timedelta(days=6),
        created_at=NOW - timedelta(days=1),
        updated_at=NOW - timedelta(days=1),
    )
    fields.update(overrides)
    return Event(**fields)


def make_form(**overrides) -> ApplicationForm:
    fields = dict(
        name="Kim Minji",
        gender="female",
        age=29,
        phone="010-1234-5678",
        height=165,
        weight=52,
        ideal_type="Kind and curious",
        photos=("https://cdn.example.com/p/1.jpg",),
        consent=True,
    )
    fields.update(overrides)
    return ApplicationForm(**fields)


def make_profile(user_id: int = 1, **overrides) -> Profile:
    fields = dict(
        id=UserId(user_id),
        email=f"user{user_id}@example.com",
        name="Kim Minji",
        gender=Gender.FEMALE,
        birth_year=1997,
        phone="010-1234-5678",
        height=165,
        weight=52,
        ideal_type="Kind and curious",
        photos=(
            Photo("https://cdn.example.com/f1.jpg", PhotoKind.FACE),
            Photo("https://cdn.example.com/b1.jpg", PhotoKind.BODY),
        ),
        is_admin=False,
        created_at=NOW - timedelta(days=30),
    )
    fields.update(overrides)
    return Profile(**fields)


class InMemoryEventStore(EventStore):
    def __init__(self, *events: Event) -> None:
        self.events: dict[EventId, Event] = {event.id: event for event in events}
        self.locked: list[EventId] = []

    def add(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def list_events(self, starts_from=None, starts_before=None) -> list[Event]:
        events = sorted(self.events.values(), key=lambda e: e.starts_at)
        if starts_from is not None:
            events = [e for e in events if e.starts_at >= starts_from]
        if starts_before is not None:
            events = [e for e in events if e.starts_at < starts_before]
        return events

    def get_event(self, event_id: EventId, for_update: bool = False) -> Event | None:
        if for_update:
            self.locked.append(event_id)
        return self.events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self.events

    def create_event(self, draft: EventDraft, created_by=None) -> Event:
        return self.add(self._from_draft(EventId(uuid.uuid4()), draft))

    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        event = self._from_draft(event_id, draft, created_at=self.events[event_id].created_at)
        return self.add(event)

    def atomic(self):
        return nullcontext()

    @staticmethod
    def _from_draft(event_id: EventId, draft: EventDraft, created_at: datetime = NOW) -> Event:
        return Event(
            id=event_id,
            title=draft.title,
            description=draft.description,
            starts_at=draft.starts_at,
            ends_at=draft.ends_at,
            location=draft.location,
            capacity_male=Capacity(draft.capacity_male),
            capacity_female=Capacity(draft.capacity_female),
            pricing=Pricing(
                Money(draft.price_male_standard),
                Money(draft.price_male_premium),
                Money(draft.price_female_standard),
                Money(draft.price_female_premium),
            ),
            application_deadline=draft.application_deadline,
            created_at=created_at,
            updated_at=NOW,
            parts=draft.parts,
        )


class InMemoryApplicationStore(ApplicationStore):
    def __init__(self, events: InMemoryEventStore) -> None:
        self._events = events
        self.applications: dict[ApplicationId, Application] = {}

    def seed(
        self,
        event: Event,
        user_id: int,
        status: ApplicationStatus,
        gender: str = "female",
        applied_at: datetime = NOW,
    ) -> Application:
        application = Application(
            id=ApplicationId(uuid.uuid4()),
            event_id=event.id,
            user_id=UserId(user_id),
            status=status,
            form_snapshot=make_form(gender=gender).validate(),
            applied_at=applied_at,
            updated_at=applied_at,
        )
        self.applications[application.id] = application
        return application

    def headcount(self, event_id: EventId) -> Headcount:
        counts = dict(confirmed_male=0, confirmed_female=0, applied_male=0, applied_female=0)
        for app in self.applications.values():
            if app.event_id != event_id:
                continue
            gender = app.form_snapshot.gender.value
            if app.status in SEAT_STATUSES:
                counts[f"confirmed_{gender}"] += 1
            if app.status is not ApplicationStatus.CANCELLED:
                counts[f"applied_{gender}"] += 1
        return Headcount(**counts)

    def headcounts(self, event_ids: list[EventId]) -> dict[EventId, Headcount]:
        return {event_id: self.headcount(event_id) for event_id in event_ids}

    def holds_seat(self, event_id: EventId, user_id: UserId) -> bool:
        return any(
            app.event_id == event_id and app.user_id == user_id and app.status in SEAT_STATUSES
            for app in self.applications.values()
        )

    def create_application(self, event_id, user_id, snapshot, applied_at) -> Application:
        application = Application(
            id=ApplicationId(uuid.uuid4()),
            event_id=event_id,
            user_id=user_id,
            status=ApplicationStatus.PENDING,
            form_snapshot=snapshot,
            applied_at=applied_at,
            updated_at=applied_at,
        )
        self.applications[application.id] = application
        return application

    def get_application(self, application_id, for_update: bool = False) -> Application | None:
        return self.applications.get(application_id)

    def update_status(self, application_id, status, updated_at) -> Application:
        application = replace(self.applications[application_id], status=status, updated_at=updated_at)
        self.applications[application_id] = application
        return application

    def find_active(self, event_id, user_id) -> Application | None:
        for app in self.applications.values():
            if (
                app.event_id == event_id
                and app.user_id == user_id
                and app.status is not ApplicationStatus.CANCELLED
            ):
                return app
        return None

    def has_completed(self, event_id, user_id) -> bool:
        return any(
            app.event_id == event_id
            and app.user_id == user_id
            and app.status is ApplicationStatus.COMPLETED
            for app in self.applications.values()
        )

    def list_for_user(self, user_id) -> list[Application]:
        apps = [app for app in self.applications.values() if app.user_id == user_id]
        return sorted(apps, key=lambda a: a.applied_at, reverse=True)

    def list_for_event(self, event_id, status=None) -> list[Application]:
        apps = [
            app
            for app in self.applications.values()
            if app.event_id == event_id and (status is None or app.status is status)
        ]
        return sorted(apps, key=lambda a: a.applied_at, reverse=True)

    def list_confirmed_ended(self, now, user_id=None) -> list[Application]:
        return [
            app
            for app in self.applications.values()
            if app.status is ApplicationStatus.CONFIRMED
            and self._events.events[app.event_id].ends_at <= now
            and (user_id is None or app.user_id == user_id)
        ]

    def atomic(self):
        return nullcontext()


class InMemoryReviewStore(ReviewStore):
    def __init__(self) -> None:
        self.reviews: dict[ReviewId, Review] = {}

    def create_review(self, event_id, user_id, rating, content, created_at) -> Review:
        if self.find_review(event_id, user_id) is not None:
            raise DuplicateReviewError(str(event_id))
        review = Review(
            id=ReviewId(uuid.uuid4()),
            event_id=event_id,
            user_id=user_id,
            rating=rating,
            content=content,
            created_at=created_at,
            updated_at=created_at,
        )
        self.reviews[review.id] = review
        return review

    def get_review(self, review_id) -> Review | None:
        return self.reviews.get(review_id)

    def find_review(self, event_id, user_id) -> Review | None:
        for review in self.reviews.values():
            if review.event_id == event_id and review.user_id == user_id:
                return review
        return None

    def update_review(self, review_id, rating, content, updated_at) -> Review:
        review = replace(
            self.reviews[review_id], rating=rating, content=content, updated_at=updated_at
        )
        self.reviews[review_id] = review
        return review

    def list_reviews(self, rating=None, event_id=None) -> list[Review]:
        reviews = [
            review
            for review in self.reviews.values()
            if (rating is None or review.rating == rating)
            and (event_id is None or review.event_id == event_id)
        ]
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)


class InMemoryProfileStore(ProfileStore):
    def __init__(self, *profiles: Profile) -> None:
        self.profiles = {profile.id: profile for profile in profiles}

    def get_profile(self, user_id: UserId) -> Profile | None:
        return self.profiles.get(user_id)

    def update_profile(self, user_id: UserId, changes: dict) -> Profile:
        changes = dict(changes)
        profile = self.profiles[user_id]
        photos = merge_photos(
            profile.photos,
            face=changes.pop("face_photos", None),
            body=changes.pop("body_photos", None),
        )
        profile = replace(profile, photos=photos, **changes)
        self.profiles[user_id] = profile
        return profile


class InMemoryPhotoStorage(PhotoStorage):
    def __init__(self) -> None:
        self.saved: dict[str, bytes] = {}

    def save(self, name: str, content) -> str:
        self.saved[name] = content
        return f"/media/{name}"
