"""Django ORM implementation of the ApplicationStore."""

from datetime import datetime

from django.db import IntegrityError, transaction
from django.db.models import Count, Q

from accounts.domain import UserId
from applications import models
from applications.domain import Application, ApplicationId, ApplicationStatus, FormSnapshot
from applications.domain.errors import DuplicateApplicationError
from applications.domain.models import SEAT_STATUSES
from applications.stores.interfaces import ApplicationStore
from events.domain import EventId, Headcount

CONFIRMED = models.Application.Status.CONFIRMED
CANCELLED = models.Application.Status.CANCELLED
MALE = models.Application.Gender.MALE
FEMALE = models.Application.Gender.FEMALE

SEAT_VALUES = [status.value for status in SEAT_STATUSES]

# Completed applications keep the seat they were confirmed into.
HEADCOUNT_AGGREGATES = {
    "confirmed_male": Count("id", filter=Q(status__in=SEAT_VALUES, gender=MALE)),
    "confirmed_female": Count("id", filter=Q(status__in=SEAT_VALUES, gender=FEMALE)),
    "applied_male": Count("id", filter=~Q(status=CANCELLED) & Q(gender=MALE)),
    "applied_female": Count("id", filter=~Q(status=CANCELLED) & Q(gender=FEMALE)),
}


def application_to_domain(row: models.Application) -> Application:
    return Application(
        id=ApplicationId(row.id),
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        status=ApplicationStatus(row.status),
        form_snapshot=FormSnapshot.from_dict(row.form_snapshot),
        applied_at=row.applied_at,
        updated_at=row.updated_at,
    )


class DjangoApplicationStore(ApplicationStore):
    """Database-backed application store using Django ORM."""

    def headcount(self, event_id: EventId) -> Headcount:
        counts = models.Application.objects.filter(event_id=event_id.value).aggregate(
            **HEADCOUNT_AGGREGATES
        )
        return Headcount(**counts)

    def headcounts(self, event_ids: list[EventId]) -> dict[EventId, Headcount]:
        result = {event_id: Headcount() for event_id in event_ids}
        rows = (
            models.Application.objects.filter(event_id__in=[e.value for e in event_ids])
            .values("event_id")
            .annotate(**HEADCOUNT_AGGREGATES)
            .order_by()
        )
        for row in rows:
            event_id = EventId(row.pop("event_id"))
            result[event_id] = Headcount(**row)
        return result

    def holds_seat(self, event_id: EventId, user_id: UserId) -> bool:
        return models.Application.objects.filter(
            event_id=event_id.value,
            user_id=user_id.value,
            status__in=SEAT_VALUES,
        ).exists()

    def create_application(
        self,
        event_id: EventId,
        user_id: UserId,
        snapshot: FormSnapshot,
        applied_at: datetime,
    ) -> Application:
        try:
            with transaction.atomic():
                row = models.Application.objects.create(
                    event_id=event_id.value,
                    user_id=user_id.value,
                    status=models.Application.Status.PENDING,
                    gender=snapshot.gender.value,
                    form_snapshot=snapshot.to_dict(),
                    applied_at=applied_at,
                    updated_at=applied_at,
                )
        except IntegrityError as e:
            raise DuplicateApplicationError(str(event_id)) from e
        return application_to_domain(row)

    def get_application(
        self, application_id: ApplicationId, for_update: bool = False
    ) -> Application | None:
        queryset = models.Application.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.filter(id=application_id.value).first()
        return application_to_domain(row) if row else None

    def update_status(
        self, application_id: ApplicationId, status: ApplicationStatus, updated_at: datetime
    ) -> Application:
        models.Application.objects.filter(id=application_id.value).update(
            status=status.value, updated_at=updated_at
        )
        return application_to_domain(models.Application.objects.get(id=application_id.value))

    def find_active(self, event_id: EventId, user_id: UserId) -> Application | None:
        row = (
            models.Application.objects.filter(event_id=event_id.value, user_id=user_id.value)
            .exclude(status=CANCELLED)
            .first()
        )
        return application_to_domain(row) if row else None

    def has_completed(self, event_id: EventId, user_id: UserId) -> bool:
        return models.Application.objects.filter(
            event_id=event_id.value,
            user_id=user_id.value,
            status=models.Application.Status.COMPLETED,
        ).exists()

    def list_for_user(self, user_id: UserId) -> list[Application]:
        rows = models.Application.objects.filter(user_id=user_id.value).order_by("-applied_at")
        return [application_to_domain(row) for row in rows]

    def list_for_event(
        self, event_id: EventId, status: ApplicationStatus | None = None
    ) -> list[Application]:
        rows = models.Application.objects.filter(event_id=event_id.value)
        if status is not None:
            rows = rows.filter(status=status.value)
        return [application_to_domain(row) for row in rows.order_by("-applied_at")]

    def list_confirmed_ended(
        self, now: datetime, user_id: UserId | None = None
    ) -> list[Application]:
        rows = models.Application.objects.filter(status=CONFIRMED, event__ends_at__lte=now)
        if user_id is not None:
            rows = rows.filter(user_id=user_id.value)
        return [application_to_domain(row) for row in rows.order_by("applied_at")]

    def atomic(self):
        return transaction.atomic()
