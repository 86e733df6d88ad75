"""Application service - the application lifecycle lives here.

Submission re-checks availability inside the same transaction that writes
the application, and status changes lock the application row, so decisions
never rest on a stale read.
"""

import logging
from dataclasses import dataclass

from accounts.domain import Actor, UserId
from applications.domain import (
    Application,
    ApplicationForm,
    ApplicationId,
    ApplicationStatus,
)
from applications.domain.errors import (
    ApplicationNotFoundError,
    CapacityClosedError,
    DuplicateApplicationError,
    InvalidApplicationIdError,
    InvalidTransitionError,
)
from applications.domain.models import ADMIN_TARGETS
from applications.stores.interfaces import ApplicationStore
from common.domain.clock import Clock, utcnow
from common.domain.errors import AuthorizationError, ValidationError
from events.domain import Capacity, Event, EventListing, Headcount, resolve_status
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_application_id(application_id: str) -> ApplicationId:
    try:
        return ApplicationId.from_string(application_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidApplicationIdError()


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of an administrator status change.

    ``over_capacity`` is a warning only; administrators may confirm past
    capacity.
    """

    application: Application
    headcount: Headcount
    capacity: Capacity
    changed: bool

    @property
    def over_capacity(self) -> bool:
        gender = self.application.form_snapshot.gender
        return (
            self.application.status is ApplicationStatus.CONFIRMED
            and self.headcount.confirmed_for(gender) > self.capacity.value
        )


@dataclass(frozen=True)
class EventApplications:
    """All applications of one event with its derived headcount."""

    event: Event
    applications: list[Application]
    headcount: Headcount


class ApplicationService:
    """Service for submitting applications and moving them through their lifecycle."""

    def __init__(
        self,
        applications: ApplicationStore,
        events: EventStore,
        clock: Clock = utcnow,
    ) -> None:
        self._applications = applications
        self._events = events
        self._clock = clock

    def submit(self, event_id: str, user_id: UserId, form: ApplicationForm) -> Application:
        """Submit an application for an event.

        Raises:
            ValidationError: If any form field is invalid (checked before anything else).
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            CapacityClosedError: If the event is CLOSED at submission time.
            DuplicateApplicationError: If the user already has an active application.
        """
        snapshot = form.validate()
        key = parse_event_id(event_id)

        with self._applications.atomic():
            event = self._events.get_event(key, for_update=True)
            if event is None:
                raise EventNotFoundError(event_id)
            now = self._clock()
            listing = EventListing(event=event, headcount=self._applications.headcount(key))
            status = resolve_status(listing, now)
            if not status.accepts_applications:
                logger.warning(
                    f"User {user_id.value} tried to apply to closed event {event_id}"
                )
                raise CapacityClosedError(event_id)
            if self._applications.find_active(key, user_id) is not None:
                logger.warning(f"User {user_id.value} applied twice to event {event_id}")
                raise DuplicateApplicationError(event_id)
            application = self._applications.create_application(
                key, user_id, snapshot, applied_at=now
            )

        logger.info(
            f"Application {application.id} submitted by user {user_id.value} "
            f"for event {event_id} (event status {status.value})"
        )
        return application

    def get_application(self, application_id: str, actor: Actor) -> Application:
        """Return an application to its owner or an administrator.

        Raises:
            InvalidApplicationIdError: If the id is malformed.
            ApplicationNotFoundError: If it does not exist or belongs to someone else.
        """
        application = self._applications.get_application(parse_application_id(application_id))
        if application is None or not (actor.is_admin or application.user_id == actor.user_id):
            raise ApplicationNotFoundError(application_id)
        return application

    def transition_status(
        self, application_id: str, new_status: str, actor: Actor
    ) -> TransitionResult:
        """Move an application to confirmed, waitlist or cancelled.

        Reapplying the current status is a no-op. Capacity is not enforced;
        the result carries the fresh headcount so the caller can warn.

        Raises:
            AuthorizationError: If the actor is not an administrator.
            ValidationError: If new_status is not an administrator target.
            InvalidApplicationIdError: If the id is malformed.
            ApplicationNotFoundError: If the application does not exist.
            InvalidTransitionError: If the current status does not allow the move.
        """
        if not actor.is_admin:
            logger.warning(
                f"Non-admin user {actor.user_id.value} attempted to set application "
                f"{application_id} to {new_status}"
            )
            raise AuthorizationError("Administrator privileges required")

        try:
            target = ApplicationStatus(new_status)
        except ValueError:
            target = None
        if target not in ADMIN_TARGETS:
            raise ValidationError.single("status", "Status must be confirmed, waitlist or cancelled")

        key = parse_application_id(application_id)
        with self._applications.atomic():
            application = self._applications.get_application(key, for_update=True)
            if application is None:
                raise ApplicationNotFoundError(application_id)
            current = application.status
            changed = False
            if current.is_terminal:
                raise InvalidTransitionError(current.value, target.value)
            if current is not target:
                if not current.can_move_to(target):
                    raise InvalidTransitionError(current.value, target.value)
                application = self._applications.update_status(key, target, self._clock())
                changed = True
            event = self._events.get_event(application.event_id)
            headcount = self._applications.headcount(application.event_id)

        result = TransitionResult(
            application=application,
            headcount=headcount,
            capacity=event.capacity_for(application.form_snapshot.gender),
            changed=changed,
        )
        if changed:
            logger.info(
                f"Application {application_id} moved {current.value} -> {target.value} "
                f"by admin {actor.user_id.value}"
            )
        if result.over_capacity:
            logger.warning(
                f"Event {application.event_id} confirmed "
                f"{headcount.confirmed_for(application.form_snapshot.gender)} "
                f"{application.form_snapshot.gender.value} applicants over a capacity of "
                f"{result.capacity.value}"
            )
        return result

    def withdraw(self, application_id: str, actor: Actor) -> Application:
        """Let the applicant cancel their own application.

        Raises:
            InvalidApplicationIdError: If the id is malformed.
            ApplicationNotFoundError: If it does not exist or belongs to someone else.
            InvalidTransitionError: If the application is already cancelled or completed.
        """
        key = parse_application_id(application_id)
        with self._applications.atomic():
            application = self._applications.get_application(key, for_update=True)
            if application is None or application.user_id != actor.user_id:
                raise ApplicationNotFoundError(application_id)
            if not application.status.can_move_to(ApplicationStatus.CANCELLED):
                raise InvalidTransitionError(
                    application.status.value, ApplicationStatus.CANCELLED.value
                )
            application = self._applications.update_status(
                key, ApplicationStatus.CANCELLED, self._clock()
            )
        logger.info(f"Application {application_id} withdrawn by user {actor.user_id.value}")
        return application

    def complete(self, application_id: str) -> Application:
        """Mark a confirmed application completed once its event has ended.

        Idempotent: an already-completed application is returned unchanged.

        Raises:
            InvalidApplicationIdError: If the id is malformed.
            ApplicationNotFoundError: If the application does not exist.
            InvalidTransitionError: If it is not confirmed or the event has not ended.
        """
        key = parse_application_id(application_id)
        with self._applications.atomic():
            application = self._applications.get_application(key, for_update=True)
            if application is None:
                raise ApplicationNotFoundError(application_id)
            if application.status is ApplicationStatus.COMPLETED:
                return application
            if application.status is not ApplicationStatus.CONFIRMED:
                raise InvalidTransitionError(
                    application.status.value, ApplicationStatus.COMPLETED.value
                )
            now = self._clock()
            event = self._events.get_event(application.event_id)
            if event is None or not event.has_ended(now):
                raise InvalidTransitionError(
                    application.status.value, ApplicationStatus.COMPLETED.value
                )
            application = self._applications.update_status(
                key, ApplicationStatus.COMPLETED, now
            )
        logger.info(f"Application {application_id} completed")
        return application

    def complete_elapsed(self, user_id: UserId | None = None) -> list[Application]:
        """Complete every confirmed application whose event has ended.

        Safe to re-run; applications completed concurrently are skipped.
        """
        completed = []
        for application in self._applications.list_confirmed_ended(self._clock(), user_id=user_id):
            try:
                completed.append(self.complete(str(application.id)))
            except (ApplicationNotFoundError, InvalidTransitionError) as e:
                logger.info(f"Skipped completing application {application.id}: {e}")
        if completed:
            logger.info(f"Completed {len(completed)} applications")
        return completed

    def list_for_user(self, user_id: UserId) -> list[Application]:
        """Return a user's applications, newest first, completing any that have ended."""
        self.complete_elapsed(user_id=user_id)
        return self._applications.list_for_user(user_id)

    def list_for_event(
        self, event_id: str, actor: Actor, status: str | None = None
    ) -> EventApplications:
        """Return an event's applications and headcount for administrators.

        Raises:
            AuthorizationError: If the actor is not an administrator.
            ValidationError: If the status filter is unknown.
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if not actor.is_admin:
            logger.warning(
                f"Non-admin user {actor.user_id.value} attempted to list applications "
                f"of event {event_id}"
            )
            raise AuthorizationError("Administrator privileges required")
        status_filter = None
        if status:
            try:
                status_filter = ApplicationStatus(status)
            except ValueError:
                raise ValidationError.single("status", "Unknown application status")
        key = parse_event_id(event_id)
        event = self._events.get_event(key)
        if event is None:
            raise EventNotFoundError(event_id)
        return EventApplications(
            event=event,
            applications=self._applications.list_for_event(key, status=status_filter),
            headcount=self._applications.headcount(key),
        )
