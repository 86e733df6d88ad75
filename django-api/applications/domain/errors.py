"""Domain errors for the application lifecycle."""

from common.domain.errors import DomainError, ErrorCode


class ApplicationNotFoundError(DomainError):
    """Raised when an application is not found."""

    def __init__(self, application_id: str) -> None:
        super().__init__(
            code=ErrorCode.APPLICATION_NOT_FOUND,
            message="Application not found",
        )
        self.application_id = application_id


class InvalidApplicationIdError(DomainError):
    """Raised when an application ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_APPLICATION_ID,
            message="Invalid application ID format",
        )


class CapacityClosedError(DomainError):
    """Raised when an event no longer accepts applications."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_CLOSED,
            message="Applications for this event are closed",
        )
        self.event_id = event_id


class DuplicateApplicationError(DomainError):
    """Raised when the user already has an active application for the event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_APPLICATION,
            message="You have already applied to this event",
        )
        self.event_id = event_id


class InvalidTransitionError(DomainError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot change an application from {current} to {target}",
        )
        self.current = current
        self.target = target
