"""Domain error codes shared by every app."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"

    APPLICATION_NOT_FOUND = "APPLICATION_NOT_FOUND"
    INVALID_APPLICATION_ID = "INVALID_APPLICATION_ID"
    CAPACITY_CLOSED = "CAPACITY_CLOSED"
    DUPLICATE_APPLICATION = "DUPLICATE_APPLICATION"
    INVALID_TRANSITION = "INVALID_TRANSITION"

    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    REVIEW_NOT_FOUND = "REVIEW_NOT_FOUND"
    INVALID_REVIEW_ID = "INVALID_REVIEW_ID"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"
    DUPLICATE_REVIEW = "DUPLICATE_REVIEW"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when user input fails field validation.

    ``fields`` maps each offending field to its messages so the client can
    show them next to the input.
    """

    def __init__(self, fields: dict[str, list[str]]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message="Some fields are invalid",
        )
        self.fields = fields

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]})


class AuthorizationError(DomainError):
    """Raised when the actor may not perform an operation."""

    def __init__(self, message: str = "Operation not permitted") -> None:
        super().__init__(code=ErrorCode.AUTHORIZATION_ERROR, message=message)


class UpstreamError(DomainError):
    """Raised when an external collaborator (store, storage) fails."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.UPSTREAM_ERROR,
            message="Service temporarily unavailable, please retry",
        )
        self.operation = operation


class FieldErrors:
    """Collects per-field messages and raises them as one ValidationError."""

    def __init__(self) -> None:
        self._fields: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._fields.setdefault(field, []).append(message)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def raise_if_any(self) -> None:
        if self._fields:
            raise ValidationError(dict(self._fields))
