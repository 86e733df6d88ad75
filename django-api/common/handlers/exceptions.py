"""Maps domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"], so views simply let domain
errors propagate. Internal error details never reach the response body.
"""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.domain.errors import DomainError, ErrorCode, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTHORIZATION_ERROR: status.HTTP_403_FORBIDDEN,
    ErrorCode.UPSTREAM_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.APPLICATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_APPLICATION_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAPACITY_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_APPLICATION: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REVIEW_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_REVIEW_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_ELIGIBLE: status.HTTP_403_FORBIDDEN,
    ErrorCode.DUPLICATE_REVIEW: status.HTTP_409_CONFLICT,
}


def error_body(error: DomainError) -> dict:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, ValidationError):
        body["fields"] = error.fields
    return body


def domain_exception_handler(exc, context):
    """DRF exception handler aware of the domain error taxonomy."""
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            f"Database failure in {type(view).__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )
        exc = UpstreamError("database")

    if isinstance(exc, UpstreamError):
        logger.error(f"Upstream failure during {exc.operation}", exc_info=exc)
        return Response(error_body(exc), status=STATUS_BY_CODE[exc.code])

    if isinstance(exc, DomainError):
        return Response(error_body(exc), status=STATUS_BY_CODE[exc.code])

    return exception_handler(exc, context)
