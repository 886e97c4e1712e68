"""DRF exception handling for booking domain errors."""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from .domain.exceptions import (
    AuthorizationError,
    BookingError,
    InvalidStateError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnavailableError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    InvalidStateError: status.HTTP_409_CONFLICT,
}


def booking_exception_handler(exc, context):
    """Render a BookingError as ``{"kind", "detail"}``; defer everything else to DRF."""

    if isinstance(exc, BookingError):
        http_status = STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return Response(exc.to_dict(), status=http_status)
    return exception_handler(exc, context)
