"""
Booking Domain Errors

Every error carries a stable machine-readable ``kind`` and a
human-readable ``reason``. They are scoped to a single request and
never leave partial state behind.
"""


class BookingError(Exception):
    """Base class for booking domain errors."""

    kind = "booking_error"
    default_reason = "booking error"

    def __init__(self, reason: str = ""):
        self.reason = reason or self.default_reason
        super().__init__(self.reason)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "detail": self.reason}


class ValidationError(BookingError):
    """Malformed or out-of-range input."""

    kind = "validation_error"
    default_reason = "invalid booking request"


class UnavailableError(BookingError):
    """Valid request, but the room is taken for the requested dates."""

    kind = "unavailable"
    default_reason = "room not available for dates"


class NotFoundError(BookingError):
    kind = "not_found"
    default_reason = "not found"


class AuthorizationError(BookingError):
    kind = "forbidden"
    default_reason = "not allowed"


class InvalidStateError(BookingError):
    """Operation not permitted in the current lifecycle state."""

    kind = "invalid_state"
    default_reason = "operation not permitted in current state"
