"""Application exceptions.

Each exception class fixes an HTTP status and a machine-readable
``error_code``; ``handlers.register_exception_handlers`` renders them as
RFC 7807 Problem Details. All of them end the request: nothing raised
here is retried, and the request's transaction is rolled back.
"""

from typing import Any


class AppException(Exception):
    """Base class for errors that map onto an HTTP response.

    Subclasses override the class-level defaults; instances may still
    pass a more specific message or code.

    Attributes:
        message: Human-readable explanation sent as ``detail``
        error_code: Stable identifier sent as ``code``
        status_code: HTTP status of the response
        details: Extra members merged into the problem document
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================
# Lookup and authorization
# ============================================================


class NotFoundError(AppException):
    """The addressed record is not visible to the caller.

    Raised alike when the record does not exist, belongs to another
    tenant, or (for bookings) belongs to another user, so the response
    reveals nothing about records outside the caller's scope.
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", None) or {}
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """No usable bearer token, or its user does not exist in its tenant."""

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """The caller is authenticated but may not perform the operation."""

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


# ============================================================
# Booking rules
# ============================================================


class InvalidRangeError(AppException):
    """The requested end time is not strictly after the start time."""

    message = "End time must be after start time"
    error_code = "invalid_range"
    status_code = 422


class PastBookingError(AppException):
    """The requested start time lies before the current time."""

    message = "Cannot book in the past"
    error_code = "past_booking"
    status_code = 422


class ConflictError(AppException):
    """The request contradicts the current state of a record."""

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class BookingConflictError(ConflictError):
    """The requested interval overlaps an active booking of the resource.

    ``details["conflicting_booking_id"]`` names the booking in the way.
    """

    message = "Resource is already booked for this time slot"
    error_code = "booking_conflict"


class AlreadyCancelledError(ConflictError):
    """The booking was cancelled before; cancellation is one-way."""

    message = "Booking is already cancelled"
    error_code = "already_cancelled"
