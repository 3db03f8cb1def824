"""Error handling module with RFC 7807 Problem Details."""

from app.core.errors.exceptions import (
    AlreadyCancelledError,
    AppException,
    BookingConflictError,
    ConflictError,
    ForbiddenError,
    InvalidRangeError,
    NotFoundError,
    PastBookingError,
    UnauthorizedError,
)
from app.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AlreadyCancelledError",
    "AppException",
    "BookingConflictError",
    "ConflictError",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "InvalidRangeError",
    "NotFoundError",
    "PastBookingError",
    "ProblemDetail",
    "UnauthorizedError",
    "register_exception_handlers",
]
