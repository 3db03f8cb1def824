"""Bookings module: conflict-checked reservations of resources."""

from fastapi import APIRouter


router = APIRouter(prefix="/bookings", tags=["bookings"])

# Import routes to register them (must be after router is defined)
from app.modules.bookings import routes  # noqa: F401, E402


# Module metadata
__module_info__ = {
    "name": "bookings",
    "version": "1.0.0",
    "description": "Booking admission, cancellation and listing",
    "dependencies": ["tenants", "users", "resources"],
}
