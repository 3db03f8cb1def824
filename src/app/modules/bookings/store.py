"""The persistence contract the admission engine depends on.

``BookingService`` talks to storage only through this protocol. The
SQLAlchemy implementation lives in ``repos.BookingRepository``; tests
may supply any object with the same methods.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol
from uuid import UUID


if TYPE_CHECKING:
    from app.modules.bookings.models import Booking
    from app.modules.resources.models import Resource


class ReservationStore(Protocol):
    """Reads and writes bookings on behalf of the admission engine."""

    async def find_resource_by_id(
        self, resource_id: UUID, tenant_id: UUID
    ) -> "Resource | None":
        """Return the resource if it exists within the tenant."""
        ...

    async def lock_resource(self, resource_id: UUID) -> None:
        """Serialize admissions on the resource until the next commit."""
        ...

    async def find_active_bookings_by_resource(
        self, resource_id: UUID
    ) -> Sequence["Booking"]:
        """Return every non-cancelled booking of the resource, in any order."""
        ...

    async def find_booking_by_id(
        self, booking_id: UUID, user_id: UUID, tenant_id: UUID
    ) -> "Booking | None":
        """Return the booking only if the user owns it within the tenant."""
        ...

    async def insert_booking(self, booking: "Booking") -> "Booking":
        """Persist a new booking and return it with its ID assigned."""
        ...

    async def update_booking_cancelled(self, booking_id: UUID) -> "Booking":
        """Mark the booking cancelled and return the updated record."""
        ...

    async def list_bookings_for_user(
        self, user_id: UUID, tenant_id: UUID
    ) -> Sequence["Booking"]:
        """Return the user's bookings in the tenant by ascending start time."""
        ...

    async def commit(self) -> None:
        """Make all pending writes durable and visible to other sessions."""
        ...
