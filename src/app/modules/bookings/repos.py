"""Booking repository: the SQLAlchemy ``ReservationStore``."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.modules.bookings.models import Booking
from app.modules.resources.models import Resource
from app.modules.resources.repos import ResourceRepository


class BookingRepository:
    """Repository for Booking database operations.

    Implements ``ReservationStore`` over an ``AsyncSession``. Writes
    are flushed immediately; ``commit`` ends the session's transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.resources = ResourceRepository(session)

    async def find_resource_by_id(
        self, resource_id: UUID, tenant_id: UUID
    ) -> Resource | None:
        """Get a resource by ID within a tenant."""
        return await self.resources.get_by_id(resource_id, tenant_id)

    async def lock_resource(self, resource_id: UUID) -> None:
        """Take a row lock on the resource for the rest of the transaction.

        Concurrent admissions from other processes block here until this
        transaction commits. SQLite ignores FOR UPDATE.
        """
        stmt = select(Resource.id).where(Resource.id == resource_id).with_for_update()
        await self.session.execute(stmt)

    async def find_active_bookings_by_resource(
        self, resource_id: UUID
    ) -> Sequence[Booking]:
        """Get all non-cancelled bookings of a resource."""
        stmt = select(Booking).where(
            Booking.resource_id == resource_id,
            Booking.cancelled.is_(False),
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def find_booking_by_id(
        self, booking_id: UUID, user_id: UUID, tenant_id: UUID
    ) -> Booking | None:
        """Get a booking by ID, scoped to its owner and tenant.

        Returns None alike for a missing booking, another user's booking
        and another tenant's booking.
        """
        stmt = select(Booking).where(
            Booking.id == booking_id,
            Booking.user_id == user_id,
            Booking.tenant_id == tenant_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def insert_booking(self, booking: Booking) -> Booking:
        """Create a new booking with its resource loaded."""
        self.session.add(booking)
        await self.session.flush()
        await self.session.refresh(
            booking, attribute_names=["created_at", "updated_at", "resource"]
        )
        return booking

    async def update_booking_cancelled(self, booking_id: UUID) -> Booking:
        """Flag a booking as cancelled.

        Raises:
            NotFoundError: If the booking does not exist
        """
        booking = await self.session.get(Booking, booking_id)
        if booking is None:
            raise NotFoundError(
                "Booking not found",
                resource="booking",
                resource_id=str(booking_id),
            )
        booking.cancelled = True
        await self.session.flush()
        await self.session.refresh(booking)
        return booking

    async def list_bookings_for_user(
        self, user_id: UUID, tenant_id: UUID
    ) -> Sequence[Booking]:
        """Get a user's bookings within a tenant ordered by start time."""
        stmt = (
            select(Booking)
            .where(Booking.user_id == user_id, Booking.tenant_id == tenant_id)
            .order_by(Booking.start_time.asc(), Booking.id.asc())
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.session.commit()
