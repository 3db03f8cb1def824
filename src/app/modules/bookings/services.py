"""Booking admission engine.

``BookingService`` decides whether a requested interval may be booked
on a resource and commits it if so, cancels bookings for their owner,
and lists a user's bookings. Its collaborators (the reservation store,
the per-resource lock registry and the clock) are passed in explicitly.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from app.api.dependencies import CurrentClock, DBSession, ResourceLocks
from app.core.clock import Clock, as_utc, utc_now
from app.core.errors import (
    AlreadyCancelledError,
    BookingConflictError,
    InvalidRangeError,
    NotFoundError,
    PastBookingError,
)
from app.core.locks import ResourceLockRegistry
from app.modules.bookings.intervals import TimeInterval, find_conflict
from app.modules.bookings.models import Booking
from app.modules.bookings.repos import BookingRepository
from app.modules.bookings.store import ReservationStore


logger = structlog.get_logger()


class BookingService:
    """Admission, cancellation and listing of bookings.

    Admission of a resource runs its conflict scan and commit inside
    that resource's critical section: the registry lock serializes
    coroutines in this process, and the store's row lock serializes
    other processes sharing the database.
    """

    def __init__(
        self,
        store: ReservationStore,
        locks: ResourceLockRegistry,
        clock: Clock = utc_now,
    ) -> None:
        self.store = store
        self.locks = locks
        self.clock = clock

    async def admit(
        self,
        resource_id: UUID,
        start_time: datetime,
        end_time: datetime,
        user_id: UUID,
        tenant_id: UUID,
    ) -> Booking:
        """Admit a booking of ``[start_time, end_time)`` on a resource.

        Args:
            resource_id: The resource to book
            start_time: Inclusive start instant
            end_time: Exclusive end instant
            user_id: The requesting user, from the session
            tenant_id: The requesting tenant, from the session

        Returns:
            The committed booking

        Raises:
            NotFoundError: If the resource is not in the caller's tenant
            InvalidRangeError: If end_time is not after start_time
            PastBookingError: If start_time is before the current time
            BookingConflictError: If the interval overlaps an active booking
        """
        resource = await self.store.find_resource_by_id(resource_id, tenant_id)
        if resource is None:
            raise NotFoundError(
                "Resource not found in your tenant",
                resource="resource",
                resource_id=str(resource_id),
            )

        candidate = TimeInterval(as_utc(start_time), as_utc(end_time))
        if candidate.start >= candidate.end:
            self._log_rejection("invalid_range", resource_id, user_id, candidate)
            raise InvalidRangeError()

        if candidate.start < self.clock():
            self._log_rejection("past_booking", resource_id, user_id, candidate)
            raise PastBookingError()

        async with self.locks.hold(resource_id):
            await self.store.lock_resource(resource_id)

            active = await self.store.find_active_bookings_by_resource(resource_id)
            conflict = find_conflict(candidate, active, lambda b: b.interval)
            if conflict is not None:
                self._log_rejection("conflict", resource_id, user_id, candidate)
                raise BookingConflictError(
                    details={"conflicting_booking_id": str(conflict.id)},
                )

            booking = await self.store.insert_booking(
                Booking(
                    resource_id=resource_id,
                    user_id=user_id,
                    tenant_id=tenant_id,
                    start_time=candidate.start,
                    end_time=candidate.end,
                    cancelled=False,
                )
            )
            await self.store.commit()

        logger.info(
            "booking_admitted",
            booking_id=str(booking.id),
            resource_id=str(resource_id),
            user_id=str(user_id),
            tenant_id=str(tenant_id),
            start_time=candidate.start.isoformat(),
            end_time=candidate.end.isoformat(),
        )
        return booking

    async def cancel(self, booking_id: UUID, user_id: UUID, tenant_id: UUID) -> Booking:
        """Cancel a booking owned by the requesting user.

        The freed interval is available to the next admission as soon
        as this returns.

        Raises:
            NotFoundError: If the booking is missing, another user's, or
                another tenant's
            AlreadyCancelledError: If the booking was already cancelled
        """
        booking = await self.store.find_booking_by_id(booking_id, user_id, tenant_id)
        if booking is None:
            raise NotFoundError(
                "Booking not found",
                resource="booking",
                resource_id=str(booking_id),
            )

        if booking.cancelled:
            raise AlreadyCancelledError(details={"booking_id": str(booking_id)})

        booking = await self.store.update_booking_cancelled(booking_id)
        await self.store.commit()

        logger.info(
            "booking_cancelled",
            booking_id=str(booking_id),
            resource_id=str(booking.resource_id),
            user_id=str(user_id),
            tenant_id=str(tenant_id),
        )
        return booking

    async def list_for_user(self, user_id: UUID, tenant_id: UUID) -> Sequence[Booking]:
        """List the user's bookings in the tenant by ascending start time."""
        return await self.store.list_bookings_for_user(user_id, tenant_id)

    def _log_rejection(
        self,
        reason: str,
        resource_id: UUID,
        user_id: UUID,
        candidate: TimeInterval[datetime],
    ) -> None:
        logger.info(
            "booking_rejected",
            reason=reason,
            resource_id=str(resource_id),
            user_id=str(user_id),
            start_time=candidate.start.isoformat(),
            end_time=candidate.end.isoformat(),
        )


def get_booking_service(
    db: DBSession,
    locks: ResourceLocks,
    clock: CurrentClock,
) -> BookingService:
    """Build the booking service for a request's database session."""
    return BookingService(store=BookingRepository(db), locks=locks, clock=clock)


# Type alias for dependency injection
BookingSvc = Annotated[BookingService, Depends(get_booking_service)]
