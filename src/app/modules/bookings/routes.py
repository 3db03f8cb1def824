"""Booking API routes.

User and tenant identifiers always come from the authenticated
principal; request bodies never supply them.
"""

from uuid import UUID

from fastapi import status

from app.core.auth.dependencies import CurrentPrincipal
from app.modules.bookings import router
from app.modules.bookings.schemas import BookingCreate, BookingResponse
from app.modules.bookings.services import BookingSvc


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book a resource",
    description=(
        "Reserve a resource for a half-open time range. Fails with 409 if the "
        "range overlaps an active booking of the resource."
    ),
)
async def create_booking(
    data: BookingCreate,
    principal: CurrentPrincipal,
    service: BookingSvc,
) -> BookingResponse:
    """Admit a booking."""
    booking = await service.admit(
        resource_id=data.resource_id,
        start_time=data.start_time,
        end_time=data.end_time,
        user_id=principal.user_id,
        tenant_id=principal.tenant_id,
    )
    return BookingResponse.model_validate(booking)


@router.get(
    "",
    response_model=list[BookingResponse],
    summary="List my bookings",
    description="List the caller's bookings, cancelled ones included, by start time.",
)
async def list_bookings(
    principal: CurrentPrincipal,
    service: BookingSvc,
) -> list[BookingResponse]:
    """List the caller's bookings."""
    bookings = await service.list_for_user(principal.user_id, principal.tenant_id)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.patch(
    "/{booking_id}/cancel",
    response_model=BookingResponse,
    summary="Cancel a booking",
    description="Cancel one of the caller's bookings. Only the owner may cancel.",
)
async def cancel_booking(
    booking_id: UUID,
    principal: CurrentPrincipal,
    service: BookingSvc,
) -> BookingResponse:
    """Cancel a booking."""
    booking = await service.cancel(booking_id, principal.user_id, principal.tenant_id)
    return BookingResponse.model_validate(booking)
