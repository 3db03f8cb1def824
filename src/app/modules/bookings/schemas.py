"""Pydantic schemas for booking operations."""

from datetime import datetime
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator

from app.core.clock import as_utc
from app.modules.resources.schemas import ResourceSummary


class BookingCreate(BaseModel):
    """Schema for requesting a booking.

    Owner and tenant come from the caller's session; payloads carrying
    them (or any other unknown field) are rejected. Instants must
    include a UTC offset and are normalized to UTC.
    """

    resource_id: UUID
    start_time: AwareDatetime
    end_time: AwareDatetime

    model_config = ConfigDict(extra="forbid")

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        """Convert to UTC; instants outside the UTC calendar are refused."""
        try:
            return as_utc(value)
        except OverflowError as e:
            raise ValueError("instant is outside the supported date range") from e


class BookingResponse(BaseModel):
    """Schema for booking response data, with its resource resolved."""

    id: UUID
    resource_id: UUID
    user_id: UUID
    tenant_id: UUID
    start_time: datetime
    end_time: datetime
    cancelled: bool
    created_at: datetime
    resource: ResourceSummary | None = None

    model_config = ConfigDict(from_attributes=True)
