"""Pydantic schemas for resource operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_NAME_LENGTH


class ResourceCreate(BaseModel):
    """Schema for creating a resource.

    The owning tenant always comes from the caller's session.
    """

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ResourceSummary(BaseModel):
    """Compact resource reference embedded in other responses."""

    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class ResourceResponse(ResourceSummary):
    """Schema for resource response data."""

    tenant_id: UUID
    created_at: datetime
