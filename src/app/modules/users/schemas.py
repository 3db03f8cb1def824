"""Pydantic schemas for user operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.permissions.roles import UserRole


class UserResponse(BaseModel):
    """A tenant member as seen by themselves.

    The role is fixed when the user is provisioned; it decides whether
    the user may manage resources.
    """

    id: UUID
    tenant_id: UUID
    email: EmailStr
    full_name: str
    role: UserRole = Field(description="TENANT_ADMIN may manage resources")
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
