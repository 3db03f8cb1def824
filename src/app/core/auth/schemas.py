"""Authentication schemas for token and session handling."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.core.permissions.roles import UserRole


class TokenData(BaseModel):
    """Data extracted from a JWT token.

    Attributes:
        user_id: The user's UUID
        tenant_id: The tenant's UUID
        exp: Token expiration time
        type: Token type
        jti: Unique token ID
    """

    user_id: UUID
    tenant_id: UUID
    exp: datetime
    type: str = "access"
    jti: str | None = None


class Principal(BaseModel):
    """The resolved session of an authenticated request.

    User and tenant identifiers for every core operation come from
    here, never from the request payload.
    """

    user_id: UUID
    tenant_id: UUID
    role: UserRole

    model_config = ConfigDict(frozen=True)
