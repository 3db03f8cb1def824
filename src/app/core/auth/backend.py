"""Bearer token signing and verification.

Tokens are issued by whatever authenticates users in front of this
service; here we only need to verify them and, for seeding and tests,
to mint them with the same key.

Claims: ``sub`` (user ID), ``tenant_id``, ``type`` ("access"), ``exp``,
``iat`` and a random ``jti``.
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from pydantic import ValidationError

from app.config import settings
from app.core.auth.schemas import TokenData
from app.core.constants import ACCESS_TOKEN_JTI_LENGTH


ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: UUID,
    tenant_id: UUID,
    expires_delta: timedelta | None = None,
    additional_claims: dict[str, Any] | None = None,
) -> str:
    """Sign an access token binding a user to their tenant.

    Args:
        user_id: The user's UUID
        tenant_id: The tenant the user belongs to
        expires_delta: Lifetime; defaults to ``access_token_expire_minutes``
        additional_claims: Extra claims merged over the standard ones

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)

    claims: dict[str, Any] = {
        "sub": str(user_id),
        "tenant_id": str(tenant_id),
        "type": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
        "jti": secrets.token_urlsafe(ACCESS_TOKEN_JTI_LENGTH),
        **(additional_claims or {}),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> TokenData | None:
    """Verify a token's signature and expiry and extract its claims.

    Returns:
        TokenData, or None if the token is malformed, forged, expired or
        missing the user or tenant claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True, "require_sub": True},
        )
        return TokenData(
            user_id=claims["sub"],
            tenant_id=claims["tenant_id"],
            exp=claims["exp"],
            type=claims.get("type", ACCESS_TOKEN_TYPE),
            jti=claims.get("jti"),
        )
    except (JWTError, KeyError, ValidationError):
        return None
