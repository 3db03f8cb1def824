"""FastAPI dependencies that turn a bearer token into a session.

    bearer token -> TokenData -> User (looked up within the token's tenant) -> Principal

Route handlers depend on ``CurrentPrincipal``; core operations receive
the user and tenant IDs from it and never from the request body.
"""

from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.dependencies import DBSession
from app.core.auth.backend import ACCESS_TOKEN_TYPE, decode_token
from app.core.auth.schemas import Principal, TokenData
from app.core.errors import ForbiddenError, UnauthorizedError


bearer_scheme = HTTPBearer(auto_error=False, description="Access token")


async def get_token_data(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Verify the bearer token.

    Raises:
        UnauthorizedError: missing_token, invalid_token or invalid_token_type
    """
    if credentials is None:
        raise UnauthorizedError("Missing authentication token", error_code="missing_token")

    token_data = decode_token(credentials.credentials)
    if token_data is None:
        raise UnauthorizedError("Invalid or expired token", error_code="invalid_token")
    if token_data.type != ACCESS_TOKEN_TYPE:
        raise UnauthorizedError("Invalid token type", error_code="invalid_token_type")

    return token_data


async def get_current_user(
    token_data: Annotated[TokenData, Depends(get_token_data)],
    db: DBSession,
) -> Any:  # User; models are not imported at module load
    """Load the token's user from the token's tenant.

    A token pairing a user with some other tenant finds nobody.

    Raises:
        UnauthorizedError: user_not_found
        ForbiddenError: user_inactive
    """
    # Imported here: app.modules imports this module for its routes
    from app.modules.users.repos import UserRepository  # noqa: PLC0415

    user = await UserRepository(db).get_by_id(token_data.user_id, token_data.tenant_id)
    if user is None:
        raise UnauthorizedError("User not found", error_code="user_not_found")
    if not user.is_active:
        raise ForbiddenError("User account is deactivated", error_code="user_inactive")

    return user


async def get_principal(
    user: Annotated[Any, Depends(get_current_user)],
) -> Principal:
    """Reduce the authenticated user to the identifiers core operations use."""
    return Principal(user_id=user.id, tenant_id=user.tenant_id, role=user.role)


CurrentUser = Annotated[Any, Depends(get_current_user)]
CurrentPrincipal = Annotated[Principal, Depends(get_principal)]
