"""Role guards for route handlers.

Guards are plain functions called at the top of a handler with the
resolved principal, instead of decorators that dig the user out of
keyword arguments:

    @router.post("")
    async def create_resource(principal: CurrentPrincipal, ...):
        require_role(principal, UserRole.TENANT_ADMIN)
        ...
"""

from typing import TYPE_CHECKING

import structlog

from app.core.errors import ForbiddenError
from app.core.permissions.roles import UserRole


if TYPE_CHECKING:
    from app.core.auth.schemas import Principal


logger = structlog.get_logger()


def has_role(principal: "Principal", *roles: UserRole) -> bool:
    """Check whether the principal holds one of the given roles."""
    return principal.role in roles


def require_role(principal: "Principal", *roles: UserRole) -> "Principal":
    """Ensure the principal holds one of the given roles.

    Args:
        principal: The resolved session
        roles: Accepted roles

    Returns:
        The same principal, for chaining

    Raises:
        ForbiddenError: If the principal's role is not accepted
    """
    if not has_role(principal, *roles):
        logger.info(
            "role_denied",
            user_id=str(principal.user_id),
            tenant_id=str(principal.tenant_id),
            role=principal.role.value,
            required=[role.value for role in roles],
        )
        raise ForbiddenError(
            "Insufficient role for this operation",
            error_code="insufficient_role",
            details={"required_roles": [role.value for role in roles]},
        )
    return principal
