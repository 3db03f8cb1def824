"""Role-based authorization: user roles and explicit guard functions."""

from app.core.permissions.guards import has_role, require_role
from app.core.permissions.roles import UserRole


__all__ = [
    "UserRole",
    "has_role",
    "require_role",
]
