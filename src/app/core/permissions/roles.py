"""User roles within a tenant."""

from enum import StrEnum


class UserRole(StrEnum):
    """Closed set of roles a user can hold in their tenant.

    Roles are assigned at creation and never change.
    """

    TENANT_ADMIN = "TENANT_ADMIN"
    TENANT_USER = "TENANT_USER"
