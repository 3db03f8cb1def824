"""User factory for tests."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from app.core.auth.backend import create_access_token
from app.core.database.base import UTCDateTime
from app.core.permissions import UserRole
from app.modules.users.models import User


class UserFactory(SQLAlchemyFactory[User]):
    """Factory for creating test User instances.

    Pass ``tenant_id`` explicitly; the generated one references no tenant.
    """

    __model__ = User

    @classmethod
    def get_sqlalchemy_types(cls) -> dict[Any, Callable[[], Any]]:
        """Generate aware UTC datetimes for ``UTCDateTime`` columns."""
        return {**super().get_sqlalchemy_types(), UTCDateTime: lambda: datetime.now(UTC)}

    @classmethod
    def id(cls):
        """Generate a user ID."""
        return uuid4()

    @classmethod
    def email(cls) -> str:
        """Generate a unique email."""
        return f"user-{uuid4().hex[:8]}@example.com"

    @classmethod
    def full_name(cls) -> str:
        """Generate a full name."""
        return f"Test User {uuid4().hex[:4]}"

    @classmethod
    def tenant_id(cls):
        """Generate a tenant ID."""
        return uuid4()

    @classmethod
    def role(cls) -> UserRole:
        """Default to a regular tenant user."""
        return UserRole.TENANT_USER

    @classmethod
    def is_active(cls) -> bool:
        """Default to active."""
        return True


def bearer_headers(user: User) -> dict[str, str]:
    """Build Authorization headers carrying a valid access token for ``user``."""
    token = create_access_token(user_id=user.id, tenant_id=user.tenant_id)
    return {"Authorization": f"Bearer {token}"}
