"""Factory for Tenant model."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from app.core.database.base import UTCDateTime
from app.modules.tenants.models import Tenant


class TenantFactory(SQLAlchemyFactory[Tenant]):
    """Factory for generating Tenant instances."""

    __model__ = Tenant

    @classmethod
    def get_sqlalchemy_types(cls) -> dict[Any, Callable[[], Any]]:
        """Generate aware UTC datetimes for ``UTCDateTime`` columns."""
        return {**super().get_sqlalchemy_types(), UTCDateTime: lambda: datetime.now(UTC)}

    @classmethod
    def id(cls):
        """Generate a tenant ID."""
        return uuid4()

    @classmethod
    def name(cls) -> str:
        """Generate a company name."""
        return f"{cls.__faker__.company()} {uuid4().hex[:6]}"
