"""Database layer - session management, base models, and mixins."""

from app.core.database.base import (
    Base,
    TenantMixin,
    TimestampMixin,
    UTCDateTime,
    UUIDMixin,
)
from app.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "TenantMixin",
    "TimestampMixin",
    "UTCDateTime",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
