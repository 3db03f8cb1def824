"""Request-scoped collaborators for route handlers and services.

Each one is a FastAPI dependency so that tests (or an alternative
deployment) can replace it through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, utc_now
from app.core.database import get_db
from app.core.locks import ResourceLockRegistry, resource_locks


def get_resource_locks() -> ResourceLockRegistry:
    """The admission lock registry shared by this process."""
    return resource_locks


def get_clock() -> Clock:
    """The clock used for past-booking checks."""
    return utc_now


DBSession = Annotated[AsyncSession, Depends(get_db)]
ResourceLocks = Annotated[ResourceLockRegistry, Depends(get_resource_locks)]
CurrentClock = Annotated[Clock, Depends(get_clock)]
