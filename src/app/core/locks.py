"""Keyed mutual exclusion for per-resource critical sections.

Admissions for the same resource must not interleave between the
conflict scan and the commit. ``ResourceLockRegistry`` hands out one
``asyncio.Lock`` per key, so work on different resources never waits
on each other, and forgets a key once nobody holds or awaits it.
"""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager

import structlog


logger = structlog.get_logger()


class ResourceLockRegistry:
    """Process-wide registry of per-key asyncio locks.

    Usage:
        async with registry.hold(resource_id):
            ...  # scan and commit
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._holders: dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """Acquire the lock for ``key`` for the duration of the block."""
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._holders[key] = self._holders.get(key, 0) + 1

        if lock.locked():
            logger.debug("resource_lock_wait", key=str(key))

        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def is_locked(self, key: Hashable) -> bool:
        """Return True while some coroutine holds the lock for ``key``."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)


# Shared by every admission in this process
resource_locks = ResourceLockRegistry()
