"""Half-open time intervals and the booking overlap rule.

An interval ``[start, end)`` includes its start and excludes its end,
so a booking ending at 12:00 and one starting at 12:00 do not collide.
Endpoints may be any totally ordered values: datetimes in the service,
plain integers in tests.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class TimeInterval(Generic[T]):
    """Immutable half-open interval ``[start, end)``.

    No ordering of ``start`` and ``end`` is enforced here; admission
    rejects empty or inverted ranges before any interval is compared.
    """

    start: T
    end: T

    def overlaps(self, other: "TimeInterval[T]") -> bool:
        """Return True if this interval collides with ``other``."""
        return overlaps(self, other)


def overlaps(new: TimeInterval[Any], existing: TimeInterval[Any]) -> bool:
    """Decide whether a candidate interval collides with an existing one.

    The four clauses cover: the new start inside the existing interval,
    the new end inside it, the new interval containing it, and the
    existing interval containing the new one. Taken together they are
    equivalent to ``not (new.end <= existing.start or new.start >= existing.end)``.
    """
    ns, ne = new.start, new.end
    es, ee = existing.start, existing.end
    return (
        (ns >= es and ns < ee)
        or (ne > es and ne <= ee)
        or (ns <= es and ne >= ee)
        or (ns > es and ne < ee)
    )


def find_conflict(
    candidate: TimeInterval[Any],
    items: Iterable[U],
    interval_of: Callable[[U], TimeInterval[Any]],
) -> U | None:
    """Return the first item whose interval the candidate overlaps.

    Every item is checked until a conflict is found; the scan stops at
    the first one.
    """
    for item in items:
        if overlaps(candidate, interval_of(item)):
            return item
    return None
