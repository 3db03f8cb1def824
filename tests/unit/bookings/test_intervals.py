"""Unit tests for half-open interval overlap."""

from datetime import UTC, datetime
from itertools import product
from types import SimpleNamespace

import pytest

from app.modules.bookings.intervals import TimeInterval, find_conflict, overlaps


pytestmark = pytest.mark.unit


def at(hour: int, minute: int = 0) -> datetime:
    """An instant on 2030-01-01 UTC."""
    return datetime(2030, 1, 1, hour, minute, tzinfo=UTC)


# Every non-empty interval with integer endpoints in [0, 6]
POINTS = range(7)
INTERVALS = [TimeInterval(s, e) for s, e in product(POINTS, POINTS) if s < e]


class TestOverlaps:
    """Tests for the overlap predicate."""

    @pytest.mark.parametrize(
        ("new", "existing"),
        list(product(INTERVALS, INTERVALS)),
        ids=lambda i: f"[{i.start},{i.end})",
    )
    def test_matches_closed_form(self, new: TimeInterval[int], existing: TimeInterval[int]):
        """Overlap holds exactly when neither interval ends before the other starts."""
        expected = not (new.end <= existing.start or new.start >= existing.end)

        assert overlaps(new, existing) is expected

    @pytest.mark.parametrize(
        ("a", "b"),
        list(product(INTERVALS, INTERVALS)),
        ids=lambda i: f"[{i.start},{i.end})",
    )
    def test_is_symmetric(self, a: TimeInterval[int], b: TimeInterval[int]):
        """Swapping the candidate and the existing interval does not change the result."""
        assert overlaps(a, b) is overlaps(b, a)

    def test_touching_end_to_start_does_not_overlap(self):
        """A booking ending at 12:00 and one starting at 12:00 coexist."""
        assert overlaps(TimeInterval(at(12), at(13)), TimeInterval(at(10), at(12))) is False
        assert overlaps(TimeInterval(at(9), at(10)), TimeInterval(at(10), at(12))) is False

    def test_identical_intervals_overlap(self):
        """The same range twice is a conflict."""
        interval = TimeInterval(at(10), at(12))

        assert overlaps(interval, interval) is True

    def test_nested_intervals_overlap(self):
        """Containment in either direction is a conflict."""
        outer = TimeInterval(at(9), at(14))
        inner = TimeInterval(at(10), at(11))

        assert overlaps(inner, outer) is True
        assert overlaps(outer, inner) is True

    def test_partial_overlap(self):
        """Ranges sharing part of their span conflict."""
        existing = TimeInterval(at(10), at(12))

        assert overlaps(TimeInterval(at(11), at(13)), existing) is True
        assert overlaps(TimeInterval(at(10, 30), at(11, 30)), existing) is True
        assert overlaps(TimeInterval(at(9), at(10, 30)), existing) is True

    def test_disjoint_intervals(self):
        """Ranges separated by a gap do not conflict."""
        assert overlaps(TimeInterval(at(8), at(9)), TimeInterval(at(10), at(12))) is False

    def test_method_delegates_to_predicate(self):
        """TimeInterval.overlaps uses the same rule."""
        assert TimeInterval(1, 3).overlaps(TimeInterval(2, 4)) is True
        assert TimeInterval(1, 2).overlaps(TimeInterval(2, 4)) is False


class TestFindConflict:
    """Tests for scanning existing bookings."""

    def test_returns_none_for_empty_collection(self):
        """Nothing to collide with."""
        assert find_conflict(TimeInterval(1, 2), [], lambda item: item) is None

    def test_returns_first_conflicting_item(self):
        """The scan returns the first item whose interval collides."""
        items = [
            SimpleNamespace(id="a", interval=TimeInterval(0, 1)),
            SimpleNamespace(id="b", interval=TimeInterval(2, 4)),
            SimpleNamespace(id="c", interval=TimeInterval(3, 5)),
        ]

        result = find_conflict(TimeInterval(3, 4), items, lambda item: item.interval)

        assert result is not None
        assert result.id == "b"

    def test_returns_none_when_only_touching(self):
        """Adjacent bookings on both sides leave the gap free."""
        items = [TimeInterval(0, 2), TimeInterval(4, 6)]

        assert find_conflict(TimeInterval(2, 4), items, lambda item: item) is None
