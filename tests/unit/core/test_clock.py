"""Unit tests for clock helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from app.core.clock import as_utc, utc_now


pytestmark = pytest.mark.unit


class TestAsUtc:
    """Tests for datetime normalization."""

    def test_naive_is_taken_as_utc(self):
        assert as_utc(datetime(2030, 1, 1, 10)) == datetime(2030, 1, 1, 10, tzinfo=UTC)

    def test_aware_is_converted(self):
        value = datetime(2030, 1, 1, 5, tzinfo=timezone(timedelta(hours=-5)))

        result = as_utc(value)

        assert result == datetime(2030, 1, 1, 10, tzinfo=UTC)
        assert result.tzinfo is UTC


def test_utc_now_is_aware():
    assert utc_now().utcoffset() == timedelta(0)
