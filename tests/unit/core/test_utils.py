"""
Unit Tests for Core Utilities.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from notekeeper.core.utils import utc_now, utc_now_after


class TestUtcNow:
    def test_is_naive(self):
        assert utc_now().tzinfo is None

    def test_is_utc(self):
        reference = datetime.now(timezone.utc).replace(tzinfo=None)
        assert abs(utc_now() - reference) < timedelta(seconds=5)


class TestUtcNowAfter:
    def test_returns_now_when_previous_is_old(self):
        previous = datetime(2000, 1, 1)
        assert utc_now_after(previous) > previous + timedelta(days=1)

    def test_strictly_after_previous_on_same_tick(self):
        frozen = datetime(2024, 5, 1, 12, 0, 0)
        with patch("notekeeper.core.utils.utc_now", return_value=frozen):
            assert utc_now_after(frozen) == frozen + timedelta(microseconds=1)

    def test_strictly_after_previous_in_future(self):
        future = utc_now() + timedelta(hours=1)
        assert utc_now_after(future) > future
