"""
Unit tests for clocks and time helpers.
"""

import time
from datetime import datetime, timedelta, timezone

import pytest

from neo_tokens import Clock, FixedClock, SystemClock
from neo_tokens.utils import timestamp_to_utc, to_seconds, to_timestamp, to_utc


class TestClocks:
    """Test clock implementations."""

    def test_system_clock_tracks_wall_time(self):
        before = time.time()
        now = SystemClock().now()
        after = time.time()

        assert before <= now <= after

    def test_clocks_satisfy_protocol(self):
        assert isinstance(SystemClock(), Clock)
        assert isinstance(FixedClock(), Clock)

    def test_fixed_clock(self):
        clock = FixedClock(1000)

        assert clock.now() == 1000
        assert clock.now() == 1000

    def test_fixed_clock_moves(self):
        clock = FixedClock(1000)

        assert clock.advance(30) == 1030
        assert clock.advance(timedelta(minutes=1)) == 1090
        clock.set(datetime.fromtimestamp(5000, timezone.utc))
        assert clock.now() == 5000


class TestTimeHelpers:
    """Test datetime utilities."""

    def test_to_timestamp(self):
        assert to_timestamp(1000) == 1000.0
        assert to_timestamp(datetime(1970, 1, 1, 0, 16, 40, tzinfo=timezone.utc)) == 1000.0

    def test_naive_datetime_treated_as_utc(self):
        assert to_timestamp(datetime(1970, 1, 1, 0, 16, 40)) == 1000.0

    @pytest.mark.parametrize("value", ["1000", None, True])
    def test_to_timestamp_rejects(self, value):
        with pytest.raises(TypeError):
            to_timestamp(value)

    def test_to_seconds(self):
        assert to_seconds(timedelta(hours=1)) == 3600.0
        assert to_seconds(2.5) == 2.5
        with pytest.raises(TypeError):
            to_seconds("60")

    def test_utc_conversion(self):
        eastern = timezone(timedelta(hours=-5))
        moment = datetime(2024, 1, 1, 7, 0, tzinfo=eastern)

        assert to_utc(moment) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert timestamp_to_utc(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
