"""Tests for time sources."""

import time

import pytest

from simpleswap.clock import Clock, ManualClock, SystemClock


class TestManualClock:
    def test_starts_at_given_time(self):
        assert ManualClock(100).now() == 100
        assert ManualClock().now() == 0

    def test_advance_and_set(self):
        clock = ManualClock(100)
        clock.advance(5)
        assert clock.now() == 105
        clock.set(200)
        assert clock.now() == 200

    def test_cannot_move_backwards(self):
        clock = ManualClock(100)
        with pytest.raises(ValueError, match="backwards"):
            clock.set(99)
        with pytest.raises(ValueError):
            clock.advance(-1)
        assert clock.now() == 100


class TestSystemClock:
    def test_tracks_wall_clock(self):
        before = int(time.time())
        now = SystemClock().now()
        assert before <= now <= int(time.time())

    def test_both_satisfy_protocol(self):
        assert isinstance(SystemClock(), Clock)
        assert isinstance(ManualClock(), Clock)
