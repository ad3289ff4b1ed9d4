"""Tests for periodic timers."""
import pytest
from src.core.scheduler import PeriodicTimer


class TestPeriodicTimer:
    """Tests for PeriodicTimer."""

    def test_fires_after_interval(self):
        """Test that nothing fires before one full period."""
        calls = []
        timer = PeriodicTimer(100, calls.append, start=0)

        assert not timer.update(99)
        assert timer.update(100)
        assert calls == [100]

    def test_regular_cadence(self):
        """Test one call per elapsed period."""
        calls = []
        timer = PeriodicTimer(100, calls.append, start=0)

        for now in range(0, 1001, 10):
            timer.update(now)

        assert calls == [100, 200, 300, 400, 500, 600, 700, 800, 900, 1000]
        assert timer.fire_count == 10

    def test_missed_periods_are_not_replayed(self):
        """Test that a long stall causes one call and a resync."""
        calls = []
        timer = PeriodicTimer(100, calls.append, start=0)

        timer.update(550)
        timer.update(560)

        assert calls == [550]
        assert timer.next_fire == 650

    def test_cancel(self):
        """Test that a cancelled timer stays quiet."""
        calls = []
        timer = PeriodicTimer(100, calls.append, start=0)

        timer.cancel()

        assert not timer.update(1000)
        assert calls == []
        assert timer.cancelled

    def test_invalid_interval(self):
        """Test that a non-positive interval is rejected."""
        with pytest.raises(ValueError):
            PeriodicTimer(0, lambda now: None, start=0)
