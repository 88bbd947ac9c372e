"""Unit tests for napclock._clock — clock port and system adapter.

Test Techniques Used:
    - Specification-based Testing: Verifying ClockPort protocol
      contract
    - Protocol Conformance: isinstance checks for structural
      subtyping
    - Tolerance Checks: Real now/sleep compared against the system
      clock within a small window
"""

from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta

import pytest

from napclock._clock import ClockPort, SystemClock, resolve_clock
from napclock._fake import FakeClock

TOLERANCE = timedelta(milliseconds=50)


class TestSystemClock:
    """Tests for SystemClock, the unfaked fallback.

    Technique: Specification-based Testing — verifying public
    contract.
    """

    def test_satisfies_clock_port_protocol(self) -> None:
        """SystemClock is recognized as ClockPort."""
        assert isinstance(SystemClock(), ClockPort)

    def test_now_returns_aware_datetime(self) -> None:
        """now() returns a UTC-aware datetime."""
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.tzinfo == UTC

    def test_now_matches_real_time(self) -> None:
        """now() is within tolerance of the real current time."""
        expected = datetime.now(UTC)
        actual = SystemClock().now()
        assert abs(actual - expected) <= TOLERANCE

    def test_now_is_not_frozen(self, system_clock: SystemClock) -> None:
        """Real time moves between calls."""
        first = system_clock.now()
        time.sleep(0.01)
        second = system_clock.now()
        assert second > first

    @pytest.mark.slow
    def test_sleep_blocks_for_duration(self) -> None:
        """sleep() really blocks for about the requested duration."""
        duration = timedelta(milliseconds=500)
        tolerance = duration / 10

        before = time.monotonic()
        SystemClock().sleep(duration)
        elapsed = timedelta(seconds=time.monotonic() - before)

        assert abs(elapsed - duration) <= tolerance

    @pytest.mark.parametrize(
        "duration",
        [timedelta(0), timedelta(seconds=-5)],
        ids=["zero", "negative"],
    )
    def test_non_positive_sleep_returns_immediately(
        self,
        duration: timedelta,
    ) -> None:
        """Zero and negative durations do not block or raise."""
        before = time.monotonic()
        SystemClock().sleep(duration)
        assert time.monotonic() - before < TOLERANCE.total_seconds()

    def test_time_since_uses_real_time(self) -> None:
        """time_since() measures against the real clock."""
        before = datetime.now(UTC) - timedelta(minutes=25)
        actual = SystemClock().time_since(before)
        assert abs(actual - timedelta(minutes=25)) <= TOLERANCE

    def test_has_no_sleep_log(self) -> None:
        """The real clock keeps no recording surface."""
        assert not hasattr(SystemClock(), "recorded_sleeps")


class TestClockPortProtocol:
    """Tests for ClockPort protocol definition.

    Technique: Protocol Conformance — structural subtyping checks.
    """

    def test_fake_clock_satisfies_protocol(self) -> None:
        """FakeClock satisfies ClockPort without inheriting from it."""
        assert isinstance(FakeClock(), ClockPort)

    def test_custom_class_satisfies_protocol(self) -> None:
        """A class with now/sleep/time_since satisfies ClockPort."""

        class HandRolled:
            def now(self) -> datetime:
                return datetime(2020, 1, 1, tzinfo=UTC)

            def sleep(self, duration: timedelta) -> None:
                pass

            def time_since(self, instant: datetime) -> timedelta:
                return self.now() - instant

        assert isinstance(HandRolled(), ClockPort)

    def test_class_without_sleep_does_not_satisfy(self) -> None:
        """A class with only now() does not satisfy ClockPort."""

        class NowOnly:
            def now(self) -> datetime:
                return datetime(2020, 1, 1, tzinfo=UTC)

        assert not isinstance(NowOnly(), ClockPort)


class TestResolveClock:
    """resolve_clock: explicit fallback to the real clock.

    Technique: Equivalence Partitioning — ``None`` vs configured clock.
    """

    def test_none_resolves_to_system_clock(self) -> None:
        """No clock configured means the real clock."""
        assert isinstance(resolve_clock(None), SystemClock)

    def test_configured_clock_passes_through(self) -> None:
        """A configured clock is returned unchanged."""
        fake = FakeClock()
        assert resolve_clock(fake) is fake

    def test_fallback_records_nothing(self) -> None:
        """Sleeping on the resolved real clock leaves no trace anywhere."""
        clock = resolve_clock(None)
        clock.sleep(timedelta(0))
        assert not hasattr(clock, "recorded_sleeps")
