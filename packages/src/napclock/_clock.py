"""Wall-clock port and system adapter.

Provides ClockPort (Protocol), SystemClock and :func:`resolve_clock`.

Code under test takes an optional clock and passes it through
:func:`resolve_clock`.  ``None`` resolves to :class:`SystemClock`, so
"no fake configured" is an explicit state rather than an operation on
an absent object.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ClockPort(Protocol):
    """Source of "current time" and "sleep" for time-dependent code.

    The default implementation wraps ``datetime.now(UTC)`` and
    ``time.sleep()``.  Tests inject a :class:`~napclock.FakeClock`
    for reproducible timing.
    """

    def now(self) -> datetime:
        """Return the current instant."""
        ...

    def sleep(self, duration: timedelta) -> None:
        """Let *duration* elapse."""
        ...

    def time_since(self, instant: datetime) -> timedelta:
        """Return ``now() - instant``."""
        ...


class SystemClock:
    """Production clock backed by the real system clock.

    Satisfies :class:`ClockPort` via structural subtyping — no
    base-class inheritance required (PEP 544).  Keeps no state and
    records nothing.

    Usage::

        clock = SystemClock()
        start = clock.now()
        # ... some work ...
        elapsed = clock.time_since(start)
    """

    def now(self) -> datetime:
        """Return the real current time (UTC)."""
        return datetime.now(UTC)

    def sleep(self, duration: timedelta) -> None:
        """Block the calling thread for *duration*.

        Zero and negative durations return immediately.
        """
        seconds = duration.total_seconds()
        if seconds <= 0:
            return
        logger.debug("Real sleep for %s", duration)
        time.sleep(seconds)

    def time_since(self, instant: datetime) -> timedelta:
        """Return the real time elapsed since *instant*."""
        return self.now() - instant

    def __repr__(self) -> str:
        return "SystemClock()"


def resolve_clock(clock: ClockPort | None) -> ClockPort:
    """Return *clock*, or a :class:`SystemClock` when it is ``None``.

    Example::

        def poll(check, *, clock: ClockPort | None = None) -> None:
            clock = resolve_clock(clock)
            while not check():
                clock.sleep(timedelta(seconds=1))
    """
    if clock is None:
        return SystemClock()
    return clock
