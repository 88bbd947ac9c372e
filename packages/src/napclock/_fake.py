"""Deterministic fake clock.

Satisfies :class:`~napclock.ClockPort` (PEP 544 structural subtyping)
with a pluggable time source and an optional sleep effect — no real
time dependency once constructed.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from napclock._sources import (
    AutoAdvance,
    CallbackSleep,
    CallbackSource,
    FixedSequence,
    NowCallback,
    SleepCallback,
    SleepEffect,
    TimeSource,
)

logger = logging.getLogger(__name__)


class FakeClock:
    """Test double for ClockPort.

    Every ``now()`` call asks the time source for the instant at the
    current call index, then bumps the index.  Every ``sleep()`` call
    is handed to the sleep effect and logged in
    :meth:`recorded_sleeps`.  Without a sleep effect, ``sleep()`` does
    nothing at all and is not recorded.

    Construct through one of the class methods:

    - :meth:`start_now` (also plain ``FakeClock()``) — frozen at the
      real current instant, advanced only by ``sleep()``
    - :meth:`at` — frozen at a given instant, advanced only by ``sleep()``
    - :meth:`from_instants` — replays a fixed list of instants
    - :meth:`from_callbacks` — driven by caller-supplied functions

    Args:
        source: Time source; defaults to :class:`AutoAdvance` started
            at the real current time, paired with itself as the sleep
            effect.
        sleep_effect: Optional sleep effect.  Ignored when *source* is
            ``None``.

    Example::

        clock = FakeClock.at(datetime(2020, 4, 1, 12, tzinfo=UTC))
        clock.sleep(timedelta(seconds=10))
        assert clock.now() == datetime(2020, 4, 1, 12, 0, 10, tzinfo=UTC)
        assert clock.recorded_sleeps() == [timedelta(seconds=10)]
    """

    def __init__(
        self,
        source: TimeSource | None = None,
        sleep_effect: SleepEffect | None = None,
    ) -> None:
        if source is None:
            advance = AutoAdvance(datetime.now(UTC))
            source, sleep_effect = advance, advance
        self._source = source
        self._sleep_effect = sleep_effect
        self._index = 0
        self._sleeps: list[timedelta] = []

    # -- construction variants ----------------------------------------------

    @classmethod
    def start_now(cls) -> FakeClock:
        """Clock frozen at the real current instant."""
        return cls.at(datetime.now(UTC))

    @classmethod
    def at(cls, start: datetime) -> FakeClock:
        """Clock frozen at *start*; ``sleep(d)`` moves it forward by *d*."""
        advance = AutoAdvance(start)
        return cls(advance, advance)

    @classmethod
    def from_instants(cls, *instants: datetime) -> FakeClock:
        """Clock returning *instants* in order, one per ``now()`` call.

        A call past the last instant raises
        :class:`~napclock.ExhaustionError`.  ``sleep()`` is a no-op and
        is not recorded.
        """
        return cls(FixedSequence(instants))

    @classmethod
    def from_callbacks(
        cls,
        now_fn: NowCallback,
        sleep_fn: SleepCallback | None = None,
    ) -> FakeClock:
        """Clock driven by plain functions.

        Args:
            now_fn: Called with the zero-based call index on each
                ``now()``.
            sleep_fn: Called with each requested duration.  When
                ``None``, ``sleep()`` is a no-op and is not recorded.
        """
        sleep_effect = CallbackSleep(sleep_fn) if sleep_fn is not None else None
        return cls(CallbackSource(now_fn), sleep_effect)

    # -- state ----------------------------------------------------------------

    @property
    def call_index(self) -> int:
        """Number of completed ``now()`` calls."""
        return self._index

    # -- ClockPort ------------------------------------------------------------

    def now(self) -> datetime:
        """Return the instant the time source gives for the current index.

        The index only advances once the source has returned; if it
        raises, the exception propagates and the same index is offered
        again on the next call.
        """
        instant = self._source.instant_at(self._index)
        logger.debug("now() call %d -> %s", self._index, instant)
        self._index += 1
        return instant

    def sleep(self, duration: timedelta) -> None:
        """Apply and record *duration* if a sleep effect is configured."""
        if self._sleep_effect is None:
            return
        self._sleep_effect.apply(duration)
        self._sleeps.append(duration)
        logger.debug("sleep(%s) recorded (%d total)", duration, len(self._sleeps))

    def time_since(self, instant: datetime) -> timedelta:
        """Return ``now() - instant``.

        Consumes one ``now()`` call, which matters for
        :meth:`from_instants` clocks.
        """
        return self.now() - instant

    # -- sleep log ------------------------------------------------------------

    def recorded_sleeps(self) -> list[timedelta]:
        """Durations passed to ``sleep()``, in call order."""
        return list(self._sleeps)

    def clear_recorded_sleeps(self) -> None:
        """Empty the sleep log.  Call index and simulated time are untouched."""
        self._sleeps = []

    def __repr__(self) -> str:
        return (
            f"FakeClock(call_index={self._index}, "
            f"recorded_sleeps={len(self._sleeps)})"
        )
