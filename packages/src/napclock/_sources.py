"""Pluggable time sources and sleep effects for :class:`~napclock.FakeClock`.

Implements the Strategy pattern (GoF) for the two behaviours a fake
clock delegates to:

- a **time source** answers "what instant does the n-th ``now()``
  call return?"
- a **sleep effect** is told about every ``sleep()`` request and is
  where simulated time moves forward.

Strategies provided:
    - ``AutoAdvance(start)`` — both roles; simulated now moves only on sleep
    - ``FixedSequence(instants)`` — time source only; replays a script
    - ``CallbackSource(fn)`` / ``CallbackSleep(fn)`` — adapt plain callables

``FixedSequence`` deliberately has no ``apply`` method, so a clock
built from it cannot be given a sleep effect by accident.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable

from napclock._errors import ExhaustionError

logger = logging.getLogger(__name__)

NowCallback = Callable[[int], datetime]
"""Callable mapping a zero-based call index to an instant."""

SleepCallback = Callable[[timedelta], None]
"""Callable invoked with each requested sleep duration."""

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class TimeSource(Protocol):
    """Supplies the instant returned by the n-th time query."""

    def instant_at(self, index: int) -> datetime:
        """Return the instant for call number *index* (zero-based).

        The owning clock never passes the same index twice.
        """
        ...


@runtime_checkable
class SleepEffect(Protocol):
    """Reacts to a sleep request, typically by advancing simulated time."""

    def apply(self, duration: timedelta) -> None:
        """Handle a request to sleep for *duration*.

        Durations are passed through verbatim — zero and negative
        values included.
        """
        ...


# ---------------------------------------------------------------------------
# AutoAdvance
# ---------------------------------------------------------------------------


class AutoAdvance:
    """Simulated clock that only moves when told to sleep.

    Acts as both :class:`TimeSource` and :class:`SleepEffect`:
    ``instant_at`` ignores the index and returns the simulated now,
    ``apply`` moves it forward by the slept duration.

    Raises:
        TypeError: If *start* is not a :class:`~datetime.datetime`.
    """

    def __init__(self, start: datetime) -> None:
        if not isinstance(start, datetime):
            msg = f"start must be a datetime, got {type(start).__name__}"
            raise TypeError(msg)
        self._now = start

    @property
    def current(self) -> datetime:
        """The simulated now."""
        return self._now

    def instant_at(self, index: int) -> datetime:  # noqa: ARG002
        return self._now

    def apply(self, duration: timedelta) -> None:
        self._now = self._now + duration

    def __repr__(self) -> str:
        return f"AutoAdvance(current={self._now!r})"


# ---------------------------------------------------------------------------
# FixedSequence
# ---------------------------------------------------------------------------


class FixedSequence:
    """Replays a fixed script of instants, one per call index.

    Running past the end raises :class:`~napclock.ExhaustionError`.
    """

    def __init__(self, instants: Iterable[datetime]) -> None:
        self._instants: tuple[datetime, ...] = tuple(instants)

    def __len__(self) -> int:
        return len(self._instants)

    def instant_at(self, index: int) -> datetime:
        if index >= len(self._instants):
            logger.error(
                "Fixed sequence exhausted at call %d (%d instants scripted)",
                index,
                len(self._instants),
            )
            raise ExhaustionError(index, len(self._instants))
        return self._instants[index]

    def __repr__(self) -> str:
        return f"FixedSequence({len(self._instants)} instants)"


# ---------------------------------------------------------------------------
# Callback adapters
# ---------------------------------------------------------------------------


class CallbackSource:
    """Adapts a plain ``fn(index) -> datetime`` to :class:`TimeSource`."""

    def __init__(self, fn: NowCallback) -> None:
        self._fn = fn

    def instant_at(self, index: int) -> datetime:
        return self._fn(index)


class CallbackSleep:
    """Adapts a plain ``fn(duration) -> None`` to :class:`SleepEffect`."""

    def __init__(self, fn: SleepCallback) -> None:
        self._fn = fn

    def apply(self, duration: timedelta) -> None:
        self._fn(duration)


# ---------------------------------------------------------------------------
# Plain-function helpers
# ---------------------------------------------------------------------------


def default_sleeper_callbacks(start: datetime) -> tuple[NowCallback, SleepCallback]:
    """Build a now/sleep callback pair sharing one simulated now.

    The returned functions behave like :class:`AutoAdvance` split in
    two, which is handy when a test wants to wrap one of them::

        now_fn, sleep_fn = default_sleeper_callbacks(start)

        def noisy_sleep(d: timedelta) -> None:
            print("sleeping", d)
            sleep_fn(d)

        clock = FakeClock.from_callbacks(now_fn, noisy_sleep)
    """
    advance = AutoAdvance(start)
    return advance.instant_at, advance.apply


def sequence_callback(*instants: datetime) -> NowCallback:
    """Build a now-callback that replays *instants* in order.

    Raises :class:`~napclock.ExhaustionError` once the script runs out.
    """
    return FixedSequence(instants).instant_at
