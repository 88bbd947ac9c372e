"""napclock.

A test double for wall-clock time: deterministic ``now()`` and
``sleep()`` for time-dependent code, with a real-clock fallback.
"""

from importlib.metadata import PackageNotFoundError, version

from napclock._clock import ClockPort, SystemClock, resolve_clock
from napclock._errors import ClockError, ExhaustionError
from napclock._fake import FakeClock
from napclock._settings import ClockSettings
from napclock._sources import (
    AutoAdvance,
    CallbackSleep,
    CallbackSource,
    FixedSequence,
    NowCallback,
    SleepCallback,
    SleepEffect,
    TimeSource,
    default_sleeper_callbacks,
    sequence_callback,
)

try:
    __version__ = version("napclock")
except PackageNotFoundError:
    # Running from a source checkout without installed metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Clock
    "ClockPort",
    "FakeClock",
    "SystemClock",
    "resolve_clock",
    # Sources
    "AutoAdvance",
    "CallbackSleep",
    "CallbackSource",
    "FixedSequence",
    "NowCallback",
    "SleepCallback",
    "SleepEffect",
    "TimeSource",
    "default_sleeper_callbacks",
    "sequence_callback",
    # Errors
    "ClockError",
    "ExhaustionError",
    # Settings
    "ClockSettings",
]
