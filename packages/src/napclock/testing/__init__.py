"""Public test-support utilities for napclock.

Re-exports test doubles and factories so that consumer test suites
can import everything from a single ``napclock.testing`` namespace.

Provided symbols:

- :class:`FakeClock` — deterministic clock for timing tests.
- :func:`make_settings` — factory for ``ClockSettings`` without ``.env`` files.

The ``fake_clock``, ``system_clock`` and ``clock_settings`` fixtures
live in :mod:`napclock.testing._plugin`, registered through the
``pytest11`` entry point.
"""

from napclock._fake import FakeClock
from napclock.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
