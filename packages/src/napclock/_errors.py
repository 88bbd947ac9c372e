"""Exception types raised by napclock.

Only one condition is raised by the package itself: a scripted
sequence of instants running dry.  Failures raised inside
caller-supplied callbacks are never wrapped — they reach the caller
of ``now()`` / ``sleep()`` exactly as raised.
"""

from __future__ import annotations


class ClockError(Exception):
    """Base class for errors raised by napclock."""


class ExhaustionError(ClockError):
    """A fixed sequence was asked for more instants than it holds.

    Signals a test-authoring bug: the test scripted fewer instants
    than the code under test queries.  Never caught inside napclock.

    Attributes:
        index: The zero-based call index that could not be served.
        available: How many instants were scripted.
    """

    def __init__(self, index: int, available: int) -> None:
        self.index = index
        self.available = available
        super().__init__(
            f"ran out of scripted instants: call {index} requested, "
            f"only {available} available"
        )
