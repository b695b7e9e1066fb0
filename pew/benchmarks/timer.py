"""Stopwatch used to measure a single benchmark run.

Usage:
    from pew.benchmarks.timer import Timer

    timer = Timer()
    timer.start()
    timer.pause()   # setup that should not count
    timer.resume()
    nanos = timer.elapsed()
"""

import time
from collections.abc import Callable

from pew.errors import PewError

Clock = Callable[[], int]


class TimerError(PewError):
    """Raised when a Timer is used before start()."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} a timer that was never started")


class Timer:
    """Monotonic nanosecond stopwatch with pause/resume.

    Active time only accumulates while the timer is running. Pausing a paused
    timer and resuming a running timer are no-ops, so bodies do not have to
    pair their calls perfectly.

    Example:
        >>> timer = Timer(clock=iter([0, 10, 25, 30]).__next__)
        >>> timer.start()     # t=0
        >>> timer.pause()     # t=10, 10ns committed
        >>> timer.resume()    # t=25
        >>> timer.elapsed()   # t=30, 10 + 5
        15
    """

    def __init__(self, clock: Clock = time.perf_counter_ns) -> None:
        """Initialize a stopped timer.

        Args:
            clock: Zero-argument callable returning monotonic nanoseconds.
        """
        self._clock = clock
        self._started = False
        self._running = False
        self._elapsed_active = 0
        self._last_resume = 0

    def start(self) -> None:
        """Reset the accumulator and start timing."""
        self._elapsed_active = 0
        self._started = True
        self._running = True
        self._last_resume = self._clock()

    def pause(self) -> None:
        """Commit the open interval and stop accumulating."""
        now = self._clock()
        self._check_started("pause")
        if not self._running:
            return
        self._elapsed_active += now - self._last_resume
        self._running = False

    def resume(self) -> None:
        """Start a new interval."""
        self._check_started("resume")
        if self._running:
            return
        self._running = True
        self._last_resume = self._clock()

    def elapsed(self) -> int:
        """Return active nanoseconds, including the open interval if running."""
        now = self._clock()
        self._check_started("read")
        if self._running:
            return self._elapsed_active + (now - self._last_resume)
        return self._elapsed_active

    @property
    def running(self) -> bool:
        """True while the timer is accumulating."""
        return self._running

    def _check_started(self, operation: str) -> None:
        if not self._started:
            raise TimerError(operation)
