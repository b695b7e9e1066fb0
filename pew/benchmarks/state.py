"""Handle passed to every benchmark body."""

from typing import Generic, TypeVar

from pew.benchmarks.timer import Timer

T = TypeVar("T")


class State(Generic[T]):
    """Per-run benchmark state.

    Wraps the input for one run (the raw size, or a fresh clone of the
    generator output) and the run's Timer. Bodies call pause() and resume()
    around work that should not be measured.

    Example:
        >>> def bm_sorted(state: State[list[int]]) -> None:
        ...     data = state.get_input()
        ...     state.pause()
        ...     data.reverse()
        ...     state.resume()
        ...     sorted(data)
    """

    def __init__(self, input: T, timer: Timer) -> None:
        self._input = input
        self._timer = timer

    def get_input(self) -> T:
        """Return this run's input.

        The value is owned by this run and may be mutated freely.
        """
        return self._input

    def pause(self) -> None:
        """Pause the benchmark timer, e.g. around setup work."""
        self._timer.pause()

    def resume(self) -> None:
        """Resume the benchmark timer."""
        self._timer.resume()
