"""Input size ranges and the generators that turn sizes into state.

Usage:
    from pew.benchmarks.inputs import InputSequence

    seq = InputSequence(1 << 10, 1 << 20, 4, generator=lambda n: list(range(n)))
    for size, state in seq.expand():
        ...
"""

from collections.abc import Callable, Iterator
from typing import Any

from pew.errors import BenchmarkConfigurationError

# Sizes live in the unsigned 64-bit domain
MIN_SIZE = 1
MAX_SIZE = (1 << 64) - 1

DEFAULT_LOWER_BOUND = 1
DEFAULT_UPPER_BOUND = 1 << 20
DEFAULT_MULTIPLIER = 2

Generator = Callable[[int], Any]


def compose(first: Generator | None, then: Generator) -> Generator:
    """Chain two generators so that then() receives first()'s output."""
    if first is None:
        return then

    def composed(size: int) -> Any:
        return then(first(size))

    return composed


class InputSequence:
    """Geometric sequence of input sizes with an optional generator.

    Expands to lower, lower*multiplier, lower*multiplier**2, ... and stops
    before the first value that exceeds upper_bound. The sequence is empty
    when lower_bound > upper_bound.

    Raises:
        BenchmarkConfigurationError: If the multiplier is not greater than 1
            or a bound falls outside [1, 2**64 - 1]. Validation happens here,
            so an invalid range never reaches the runner.
    """

    def __init__(
        self,
        lower_bound: int = DEFAULT_LOWER_BOUND,
        upper_bound: int = DEFAULT_UPPER_BOUND,
        multiplier: int = DEFAULT_MULTIPLIER,
        generator: Generator | None = None,
        benchmark: str | None = None,
    ) -> None:
        """Validate and store the range.

        Args:
            lower_bound: First size, at least 1.
            upper_bound: Inclusive upper limit.
            multiplier: Integer growth factor, greater than 1.
            generator: Optional callable mapping a size to the benchmark state.
            benchmark: Owning benchmark name, used in error messages.
        """
        for label, value in (
            ("lower_bound", lower_bound),
            ("upper_bound", upper_bound),
            ("multiplier", multiplier),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise BenchmarkConfigurationError(
                    benchmark, f"{label} must be an integer, got {value!r}"
                )

        if multiplier <= 1:
            raise BenchmarkConfigurationError(
                benchmark, f"multiplier must be greater than 1, got {multiplier}"
            )
        if not MIN_SIZE <= lower_bound <= MAX_SIZE:
            raise BenchmarkConfigurationError(
                benchmark,
                f"lower_bound {lower_bound} outside [{MIN_SIZE}, {MAX_SIZE}]",
            )
        if not MIN_SIZE <= upper_bound <= MAX_SIZE:
            raise BenchmarkConfigurationError(
                benchmark,
                f"upper_bound {upper_bound} outside [{MIN_SIZE}, {MAX_SIZE}]",
            )
        if generator is not None and not callable(generator):
            raise BenchmarkConfigurationError(benchmark, "generator must be callable")

        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.multiplier = multiplier
        self.generator = generator

    def with_generator(self, generator: Generator) -> "InputSequence":
        """Return a copy whose generator feeds into the given one."""
        return InputSequence(
            self.lower_bound,
            self.upper_bound,
            self.multiplier,
            generator=compose(self.generator, generator),
        )

    def sizes(self) -> Iterator[int]:
        """Yield raw sizes in ascending order without invoking the generator."""
        size = self.lower_bound
        while size <= self.upper_bound:
            yield size
            # upper_bound <= MAX_SIZE, so stopping here keeps size in range
            if size > self.upper_bound // self.multiplier:
                return
            size *= self.multiplier

    def generate(self, size: int) -> Any:
        """Return the state for one size: generator output or the size itself."""
        if self.generator is None:
            return size
        return self.generator(size)

    def expand(self) -> Iterator[tuple[int, Any]]:
        """Yield (size, state) pairs; call again to restart."""
        for size in self.sizes():
            yield size, self.generate(size)

    def __len__(self) -> int:
        return sum(1 for _ in self.sizes())

    def __repr__(self) -> str:
        return (
            f"InputSequence({self.lower_bound}, {self.upper_bound}, "
            f"{self.multiplier}, generator={self.generator!r})"
        )
