"""Benchmark definitions: the builder and the immutable entries it produces.

Usage:
    from pew.benchmarks import Benchmark, State

    def get_vec(n: int) -> list[int]:
        return list(range(n))

    def bm_vector_pop(state: State[list[int]]) -> None:
        vec = state.get_input()
        while vec:
            vec.pop()

    gen_bench = (
        Benchmark("gen_bench")
        .with_range(1 << 10, 1 << 20, 4)
        .with_generator(get_vec)
        .with_bench(bm_vector_pop)
    )

Each (benchmark, body, size) triple is reported as
"gen_bench/bm_vector_pop/1024".
"""

import copy
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from pew.benchmarks.inputs import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_MULTIPLIER,
    DEFAULT_UPPER_BOUND,
    Generator,
    InputSequence,
)
from pew.benchmarks.state import State
from pew.errors import BenchmarkConfigurationError

# Characters that would break the "entry/body/size,time" CSV grammar
_RESERVED_CHARS = (",", "/", "\n", "\r")


class BenchmarkBody(Protocol):
    """A callable under measurement."""

    def __call__(self, state: State[Any]) -> None:
        ...


def bench_name(body: Callable[..., Any]) -> str:
    """Derive a body name from a function, e.g. bm_vector_pop -> "bm_vector_pop"."""
    name = getattr(body, "__name__", None)
    if not name or name == "<lambda>":
        raise BenchmarkConfigurationError(
            None, f"cannot derive a name for {body!r}; pass name= explicitly"
        )
    return str(name)


def validate_name(name: str, benchmark: str | None = None) -> str:
    """Check that a benchmark or body name can appear in a qualified name.

    Raises:
        BenchmarkConfigurationError: If the name is empty or contains a
            reserved character.
    """
    if not isinstance(name, str) or not name:
        raise BenchmarkConfigurationError(benchmark, f"invalid name {name!r}")
    for char in _RESERVED_CHARS:
        if char in name:
            raise BenchmarkConfigurationError(
                benchmark, f"name {name!r} must not contain {char!r}"
            )
    return name


def _caller_module(depth: int) -> str | None:
    """Return __name__ of the module running `depth` frames above our caller."""
    return sys._getframe(depth + 1).f_globals.get("__name__")


@dataclass(frozen=True)
class BenchmarkEntry:
    """A named group of bodies sharing one input sequence.

    ``module`` is the __name__ of the module that defined the entry (or its
    builder); a benchmark file only loads the entries it defines itself.
    """

    name: str
    input_sequence: InputSequence
    bodies: tuple[tuple[str, BenchmarkBody], ...]
    clone: Callable[[Any], Any] = copy.deepcopy
    module: str | None = None

    def __post_init__(self) -> None:
        if self.module is None:
            object.__setattr__(self, "module", _caller_module(2))

    def qualified_name(self, body_name: str, size: int) -> str:
        """Return "entry/body/size"."""
        return f"{self.name}/{body_name}/{size}"

    @property
    def body_names(self) -> list[str]:
        return [name for name, _ in self.bodies]


class Benchmark:
    """Fluent builder for a BenchmarkEntry.

    The range defaults to (1, 1 << 20, 2). Generators are applied in the order
    they are added, each receiving the previous one's output, and must be set
    before any body is registered.

    Example:
        >>> bm = Benchmark("range_bench").with_range(16, 1024, 2)
        >>> bm = bm.with_bench(my_body).with_bench(other_body, name="other")
        >>> entry = bm.build()
    """

    def __init__(
        self,
        name: str,
        lower_bound: int = DEFAULT_LOWER_BOUND,
        upper_bound: int = DEFAULT_UPPER_BOUND,
        multiplier: int = DEFAULT_MULTIPLIER,
        generator: Generator | None = None,
    ) -> None:
        self.name = validate_name(name)
        self._sequence = InputSequence(
            lower_bound, upper_bound, multiplier, generator, benchmark=name
        )
        self._bodies: list[tuple[str, BenchmarkBody]] = []
        self._clone: Callable[[Any], Any] = copy.deepcopy
        self.module = _caller_module(1)

    # -------------------------------------------------------------------------
    # Range
    # -------------------------------------------------------------------------

    def with_lower_bound(self, lower_bound: int) -> "Benchmark":
        """Set the first input size."""
        return self.with_range(
            lower_bound, self._sequence.upper_bound, self._sequence.multiplier
        )

    def with_upper_bound(self, upper_bound: int) -> "Benchmark":
        """Set the inclusive upper limit for input sizes."""
        return self.with_range(
            self._sequence.lower_bound, upper_bound, self._sequence.multiplier
        )

    def with_mul(self, multiplier: int) -> "Benchmark":
        """Set the growth factor between consecutive sizes."""
        return self.with_range(
            self._sequence.lower_bound, self._sequence.upper_bound, multiplier
        )

    def with_range(
        self, lower_bound: int, upper_bound: int, multiplier: int
    ) -> "Benchmark":
        """Set the whole range at once."""
        self._sequence = InputSequence(
            lower_bound,
            upper_bound,
            multiplier,
            self._sequence.generator,
            benchmark=self.name,
        )
        return self

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def with_generator(self, generator: Generator) -> "Benchmark":
        """Add a generator, composed after any previously added ones.

        Raises:
            BenchmarkConfigurationError: If bodies were already registered,
                since they were written against the previous state type.
        """
        if self._bodies:
            raise BenchmarkConfigurationError(
                self.name, "with_generator() must be called before with_bench()"
            )
        if not callable(generator):
            raise BenchmarkConfigurationError(self.name, "generator must be callable")
        self._sequence = self._sequence.with_generator(generator)
        return self

    def with_clone(self, clone: Callable[[Any], Any]) -> "Benchmark":
        """Set how generated state is copied for each run (default deepcopy).

        The copy must be safe to mutate without affecting later runs.
        """
        if not callable(clone):
            raise BenchmarkConfigurationError(self.name, "clone must be callable")
        self._clone = clone
        return self

    # -------------------------------------------------------------------------
    # Bodies
    # -------------------------------------------------------------------------

    def with_bench(self, body: BenchmarkBody, name: str | None = None) -> "Benchmark":
        """Register a body. The name defaults to the function's __name__."""
        if not callable(body):
            raise BenchmarkConfigurationError(self.name, f"{body!r} is not callable")
        body_name = validate_name(
            name if name is not None else bench_name(body), self.name
        )
        if body_name in (existing for existing, _ in self._bodies):
            raise BenchmarkConfigurationError(
                self.name, f"body '{body_name}' registered twice"
            )
        self._bodies.append((body_name, body))
        return self

    def with_benches(self, *bodies: BenchmarkBody) -> "Benchmark":
        """Register several bodies, each named after its function."""
        for body in bodies:
            self.with_bench(body)
        return self

    @property
    def input_sequence(self) -> InputSequence:
        return self._sequence

    def build(self) -> BenchmarkEntry:
        """Freeze the builder into a BenchmarkEntry.

        Raises:
            BenchmarkConfigurationError: If no body was registered.
        """
        if not self._bodies:
            raise BenchmarkConfigurationError(self.name, "no benchmark bodies registered")
        return BenchmarkEntry(
            name=self.name,
            input_sequence=self._sequence,
            bodies=tuple(self._bodies),
            clone=self._clone,
            module=self.module,
        )

    def __repr__(self) -> str:
        return f"Benchmark({self.name!r}, {self._sequence!r}, bodies={len(self._bodies)})"
