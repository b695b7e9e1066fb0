"""Runner that times benchmark bodies until the stopping criterion holds.

Usage:
    from pew.benchmarks.runner import Runner
    from pew.models import RunConfig

    runner = Runner(RunConfig(min_runs=8))
    for result in runner.run(registry):
        print(result.qualified_name, result.mean_nanoseconds)

Runs are strictly sequential: entries in registration order, then bodies,
then ascending input sizes.
"""

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from pew.benchmarks.base import Benchmark, BenchmarkBody, BenchmarkEntry
from pew.benchmarks.filter import matches
from pew.benchmarks.state import State
from pew.benchmarks.timer import Clock, Timer
from pew.errors import BenchmarkConfigurationError, PewError
from pew.models.run_models import RunConfig, RunResult
from pew.utils.logger import Logger


class BenchmarkBodyError(PewError):
    """Raised when a benchmark body fails during a run.

    The original exception is available as __cause__. The failed run does not
    contribute to any reported mean.
    """

    def __init__(self, qualified_name: str, run_index: int, error: BaseException) -> None:
        self.qualified_name = qualified_name
        self.run_index = run_index
        super().__init__(
            f"Benchmark {qualified_name} failed on run {run_index}: "
            f"{type(error).__name__}: {error}"
        )


class Runner:
    """Executes benchmark entries and yields one RunResult per triple.

    Each run gets a fresh clone of the input state and a freshly started
    Timer. Cloning happens before the timer starts and is never measured.
    A triple keeps running until it has at least min_runs runs AND at least
    min_duration_nanoseconds of active time.

    Example:
        >>> runner = Runner(RunConfig(min_duration_nanoseconds=0, min_runs=1))
        >>> results = list(runner.run([entry]))
    """

    def __init__(
        self,
        config: RunConfig | None = None,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Stopping criterion and filter. Defaults to RunConfig().
            clock: Nanosecond clock handed to every Timer.
        """
        self.config = config or RunConfig()
        self._clock = clock

    @property
    def logger(self) -> logging.Logger:
        return Logger.get_or_default("runner")

    def run(self, entries: Iterable[Benchmark | BenchmarkEntry]) -> Iterator[RunResult]:
        """Validate all entries, then lazily run them in order.

        Raises:
            BenchmarkConfigurationError: Before anything runs, if an entry has
                no bodies.
            BenchmarkBodyError: When a body raises; results yielded before the
                failure remain valid.
        """
        built = [self._build(entry) for entry in entries]
        return self._run_entries(built)

    def _build(self, entry: Benchmark | BenchmarkEntry) -> BenchmarkEntry:
        if isinstance(entry, Benchmark):
            return entry.build()
        if not entry.bodies:
            raise BenchmarkConfigurationError(entry.name, "no benchmark bodies registered")
        return entry

    def _run_entries(self, entries: list[BenchmarkEntry]) -> Iterator[RunResult]:
        for entry in entries:
            yield from self.run_entry(entry)

    def run_entry(self, entry: BenchmarkEntry) -> Iterator[RunResult]:
        """Run every selected (body, size) pair of one entry.

        The generator runs at most once per size. With several bodies its
        output is cached for the later bodies, so every generated input of the
        entry stays in memory until the entry is done; a single-body entry
        keeps only the input currently being timed.
        """
        sizes = list(entry.input_sequence.sizes())
        if not sizes:
            self.logger.warning(
                f"{entry.name}: empty input range "
                f"({entry.input_sequence.lower_bound} > "
                f"{entry.input_sequence.upper_bound}), nothing to run"
            )
            return

        self.logger.info(
            f"Running {entry.name}: {len(entry.bodies)} bodies x {len(sizes)} sizes"
        )
        templates: dict[int, Any] = {}
        shared = len(entry.bodies) > 1
        for body_name, body in entry.bodies:
            for size in sizes:
                qualified_name = entry.qualified_name(body_name, size)
                if not matches(qualified_name, self.config.filter):
                    self.logger.debug(f"Skipping {qualified_name}")
                    continue
                if size in templates:
                    template = templates[size]
                else:
                    template = entry.input_sequence.generate(size)
                    if shared:
                        templates[size] = template
                yield self.run_body(qualified_name, body, template, clone=entry.clone)
                del template

    def run_body(
        self,
        qualified_name: str,
        body: BenchmarkBody,
        template: Any,
        clone: Callable[[Any], Any] | None = None,
    ) -> RunResult:
        """Time one body against one input until the stopping criterion holds.

        Args:
            qualified_name: Name reported for this triple.
            body: Callable receiving a State.
            template: Input value; cloned for every run.
            clone: Copy function; None passes the template through unchanged.

        Returns:
            RunResult with the floor mean of active time per run.

        Raises:
            BenchmarkBodyError: If the body raises.
        """
        min_runs = self.config.min_runs
        min_duration = self.config.min_duration_nanoseconds

        run_count = 0
        total_elapsed = 0
        while run_count < min_runs or total_elapsed < min_duration:
            value = clone(template) if clone is not None else template
            timer = Timer(self._clock)
            state = State(value, timer)
            timer.start()
            try:
                body(state)
            except Exception as e:
                raise BenchmarkBodyError(qualified_name, run_count + 1, e) from e
            total_elapsed += timer.elapsed()
            run_count += 1

        mean = total_elapsed // run_count
        self.logger.debug(
            f"{qualified_name}: {run_count} runs, {total_elapsed} ns total, "
            f"{mean} ns mean"
        )
        return RunResult(
            qualified_name=qualified_name,
            mean_nanoseconds=mean,
            run_count=run_count,
            total_nanoseconds=total_elapsed,
        )


def run_benchmarks(
    entries: Iterable[Benchmark | BenchmarkEntry],
    config: RunConfig | None = None,
) -> list[RunResult]:
    """Run entries to completion and collect their results."""
    return list(Runner(config).run(entries))
