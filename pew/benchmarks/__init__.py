"""Benchmark engine for pew.

Provides the builder used to declare benchmarks, the registry that orders
them, the runner that times them and the CSV reporter that emits results.
"""

from pew.benchmarks.base import (
    Benchmark,
    BenchmarkBody,
    BenchmarkEntry,
    bench_name,
)
from pew.benchmarks.filter import matches
from pew.benchmarks.inputs import InputSequence
from pew.benchmarks.registry import (
    BenchmarkLoadError,
    BenchmarkNameCollisionError,
    BenchmarkNotFoundError,
    BenchmarkRegistry,
    BenchmarkRegistryError,
)
from pew.benchmarks.results import CsvReporter
from pew.benchmarks.runner import BenchmarkBodyError, Runner, run_benchmarks
from pew.benchmarks.state import State
from pew.benchmarks.timer import Timer, TimerError

__all__ = [
    "Benchmark",
    "BenchmarkBody",
    "BenchmarkBodyError",
    "BenchmarkEntry",
    "BenchmarkLoadError",
    "BenchmarkNameCollisionError",
    "BenchmarkNotFoundError",
    "BenchmarkRegistry",
    "BenchmarkRegistryError",
    "CsvReporter",
    "InputSequence",
    "Runner",
    "State",
    "Timer",
    "TimerError",
    "bench_name",
    "matches",
    "run_benchmarks",
]
