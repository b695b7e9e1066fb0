"""pew - micro-benchmarks over geometric input ranges."""

from pew.benchmarks import (
    Benchmark,
    BenchmarkEntry,
    BenchmarkRegistry,
    CsvReporter,
    Runner,
    State,
    Timer,
    bench_name,
)
from pew.models import RunConfig, RunResult
from pew.version.pew_version import PEW_VERSION, Version

__version__ = str(PEW_VERSION)
__version_info__ = PEW_VERSION

__all__ = [
    "PEW_VERSION",
    "Benchmark",
    "BenchmarkEntry",
    "BenchmarkRegistry",
    "CsvReporter",
    "RunConfig",
    "RunResult",
    "Runner",
    "State",
    "Timer",
    "Version",
    "__version__",
    "__version_info__",
    "bench_name",
]
