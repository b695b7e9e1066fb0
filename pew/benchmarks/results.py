"""CSV emission of run results.

Usage:
    from pew.benchmarks.results import CsvReporter

    reporter = CsvReporter(sys.stdout)
    reporter.report(runner.run(entries))

Output:
    Name,Time (ns)
    gen_bench/bm_vector_pop/1024,103674
    gen_bench/bm_vector_pop/4096,412499
"""

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from pew.models.run_models import RunResult

HEADER = ("Name", "Time (ns)")
SEPARATOR = ","


def format_row(*fields: object) -> str:
    """Join fields into one newline-terminated CSV line."""
    return SEPARATOR.join(str(field) for field in fields) + "\n"


class CsvReporter:
    """Writes results as they arrive.

    The header is written once, before the first row (or on close() if no
    result was ever reported). Every row is flushed immediately, so results
    that completed before a failure are never lost.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize the reporter.

        Args:
            output: Stream to write to. Defaults to sys.stdout.
        """
        self._output = output if output is not None else sys.stdout
        self._header_written = False
        self._rows = 0

    def write_header(self) -> None:
        """Write the header row if it has not been written yet."""
        if self._header_written:
            return
        self._write(format_row(*HEADER))
        self._header_written = True

    def write_result(self, result: RunResult) -> None:
        """Write one result row."""
        self.write_header()
        self._write(format_row(result.qualified_name, result.mean_nanoseconds))
        self._rows += 1

    def report(self, results: Iterable[RunResult]) -> int:
        """Write every result, streaming, then close.

        Returns:
            Number of rows written by this call.
        """
        before = self._rows
        try:
            for result in results:
                self.write_result(result)
        finally:
            self.close()
        return self._rows - before

    def close(self) -> None:
        """Make sure the header exists and flush the stream."""
        self.write_header()
        self._output.flush()

    @property
    def rows_written(self) -> int:
        return self._rows

    def _write(self, content: str) -> None:
        self._output.write(content)
        self._output.flush()


def write_csv(results: Iterable[RunResult], path: str | Path) -> int:
    """Write results to a CSV file, returning the number of rows."""
    with open(path, "w", newline="") as f:
        return CsvReporter(f).report(results)
