"""Pivot benchmark CSV output into one column per benchmark family.

Turns the runner's output:

    Name,Time (ns)
    range_bench/bm_vector/1024,102541
    range_bench/bm_vector/4096,423289
    gen_bench/bm_vector/1024,102316
    gen_bench/bm_vector/4096,416523

into a table that plotting tools can read directly:

    Size,range_bench/bm_vector,gen_bench/bm_vector
    1024,102541,102316
    4096,423289,416523

Only the CSV grammar is shared with the runner; nothing here imports it.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pew.errors import PewError
from pew.utils.logger import Logger

INPUT_HEADER = "Name,Time (ns)"
SIZE_COLUMN = "Size"

_ROW_PATTERN = re.compile(
    r"^(?P<family>[^,]+/[^,]+)/(?P<size>[0-9]+),(?P<time>[0-9]+)$"
)


class TransposeParseError(PewError):
    """Raised when an input line does not match the result grammar."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


@dataclass
class TransposedTable:
    """Result table keyed by (family, size)."""

    families: list[str] = field(default_factory=list)
    cells: dict[int, dict[str, int]] = field(default_factory=dict)

    def add(self, family: str, size: int, nanoseconds: int) -> bool:
        """Store one cell. Returns False if the cell was already set."""
        row = self.cells.setdefault(size, {})
        if family in row:
            return False
        if family not in self.families:
            self.families.append(family)
        row[family] = nanoseconds
        return True

    @property
    def sizes(self) -> list[int]:
        return sorted(self.cells)

    def lines(self) -> Iterator[str]:
        """Yield the output CSV, header first, one newline-terminated row per size."""
        yield ",".join([SIZE_COLUMN, *self.families]) + "\n"
        for size in self.sizes:
            row = self.cells[size]
            values = [str(row.get(family, "")) for family in self.families]
            yield ",".join([str(size), *values]) + "\n"


def parse_line(line: str, line_number: int) -> tuple[str, int, int] | None:
    """Split one input line into (family, size, nanoseconds).

    Returns None for header and blank lines.

    Raises:
        TransposeParseError: If the line is neither a header nor a valid row.
    """
    text = line.rstrip("\r\n")
    if not text.strip() or text == INPUT_HEADER:
        return None

    match = _ROW_PATTERN.match(text)
    if match is None:
        raise TransposeParseError(
            line_number, text, "expected '<entry>/<body>/<size>,<nanoseconds>'"
        )
    return match["family"], int(match["size"]), int(match["time"])


def transpose(lines: Iterable[str]) -> TransposedTable:
    """Build the pivoted table from benchmark CSV lines.

    Families keep first-seen order; sizes are sorted ascending. A family with
    no result for some size gets an empty cell in that row.

    Raises:
        TransposeParseError: On a malformed row or a repeated (family, size).
    """
    log = Logger.get_or_default("transpose")
    table = TransposedTable()
    for line_number, line in enumerate(lines, start=1):
        parsed = parse_line(line, line_number)
        if parsed is None:
            continue
        family, size, nanoseconds = parsed
        if not table.add(family, size, nanoseconds):
            raise TransposeParseError(
                line_number,
                line.rstrip("\r\n"),
                f"duplicate result for {family} at size {size}",
            )
    log.debug(
        f"Transposed {len(table.families)} families over {len(table.cells)} sizes"
    )
    return table


def transpose_text(text: str) -> str:
    """Transpose a whole CSV document held in memory."""
    return "".join(transpose(text.splitlines()).lines())
