"""Transpose command - pivot benchmark CSV read from stdin.

CLI Examples:
    pew run benches.py | pew transpose              # Table on stdout
    pew run benches.py | pew transpose -f out.csv   # Echo input, table to file
"""

import sys
from collections.abc import Iterator
from typing import TextIO

import click

from pew.transpose import TransposeParseError, transpose
from pew.utils.logger import Logger


def _echo_lines(lines: TextIO, echo: TextIO) -> Iterator[str]:
    for line in lines:
        echo.write(line)
        yield line


def run_transpose(
    input: TextIO,
    output_file: str | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Transpose input to stdout, or to output_file while echoing input to stdout."""
    stdout = stdout if stdout is not None else sys.stdout
    lines = _echo_lines(input, stdout) if output_file else input

    try:
        table = transpose(lines)
    except TransposeParseError as e:
        Logger.get("transpose").error(str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_file:
        try:
            with open(output_file, "w", newline="") as f:
                f.writelines(table.lines())
            return
        except OSError as e:
            Logger.get("transpose").error(f"Could not open {output_file}: {e}")
            click.echo(f"Error: Could not open {output_file}: {e}", err=True)
            click.echo("Displaying results below:", err=True)

    stdout.writelines(table.lines())
    stdout.flush()
