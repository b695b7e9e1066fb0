#!/usr/bin/env python3
"""pew CLI - run micro-benchmarks and reshape their output."""

import sys

import click

from pew.utils.env import ENV_LOG_LEVEL, get_env
from pew.utils.logger import Logger


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def pew(verbose):
    """pew command-line tool for micro-benchmarks."""
    # stdout carries CSV, so logs always go to stderr
    level = "INFO" if verbose else get_env(ENV_LOG_LEVEL, default="WARNING")
    Logger.configure(level=level, output=sys.stderr, timestamps=True)


@pew.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--filter",
    "-f",
    "filter_",
    default=None,
    help="Only run benchmarks whose name contains this string",
)
@click.option(
    "--min-duration",
    "-d",
    type=float,
    default=None,
    help="Run each benchmark for at least this many seconds (default: 1)",
)
@click.option(
    "--min-runs",
    "-r",
    type=int,
    default=None,
    help="Run each benchmark at least this many times (default: 8)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    help="Run settings file (JSON or YAML)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write CSV results to this file instead of stdout",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging and stack traces",
)
def run(files, filter_, min_duration, min_runs, config_path, output, debug):
    r"""Run the benchmarks defined in FILES and print CSV results.

    \b
    Examples:
      pew run benches/vectors.py
      pew run benches/vectors.py -f gen -d 0.5 -r 16
      pew run benches/vectors.py --config pew.yaml -o results.csv
    """
    from pew.commands.run_cmd import run_benchmarks

    if debug:
        Logger.set_level("DEBUG")

    run_benchmarks(
        files,
        config_path=config_path,
        filter=filter_,
        min_duration=min_duration,
        min_runs=min_runs,
        output=output,
        debug=debug,
    )


@pew.command(name="list")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--filter",
    "-f",
    "filter_",
    default=None,
    help="Only list benchmarks whose name contains this string",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    help="Run settings file (JSON or YAML); only its filter is used",
)
def list_(files, filter_, config_path):
    """List the benchmarks FILES define without running them."""
    from pew.commands.list_cmd import run_list

    run_list(files, filter_, config_path)


@pew.command()
@click.option(
    "--file",
    "-f",
    "output_file",
    type=click.Path(),
    default=None,
    help="File to write the table to; input is echoed to stdout",
)
def transpose(output_file):
    r"""Pivot benchmark CSV from stdin into one column per benchmark.

    \b
    Examples:
      pew run benches.py | pew transpose
      pew run benches.py | pew transpose -f table.csv
    """
    from pew.commands.transpose_cmd import run_transpose

    run_transpose(click.get_text_stream("stdin"), output_file)


@pew.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display pew version information."""
    from pew.commands.version_cmd import run_version

    run_version(verbose=verbose)


def main() -> None:
    pew()


if __name__ == "__main__":
    main()
