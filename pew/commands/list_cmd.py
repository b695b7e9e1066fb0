"""List command - show which benchmarks a run would execute."""

import sys

import click

from pew.benchmarks.filter import matches
from pew.commands.run_cmd import build_config, load_registry
from pew.errors import PewError
from pew.utils.env import EnvVarError
from pew.utils.logger import Logger


def run_list(
    files: tuple[str, ...], filter: str | None, config_path: str | None = None
) -> None:
    """Print one qualified name per line, in run order, without running anything.

    The filter is resolved the same way as for ``pew run``: config file,
    then PEW_FILTER, then --filter.
    """
    try:
        selected = build_config(config_path, filter=filter).filter
        registry = load_registry(files)
    except (PewError, EnvVarError) as e:
        Logger.get("list").error(str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    count = 0
    for name in registry.qualified_names():
        if matches(name, selected):
            click.echo(name)
            count += 1

    click.echo(f"{count} benchmarks in {len(registry)} entries", err=True)
