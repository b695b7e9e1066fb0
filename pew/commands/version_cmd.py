"""
Version command - displays pew version information
"""

import click

from pew.version import PEW_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display pew version information.

    Args:
        verbose: If True, show the full source hash and release date
    """
    if verbose:
        click.echo(f"pew version {PEW_VERSION.full_version()}")
        click.echo(f"  Release Date: {PEW_VERSION.date.strftime('%Y-%m-%d')}")
        click.echo(f"  Source Hash:  {PEW_VERSION.hash}")
    else:
        click.echo(f"pew {PEW_VERSION}")
