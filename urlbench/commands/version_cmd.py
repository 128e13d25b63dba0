"""
Version command - displays urlbench version information
"""

import click

from urlbench.version import URLBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display urlbench version information.

    Args:
        verbose: If True, include the release date
    """
    if verbose:
        click.echo(f"urlbench version {URLBENCH_VERSION.full_version()}")
    else:
        click.echo(f"urlbench {URLBENCH_VERSION}")
