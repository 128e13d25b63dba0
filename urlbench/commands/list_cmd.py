"""List command - shows the registered suites and their cases."""

import click

from urlbench.bench import Suite
from urlbench.suites import build_suites


def list_suites(suites: list[Suite] | None = None) -> None:
    """Print each suite label followed by its cases in registration order."""
    if suites is None:
        suites = build_suites()

    click.echo("Available Suites:")
    click.echo("-" * 50)

    if not suites:
        click.echo("  No suites registered.")
        return

    for suite in suites:
        click.echo(f"  {suite.label}")
        for case in suite:
            click.echo(f"      {case.name}")

    click.echo("-" * 50)
    click.echo(f"Total: {len(suites)} suites registered")
