#!/usr/bin/env python3
"""urlbench CLI - Command-line interface for urlbench."""

import click

from urlbench.utils.env import ENV_LOG_LEVEL, get_env
from urlbench.utils.logger import Logger


@click.group()
def urlbench():
    """Compare URL implementations with side-by-side micro-benchmarks."""
    if not Logger.is_configured():
        # Default to WARNING; subcommands can adjust via set_level()
        level = get_env(ENV_LOG_LEVEL, default="WARNING")
        try:
            Logger.configure(level=level, timestamps=True)
        except ValueError as e:
            raise click.ClickException(
                f"Invalid {ENV_LOG_LEVEL} '{level}'. "
                "Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            ) from e


@urlbench.command()
@click.option(
    "--min-samples",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Successful samples per case (default: $URLBENCH_MIN_SAMPLES or 1000)",
)
@click.option(
    "--warmup",
    "-w",
    type=click.IntRange(min=0),
    default=None,
    help="Untimed warm-up calls per case (default: $URLBENCH_WARMUP or 0)",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    default=None,
    help="YAML file with min_samples, warmup and max_attempts_factor",
)
@click.option(
    "--suite",
    "-s",
    "suites",
    multiple=True,
    help="Run only the named suite (repeatable, e.g. -s URL)",
)
@click.option(
    "--stop-on-error",
    is_flag=True,
    help="Abort on the first case that cannot collect enough samples",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
def run(min_samples, warmup, config, suites, stop_on_error, verbose):
    r"""Run the URL benchmark suites and print a ranked comparison.

    \b
    Examples:
      urlbench run                     # Every suite, 1000 samples per case
      urlbench run -n 1000             # 1000 samples per case
      urlbench run -n 1000 -w 50       # With 50 warm-up calls per case
      urlbench run -s URL              # Only the URL suite
      urlbench run --config bench.yaml # Sampling policy from YAML
    """
    from urlbench.commands.run_cmd import run_benchmarks

    if verbose:
        Logger.set_level("DEBUG")

    run_benchmarks(
        min_samples=min_samples,
        warmup=warmup,
        config_path=config,
        suite_labels=suites,
        stop_on_error=stop_on_error,
    )


@urlbench.command(name="list")
def list_command():
    """List the registered suites and their cases."""
    from urlbench.commands.list_cmd import list_suites

    list_suites()


@urlbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display urlbench version information."""
    from urlbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    urlbench()
