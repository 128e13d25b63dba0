"""Run command - registers the URL suites, runs them and prints the report.

CLI Examples:
    urlbench run                            # Run every suite, 1000 samples per case
    urlbench run -n 1000                    # 1000 samples per case
    urlbench run -n 1000 -w 50              # 50 untimed warm-up calls first
    urlbench run -s URL                     # Run one suite
    urlbench run --config bench.yaml        # Sampling policy from YAML
"""

import sys
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from urlbench.bench import InsufficientSamplesError, Reporter, Runner, Suite
from urlbench.models import RunConfig
from urlbench.suites import DEFAULT_MIN_SAMPLES, SUITE_TITLE, build_suites
from urlbench.utils.env import ENV_MIN_SAMPLES, ENV_WARMUP, EnvVarError, get_env
from urlbench.utils.logger import get_logger


def load_config(config_path: str) -> dict[str, Any]:
    """Load sampling settings from a YAML file.

    Config format:
        min_samples: 1000
        warmup: 50
        max_attempts_factor: 10

    Raises:
        click.ClickException: If file not found or invalid YAML.
    """
    path = Path(config_path)
    if not path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    import yaml  # type: ignore[import-untyped, unused-ignore]

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Error parsing config: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise click.ClickException("Config must be a YAML dictionary")

    return config


def resolve_config(
    min_samples: int | None = None,
    warmup: int | None = None,
    config_path: str | None = None,
    stop_on_error: bool = False,
) -> RunConfig:
    """Build the run configuration.

    Precedence: command-line options, then the YAML file, then the
    URLBENCH_* environment variables, then DEFAULT_MIN_SAMPLES for the
    sample count and RunConfig defaults for the rest.

    Raises:
        click.ClickException: If any source holds an invalid value.
    """
    settings: dict[str, Any] = {"min_samples": DEFAULT_MIN_SAMPLES}

    try:
        env_min_samples = get_env(ENV_MIN_SAMPLES, as_type=int)
        env_warmup = get_env(ENV_WARMUP, as_type=int)
    except EnvVarError as e:
        raise click.ClickException(str(e)) from e
    if env_min_samples is not None:
        settings["min_samples"] = env_min_samples
    if env_warmup is not None:
        settings["warmup"] = env_warmup

    if config_path:
        settings.update(load_config(config_path))

    if min_samples is not None:
        settings["min_samples"] = min_samples
    if warmup is not None:
        settings["warmup"] = warmup
    if stop_on_error:
        settings["stop_on_error"] = True

    try:
        return RunConfig.model_validate(settings)
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e


def select_suites(suites: list[Suite], labels: tuple[str, ...]) -> list[Suite]:
    """Keep the suites named in ``labels`` (all suites when empty).

    Raises:
        click.BadParameter: If a label does not match any suite.
    """
    if not labels:
        return suites

    by_label = {suite.label.lower(): suite for suite in suites}
    selected = []
    for label in labels:
        suite = by_label.get(label.lower())
        if suite is None:
            valid = ", ".join(s.label for s in suites)
            raise click.BadParameter(
                f"Unknown suite '{label}'. Valid: {valid}", param_hint="--suite"
            )
        selected.append(suite)
    return selected


def run_benchmarks(
    min_samples: int | None = None,
    warmup: int | None = None,
    config_path: str | None = None,
    suite_labels: tuple[str, ...] = (),
    stop_on_error: bool = False,
) -> None:
    """Register, run and report every selected suite.

    Exits with status 1 when any case failed to gather its samples.
    """
    log = get_logger("cli")
    config = resolve_config(min_samples, warmup, config_path, stop_on_error)
    suites = select_suites(build_suites(), suite_labels)

    log.info(
        f"Running {len(suites)} suites with min_samples={config.min_samples}, "
        f"warmup={config.warmup}, max_attempts={config.max_attempts}"
    )

    reporter = Reporter()
    reporter.print_header(SUITE_TITLE)

    runner = Runner(config)
    try:
        results = runner.run(suites)
    except InsufficientSamplesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    reporter.report(results)

    if runner.failed:
        failed = sum(len(result.failures) for result in results)
        click.echo(f"Error: {failed} case(s) failed to collect samples", err=True)
        sys.exit(1)
