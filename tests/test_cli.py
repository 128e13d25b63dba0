"""Tests for the urlbench command-line interface."""

from io import StringIO
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from urlbench.bench.suite import Suite
from urlbench.cli import urlbench
from urlbench.commands.run_cmd import resolve_config, select_suites
from urlbench.models import RunConfig
from urlbench.suites import DEFAULT_MIN_SAMPLES
from urlbench.utils.logger import Logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Route log records to a buffer so they never hit a closed stream."""
    Logger.configure(level="WARNING", output=StringIO(), timestamps=False)


def _broken_suites(iterations: int = 100) -> list[Suite]:
    _ = iterations

    def broken():
        raise RuntimeError("cannot parse")

    suite = Suite.create("URL")
    suite.add("ok", lambda: None)
    suite.add("broken", broken)
    return [suite]


def test_run_prints_ranked_report():
    """A successful run exits 0 and prints every suite."""
    result = CliRunner().invoke(urlbench, ["run", "-n", "5"])

    assert result.exit_code == 0, result.output
    assert "Platform info:" in result.output
    assert "Suite: URL" in result.output
    assert "Suite: URLSearchParams.set" in result.output
    assert "Suite: URLSearchParams.append" in result.output


def test_run_single_suite():
    """--suite restricts the run to the named suite."""
    result = CliRunner().invoke(urlbench, ["run", "-n", "2", "-s", "url"])

    assert result.exit_code == 0, result.output
    assert "Suite: URL" in result.output
    assert "URLSearchParams" not in result.output


def test_run_unknown_suite_is_usage_error():
    """Unknown suite labels are rejected before running anything."""
    result = CliRunner().invoke(urlbench, ["run", "-s", "nope"])

    assert result.exit_code == 2
    assert "Unknown suite 'nope'" in result.output


def test_run_exits_nonzero_when_case_fails():
    """A case that never succeeds is reported and the exit code is 1."""
    with patch("urlbench.commands.run_cmd.build_suites", _broken_suites):
        result = CliRunner().invoke(urlbench, ["run", "-n", "1"])

    assert result.exit_code == 1
    assert "FAILED broken" in result.output


def test_run_stop_on_error_exits_nonzero():
    """--stop-on-error aborts on the first failing case."""
    with patch("urlbench.commands.run_cmd.build_suites", _broken_suites):
        result = CliRunner().invoke(urlbench, ["run", "--stop-on-error"])

    assert result.exit_code == 1


def test_list_shows_suites_and_cases():
    """List prints every suite with its cases."""
    result = CliRunner().invoke(urlbench, ["list"])

    assert result.exit_code == 0
    assert "URLSearchParams.append" in result.output
    assert "httpx" in result.output
    assert "Total: 3 suites registered" in result.output


def test_version_command():
    """Version prints the semantic version."""
    result = CliRunner().invoke(urlbench, ["version", "-v"])

    assert result.exit_code == 0
    assert result.output.startswith("urlbench version ")


def test_resolve_config_precedence(tmp_path, monkeypatch):
    """CLI options override the YAML file, which overrides the environment."""
    monkeypatch.setenv("URLBENCH_MIN_SAMPLES", "7")
    monkeypatch.setenv("URLBENCH_WARMUP", "2")

    assert resolve_config().min_samples == 7

    config_file = tmp_path / "bench.yaml"
    config_file.write_text("min_samples: 50\nmax_attempts_factor: 3\n")

    from_file = resolve_config(config_path=str(config_file))
    assert from_file.min_samples == 50
    assert from_file.warmup == 2
    assert from_file.max_attempts == 150

    overridden = resolve_config(min_samples=9, config_path=str(config_file))
    assert overridden.min_samples == 9


def test_resolve_config_rejects_bad_values(tmp_path, monkeypatch):
    """Invalid environment or file values become click errors."""
    monkeypatch.setenv("URLBENCH_MIN_SAMPLES", "many")
    with pytest.raises(click.ClickException):
        resolve_config()

    monkeypatch.delenv("URLBENCH_MIN_SAMPLES")
    config_file = tmp_path / "bench.yaml"
    config_file.write_text("- not\n- a mapping\n")
    with pytest.raises(click.ClickException):
        resolve_config(config_path=str(config_file))

    config_file.write_text("min_samples: -3\n")
    with pytest.raises(click.ClickException):
        resolve_config(config_path=str(config_file))


def test_select_suites_keeps_requested_order():
    """Selected suites follow the order given on the command line."""
    suites = [Suite.create("A"), Suite.create("B")]

    assert select_suites(suites, ()) == suites
    assert [s.label for s in select_suites(suites, ("b", "A"))] == ["B", "A"]


def test_resolve_config_defaults_to_full_sample_count(monkeypatch):
    """Without flag, file or environment the shipped suites take 1000 samples."""
    monkeypatch.delenv("URLBENCH_MIN_SAMPLES", raising=False)
    monkeypatch.delenv("URLBENCH_WARMUP", raising=False)

    config = resolve_config()

    assert config.min_samples == DEFAULT_MIN_SAMPLES == 1000
    assert config.warmup == 0
    assert RunConfig().min_samples == 1


def test_run_without_min_samples_uses_default(monkeypatch):
    """A bare run reports 1000 samples per case."""
    monkeypatch.delenv("URLBENCH_MIN_SAMPLES", raising=False)

    result = CliRunner().invoke(urlbench, ["run", "-s", "URL"])

    assert result.exit_code == 0, result.output
    rows = [line.split() for line in result.output.splitlines()]
    case_rows = [fields for fields in rows if fields and fields[0].isdigit()]
    assert sorted(row[1] for row in case_rows) == ["httpx", "urllib.parse"]
    assert all(row[-1] == "1000" for row in case_rows)


def test_invalid_log_level_env_is_a_click_error(monkeypatch):
    """An unknown URLBENCH_LOG_LEVEL exits cleanly with a message."""
    monkeypatch.setattr(Logger, "_configured", False)

    result = CliRunner().invoke(
        urlbench, ["version"], env={"URLBENCH_LOG_LEVEL": "loud"}
    )

    assert result.exit_code == 1
    assert "URLBENCH_LOG_LEVEL" in result.output
    assert "loud" in result.output
    assert not isinstance(result.exception, ValueError)
