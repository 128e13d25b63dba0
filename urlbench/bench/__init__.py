"""Benchmark engine for urlbench.

This module provides:
- measure: Times a single invocation of an operation
- Case / Suite: Named operations grouped for comparison
- Runner: Sequential sampling and summarization
- Reporter: Ranked, human-readable comparison output

Quick Start:
    from urlbench.bench import Reporter, Runner, Suite
    from urlbench.models import RunConfig

    suite = Suite.create("URL")
    suite.add("urllib", lambda: urlsplit(url))
    suite.add("httpx", lambda: httpx.URL(url))

    results = Runner(RunConfig(min_samples=1000)).run([suite])
    Reporter().report(results)
"""

from urlbench.bench.collector import Operation, measure
from urlbench.bench.reporter import (
    Reporter,
    format_duration,
    format_ops,
    format_relative,
)
from urlbench.bench.runner import (
    InsufficientSamplesError,
    Runner,
    RunnerError,
    TrialFailure,
)
from urlbench.bench.suite import (
    Case,
    CaseNotFoundError,
    DuplicateNameError,
    Suite,
    SuiteError,
    SuiteFrozenError,
)

__all__ = [
    # Suite
    "Case",
    "CaseNotFoundError",
    "DuplicateNameError",
    # Runner
    "InsufficientSamplesError",
    # Collector
    "Operation",
    # Reporter
    "Reporter",
    "RunnerError",
    "Runner",
    "Suite",
    "SuiteError",
    "SuiteFrozenError",
    "TrialFailure",
    "format_duration",
    "format_ops",
    "format_relative",
    "measure",
]
