"""Pydantic models for run configuration and structured results."""

from urlbench.models.bench_models import (
    CaseFailure,
    CaseSummary,
    RunConfig,
    SampleSet,
    SuiteResult,
)

__all__ = [
    "CaseFailure",
    "CaseSummary",
    "RunConfig",
    "SampleSet",
    "SuiteResult",
]
