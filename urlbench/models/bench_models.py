"""Pydantic models for benchmark configuration and results."""

import math
import statistics
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ============================================================================
# Configuration
# ============================================================================


class RunConfig(BaseModel):
    """Sampling policy applied to every case of every suite in a run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_samples: int = Field(
        1, ge=0, description="Successful timed invocations required per case"
    )
    warmup: int = Field(
        0, ge=0, description="Untimed invocations per case before sampling starts"
    )
    max_attempts_factor: int = Field(
        10,
        ge=1,
        description="Attempt cap per case, as a multiple of min_samples",
    )
    stop_on_error: bool = Field(
        False,
        description="Re-raise a case's sampling failure instead of recording it",
    )

    @property
    def max_attempts(self) -> int:
        """Total timed attempts allowed per case."""
        return self.max_attempts_factor * self.min_samples


# ============================================================================
# Results
# ============================================================================


class SampleSet(BaseModel):
    """Raw durations collected for one case."""

    model_config = ConfigDict(frozen=True)

    case_name: str = Field(..., description="Name of the measured case")
    durations: tuple[float, ...] = Field(
        default=(), description="Elapsed seconds, one per successful invocation"
    )
    failures: int = Field(
        0, ge=0, description="Failed invocations observed while sampling"
    )

    @property
    def count(self) -> int:
        """Number of successful samples."""
        return len(self.durations)


class CaseSummary(BaseModel):
    """Aggregated statistics for one case."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Case name")
    count: int = Field(..., ge=0, description="Number of successful samples")
    mean: float = Field(..., ge=0, description="Mean duration in seconds")
    stdev: float = Field(
        0.0, ge=0, description="Sample standard deviation of durations in seconds"
    )
    ops_per_sec: float = Field(
        ..., ge=0, description="Throughput, the inverse of the mean duration"
    )
    failures: int = Field(0, ge=0, description="Failed invocations while sampling")

    @classmethod
    def from_samples(cls, samples: SampleSet) -> "CaseSummary":
        """Summarize a sample set.

        An empty set summarizes to zero mean and zero throughput. A mean of
        exactly zero (work below clock resolution) is reported as infinite
        throughput. The standard deviation needs at least two samples and is
        0.0 otherwise.
        """
        durations = samples.durations
        if not durations:
            mean = 0.0
            ops = 0.0
        else:
            mean = statistics.fmean(durations)
            ops = 1.0 / mean if mean > 0 else math.inf
        stdev = statistics.stdev(durations) if len(durations) > 1 else 0.0

        return cls(
            name=samples.case_name,
            count=samples.count,
            mean=mean,
            stdev=stdev,
            ops_per_sec=ops,
            failures=samples.failures,
        )

    @property
    def relative_error(self) -> float:
        """Standard deviation as a percentage of the mean (0.0 for a zero mean)."""
        if self.mean <= 0:
            return 0.0
        return self.stdev / self.mean * 100

    def relative_to(self, reference_ops: float) -> float:
        """Throughput as a multiple of ``reference_ops``.

        Degenerate references (zero or infinite) compare as 1.0. A case with
        infinite throughput against a finite reference is infinitely faster.
        """
        if reference_ops <= 0 or math.isinf(reference_ops):
            return 1.0
        if math.isinf(self.ops_per_sec):
            return math.inf
        return self.ops_per_sec / reference_ops


class CaseFailure(BaseModel):
    """A case that could not gather its minimum sample count."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Case name")
    message: str = Field(..., description="Diagnostic message")


class SuiteResult(BaseModel):
    """Per-suite output of a runner invocation.

    Cases are stored as tuples; ``summaries`` and ``failures`` are read-only
    views keyed by case name. Both may also be passed to the constructor as
    mappings.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Suite label")
    cases: tuple[CaseSummary, ...] = Field(
        default=(), description="Case summaries in registration order"
    )
    errors: tuple[CaseFailure, ...] = Field(
        default=(),
        description="Cases that could not gather enough samples",
    )
    baseline: str | None = Field(
        None, description="Case used as the relative-speed reference"
    )

    @model_validator(mode="before")
    @classmethod
    def _accept_mappings(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        summaries = data.pop("summaries", None)
        if summaries is not None:
            data["cases"] = tuple(summaries.values())
        failures = data.pop("failures", None)
        if failures is not None:
            data["errors"] = tuple(
                CaseFailure(name=name, message=message)
                for name, message in failures.items()
            )
        return data

    @property
    def summaries(self) -> Mapping[str, CaseSummary]:
        """Case summaries keyed by name, in registration order."""
        return MappingProxyType({summary.name: summary for summary in self.cases})

    @property
    def failures(self) -> Mapping[str, str]:
        """Diagnostics keyed by case name."""
        return MappingProxyType({error.name: error.message for error in self.errors})

    @property
    def failed(self) -> bool:
        """True if any case in the suite failed to gather its samples."""
        return bool(self.errors)

    def ranked(self) -> list[CaseSummary]:
        """Summaries fastest first; equal throughput keeps registration order."""
        return sorted(self.cases, key=lambda s: s.ops_per_sec, reverse=True)

    def reference_ops(self) -> float:
        """Throughput that relative speeds are expressed against.

        The baseline case when one is set and was summarized, otherwise the
        slowest case. 0.0 for a suite without summaries.
        """
        summaries = self.summaries
        if self.baseline is not None and self.baseline in summaries:
            return summaries[self.baseline].ops_per_sec
        if not self.cases:
            return 0.0
        return min(s.ops_per_sec for s in self.cases)

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a plain dictionary."""
        return {
            "label": self.label,
            "baseline": self.baseline,
            "summaries": {s.name: s.model_dump() for s in self.cases},
            "failures": dict(self.failures),
        }
