"""Sequential benchmark runner.

Usage:
    from urlbench.bench.runner import Runner
    from urlbench.models import RunConfig

    runner = Runner(RunConfig(min_samples=1000))
    results = runner.run([url_suite, search_params_suite])
"""

import logging
from collections.abc import Sequence

from urlbench.bench.collector import measure
from urlbench.bench.suite import Case, Suite
from urlbench.models.bench_models import CaseSummary, RunConfig, SampleSet, SuiteResult
from urlbench.utils.logger import get_logger


class RunnerError(Exception):
    """Base exception for runner errors."""

    pass


class TrialFailure(RunnerError):
    """A single timed invocation of a case raised an exception.

    Recovered inside the runner: the attempt is counted but produces no sample.
    """

    def __init__(self, case_name: str, attempt: int, cause: BaseException) -> None:
        self.case_name = case_name
        self.attempt = attempt
        self.cause = cause
        super().__init__(
            f"Trial {attempt} of case '{case_name}' failed: "
            f"{type(cause).__name__}: {cause}"
        )


class InsufficientSamplesError(RunnerError):
    """Raised when a case cannot reach its minimum sample count within the cap."""

    def __init__(
        self,
        case_name: str,
        collected: int,
        required: int,
        attempts: int,
        last_failure: TrialFailure | None = None,
    ) -> None:
        self.case_name = case_name
        self.collected = collected
        self.required = required
        self.attempts = attempts
        self.last_failure = last_failure
        message = (
            f"Case '{case_name}' collected {collected}/{required} samples "
            f"in {attempts} attempts"
        )
        if last_failure is not None:
            cause = last_failure.cause
            message += f" (last error: {type(cause).__name__}: {cause})"
        super().__init__(message)


class Runner:
    """Runs suites one case at a time and summarizes their timings.

    Execution is single-threaded and strictly ordered: suites in the order
    given, cases in registration order, each case to completion before the
    next starts. A case whose operation hangs hangs the run.

    Example:
        >>> runner = Runner(RunConfig(min_samples=100))
        >>> results = runner.run([suite])
        >>> Reporter().report(results)
    """

    def __init__(self, config: RunConfig | None = None) -> None:
        """Initialize the runner.

        Args:
            config: Sampling policy. Defaults to RunConfig().
        """
        self._config = config or RunConfig()
        self._last_results: list[SuiteResult] = []

    @property
    def config(self) -> RunConfig:
        """Sampling policy used for every case."""
        return self._config

    @property
    def logger(self) -> logging.Logger:
        """Logger for runner progress and trial failures."""
        return get_logger("runner")

    @property
    def failed(self) -> bool:
        """True if the most recent run recorded any case failure."""
        return any(result.failed for result in self._last_results)

    def run(self, suites: Sequence[Suite]) -> list[SuiteResult]:
        """Run every suite in order.

        Args:
            suites: Suites to run, in report order.

        Returns:
            One SuiteResult per suite, in the same order.

        Raises:
            InsufficientSamplesError: Only when config.stop_on_error is set.
        """
        self._last_results = []
        for suite in suites:
            self._last_results.append(self.run_suite(suite))
        return list(self._last_results)

    def run_suite(self, suite: Suite) -> SuiteResult:
        """Run each case of ``suite`` in registration order.

        A case that cannot gather enough samples is recorded in the result's
        ``failures`` and the remaining cases still run. The suite is frozen
        first, so its cases cannot change once sampling begins.
        """
        suite.freeze()
        self.logger.info(f"Running suite '{suite.label}' ({len(suite)} cases)")

        summaries: dict[str, CaseSummary] = {}
        failures: dict[str, str] = {}

        for case in suite:
            try:
                samples = self.run_case(case)
            except InsufficientSamplesError as e:
                self.logger.warning(f"[{suite.label}] {e}")
                if self._config.stop_on_error:
                    raise
                failures[case.name] = str(e)
                continue

            summary = CaseSummary.from_samples(samples)
            summaries[case.name] = summary
            self.logger.debug(
                f"[{suite.label}] {case.name}: {summary.count} samples, "
                f"mean {summary.mean:.9f}s, {summary.ops_per_sec:,.0f} ops/sec"
            )

        return SuiteResult(
            label=suite.label,
            summaries=summaries,
            failures=failures,
            baseline=suite.baseline,
        )

    def run_case(self, case: Case) -> SampleSet:
        """Collect ``min_samples`` successful timings for one case.

        Warm-up calls run first and are never timed; their failures are
        logged and ignored. Timed attempts stop at ``config.max_attempts``.

        Raises:
            InsufficientSamplesError: If the attempt cap is reached first.
        """
        required = self._config.min_samples
        if required == 0:
            return SampleSet(case_name=case.name)

        self._warmup(case)

        durations: list[float] = []
        failures = 0
        attempts = 0
        last_failure: TrialFailure | None = None
        max_attempts = self._config.max_attempts

        while len(durations) < required and attempts < max_attempts:
            attempts += 1
            try:
                durations.append(measure(case.operation))
            except Exception as e:
                failures += 1
                last_failure = TrialFailure(case.name, attempts, e)
                self.logger.debug(str(last_failure))

        if len(durations) < required:
            raise InsufficientSamplesError(
                case.name, len(durations), required, attempts, last_failure
            )

        return SampleSet(
            case_name=case.name, durations=tuple(durations), failures=failures
        )

    def _warmup(self, case: Case) -> None:
        """Invoke the case ``config.warmup`` times without timing it."""
        for i in range(self._config.warmup):
            try:
                case.operation()
            except Exception as e:
                self.logger.debug(
                    f"Warm-up call {i + 1} of case '{case.name}' failed: {e}"
                )
