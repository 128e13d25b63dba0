"""Human-readable comparison reports.

Usage:
    from urlbench.bench.reporter import Reporter

    reporter = Reporter()            # writes to sys.stdout
    reporter.print_header("URL: urllib vs. httpx")
    reporter.report(results)

    buffer = StringIO()
    Reporter(buffer).report(results)  # capture for tests
"""

import math
import platform
import sys
from collections.abc import Sequence
from io import StringIO
from typing import TextIO

import psutil

from urlbench.models.bench_models import CaseSummary, SuiteResult

_RULE_WIDTH = 72

_TIME_UNITS = (
    (1.0, "s"),
    (1e-3, "ms"),
    (1e-6, "us"),
    (1e-9, "ns"),
)


def format_duration(seconds: float) -> str:
    """Format a duration with an auto-scaled unit (e.g. '812.40 ns')."""
    if seconds <= 0:
        return "0 ns"
    for scale, unit in _TIME_UNITS:
        if seconds >= scale:
            return f"{seconds / scale:.2f} {unit}"
    return f"{seconds / 1e-9:.2f} ns"


def format_ops(ops_per_sec: float) -> str:
    """Format a throughput with thousands separators."""
    if math.isinf(ops_per_sec):
        return "inf"
    return f"{ops_per_sec:,.0f}"


def format_relative(multiple: float) -> str:
    """Format a relative speed multiple (e.g. 'x2.50', or 'inf')."""
    if math.isinf(multiple):
        return "inf"
    return f"x{multiple:.2f}"


class Reporter:
    """Writes ranked per-suite comparisons to an output sink.

    Cases are ranked fastest to slowest; cases with identical throughput keep
    their registration order. Relative speed is the case's throughput as a
    multiple of the suite's baseline case, or of its slowest case when no
    baseline is set. Results are only read, never modified.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize the reporter.

        Args:
            output: Sink to write to. Defaults to sys.stdout.
        """
        self._output = output if output is not None else sys.stdout

    def print_header(self, title: str) -> None:
        """Write a title banner followed by platform information."""
        buffer = StringIO()
        buffer.write("=" * _RULE_WIDTH + "\n")
        buffer.write(f"  {title}\n")
        buffer.write("=" * _RULE_WIDTH + "\n\n")

        buffer.write("Platform info:\n")
        for line in self._platform_lines():
            buffer.write(f"  {line}\n")
        buffer.write("\n")

        self._write(buffer.getvalue())

    def report(self, results: Sequence[SuiteResult]) -> None:
        """Write one ranked section per suite result."""
        buffer = StringIO()
        for result in results:
            self._format_suite(buffer, result)
        self._write(buffer.getvalue())

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def _format_suite(self, out: StringIO, result: SuiteResult) -> None:
        out.write(f"Suite: {result.label}\n")
        out.write("-" * _RULE_WIDTH + "\n")

        ranked = result.ranked()
        if not ranked and not result.failures:
            out.write("  (no cases)\n\n")
            return

        if ranked and all(summary.count == 0 for summary in ranked):
            out.write("  (no samples collected)\n")
        elif ranked:
            self._format_table(out, ranked, result.reference_ops(), result.baseline)

        for name, message in result.failures.items():
            out.write(f"  FAILED {name}: {message}\n")

        out.write("\n")

    def _format_table(
        self,
        out: StringIO,
        ranked: list[CaseSummary],
        reference_ops: float,
        baseline: str | None,
    ) -> None:
        width = max(len("Case"), *(len(s.name) for s in ranked))
        out.write(
            f"  {'#':>2}  {'Case':<{width}}  {'ops/sec':>14}  {'mean':>11}  "
            f"{'error':>9}  {'relative':>9}  {'samples':>7}\n"
        )
        for rank, summary in enumerate(ranked, start=1):
            error = f"±{summary.relative_error:.2f}%"
            relative = format_relative(summary.relative_to(reference_ops))
            marker = " (baseline)" if summary.name == baseline else ""
            out.write(
                f"  {rank:>2}  {summary.name:<{width}}  "
                f"{format_ops(summary.ops_per_sec):>14}  "
                f"{format_duration(summary.mean):>11}  "
                f"{error:>9}  {relative:>9}  {summary.count:>7}{marker}\n"
            )

    def _platform_lines(self) -> list[str]:
        uname = platform.uname()
        logical = psutil.cpu_count(logical=True) or 0
        physical = psutil.cpu_count(logical=False) or logical
        total_gib = psutil.virtual_memory().total / (1024**3)
        return [
            f"{uname.system} {uname.release} {uname.machine}",
            f"Python: {platform.python_implementation()} {platform.python_version()}",
            f"CPU: {platform.processor() or uname.machine} "
            f"({logical} logical / {physical} physical cores)",
            f"Memory: {total_gib:.1f} GiB",
        ]

    def _write(self, content: str) -> None:
        self._output.write(content)
        if self._output is not sys.stdout and self._output is not sys.stderr:
            self._output.flush()
