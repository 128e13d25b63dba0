"""Tests for single-invocation timing."""

from unittest.mock import patch

import pytest

from urlbench.bench.collector import measure


def test_measure_invokes_operation_once():
    """The operation runs exactly once per measurement."""
    calls = []

    duration = measure(lambda: calls.append(1))

    assert calls == [1]
    assert duration >= 0


def test_measure_converts_nanoseconds_to_seconds():
    """Elapsed counter ticks are reported in seconds."""
    with patch(
        "urlbench.bench.collector.time.perf_counter_ns",
        side_effect=[1_000, 1_501_000],
    ):
        duration = measure(lambda: None)

    assert duration == pytest.approx(0.0015)


def test_measure_propagates_failures():
    """A failing operation raises and yields no duration."""

    def boom():
        raise RuntimeError("broken")

    with pytest.raises(RuntimeError, match="broken"):
        measure(boom)
