"""Registered benchmark suites."""

from urlbench.suites.url_suites import DEFAULT_MIN_SAMPLES, SUITE_TITLE, build_suites

__all__ = ["DEFAULT_MIN_SAMPLES", "SUITE_TITLE", "build_suites"]
