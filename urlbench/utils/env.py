"""Environment variable lookup with type coercion.

The harness reads its defaults from a handful of ``URLBENCH_*`` variables:

    URLBENCH_LOG_LEVEL    log level for the CLI (default WARNING)
    URLBENCH_MIN_SAMPLES  minimum successful samples per case
    URLBENCH_WARMUP       untimed warm-up calls per case

Usage:
    from urlbench.utils.env import get_env

    min_samples = get_env("URLBENCH_MIN_SAMPLES", default=1, as_type=int)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

ENV_LOG_LEVEL = "URLBENCH_LOG_LEVEL"
ENV_MIN_SAMPLES = "URLBENCH_MIN_SAMPLES"
ENV_WARMUP = "URLBENCH_WARMUP"


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a raw string value to ``as_type``.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.strip().lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value.strip())
        if as_type is float:
            return float(value.strip())
        if as_type is str:
            return value
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T]) -> T:
    ...


@overload
def get_env(name: str, *, default: T) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T]) -> T | None:
    ...


@overload
def get_env(name: str) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Unset and empty variables both yield ``default``.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is not set.
        as_type: bool, int, float, str or any single-argument constructor.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("URLBENCH_MIN_SAMPLES", default=1, as_type=int)
        1
    """
    value = os.environ.get(name)
    if value is None or value == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value
