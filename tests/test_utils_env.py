"""Tests for the environment variable utility."""

import pytest

from urlbench.utils.env import EnvVarTypeError, get_env


def test_get_env_basic(monkeypatch):
    """Set variables are returned; missing and empty ones fall back."""
    monkeypatch.setenv("URLBENCH_TEST_VAR", "test_value")
    monkeypatch.setenv("URLBENCH_EMPTY_VAR", "")
    monkeypatch.delenv("URLBENCH_MISSING_VAR", raising=False)

    assert get_env("URLBENCH_TEST_VAR") == "test_value"
    assert get_env("URLBENCH_MISSING_VAR", default="default") == "default"
    assert get_env("URLBENCH_MISSING_VAR") is None
    assert get_env("URLBENCH_EMPTY_VAR", default=3, as_type=int) == 3


def test_get_env_coercion(monkeypatch):
    """Common types are coerced; bad values raise."""
    monkeypatch.setenv("URLBENCH_BOOL_TRUE", "true")
    monkeypatch.setenv("URLBENCH_BOOL_FALSE", "off")
    monkeypatch.setenv("URLBENCH_INT", " 1000 ")
    monkeypatch.setenv("URLBENCH_FLOAT", "1.5")
    monkeypatch.setenv("URLBENCH_INVALID_INT", "lots")

    assert get_env("URLBENCH_BOOL_TRUE", as_type=bool) is True
    assert get_env("URLBENCH_BOOL_FALSE", as_type=bool) is False
    assert get_env("URLBENCH_INT", as_type=int) == 1000
    assert get_env("URLBENCH_FLOAT", as_type=float) == 1.5

    with pytest.raises(EnvVarTypeError) as exc_info:
        get_env("URLBENCH_INVALID_INT", as_type=int)
    assert exc_info.value.name == "URLBENCH_INVALID_INT"
