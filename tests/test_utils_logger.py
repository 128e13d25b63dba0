"""Tests for the centralized logging utility."""

import logging
from io import StringIO

import pytest

from urlbench.utils.logger import Logger, LoggerNotConfiguredError, get_logger


def test_logger_unconfigured():
    """Strict access before configuration raises; get_logger does not."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")
    with pytest.raises(LoggerNotConfiguredError):
        Logger.set_level("DEBUG")

    log = get_logger("runner")
    assert isinstance(log, logging.Logger)
    assert log.name == "urlbench.runner"


def test_logger_configuration():
    """Configured records carry level and logger name."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    get_logger("runner").debug("Trial 3 of case 'parse' failed")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[urlbench.runner]" in content
    assert "Trial 3 of case 'parse' failed" in content


def test_logger_set_level():
    """Changing the level takes effect without reconfiguring."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_rejects_unknown_level():
    """Unknown level names are refused."""
    with pytest.raises(ValueError):
        Logger.configure(level="CHATTY", output=StringIO())
