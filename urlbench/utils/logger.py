"""Centralized logging for urlbench.

The CLI configures logging once at startup; library code asks for named
child loggers of the ``urlbench`` root.

Usage:
    from urlbench.utils.logger import Logger

    Logger.configure(level="INFO", output="stderr")

    log = Logger.get("runner")
    log.info("Running suite URL...")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Process-wide logging setup for urlbench.

    Log records go to stderr by default so that they never interleave with
    benchmark reports written to stdout.

    Example:
        >>> Logger.configure(level="DEBUG", timestamps=False)
        >>> Logger.get("runner").debug("trial 3 failed")
    """

    _configured: bool = False
    _root_name: str = "urlbench"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "WARNING",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
    ) -> None:
        """Configure the root urlbench logger.

        Args:
            level: Log level name or LogLevel value.
            output: Where to send logs:
                - None or "stderr": sys.stderr (default)
                - "stdout": sys.stdout
                - str/Path: file path
                - TextIO: any file-like object
            timestamps: Prefix each record with its time.

        Raises:
            ValueError: If the level name or output is not understood.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        handler: logging.Handler
        if output is None or output == "stderr":
            handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            handler = logging.StreamHandler(sys.stdout)
        elif isinstance(output, str | Path):
            handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        parts = ["%(asctime)s"] if timestamps else []
        parts += ["%(levelname)s", "[%(name)s]", "%(message)s"]
        handler.setFormatter(logging.Formatter(" ".join(parts)))
        handler.setLevel(level.to_logging_level())

        root = logging.getLogger(cls._root_name)
        for existing in root.handlers[:]:
            root.removeHandler(existing)
            existing.close()
        root.setLevel(level.to_logging_level())
        root.addHandler(handler)
        root.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a configured logger.

        Args:
            name: Child name appended to "urlbench.". None returns the root.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        root = logging.getLogger(cls._root_name)
        root.setLevel(level.to_logging_level())
        for handler in root.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured


def get_logger(name: str) -> logging.Logger:
    """Return the urlbench logger for ``name`` without requiring configuration.

    Library code uses this so that embedding the harness in another program
    (or a test) works before, or without, ``Logger.configure()``.
    """
    if Logger.is_configured():
        return Logger.get(name)
    return logging.getLogger(f"{Logger._root_name}.{name}")
