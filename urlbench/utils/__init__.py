"""urlbench utilities - logging and environment helpers."""

from urlbench.utils.env import EnvVarError, EnvVarTypeError, get_env
from urlbench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
    get_logger,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
    "get_logger",
]
