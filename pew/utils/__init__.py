"""pew utilities - logging and environment helpers."""

from pew.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from pew.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
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
]
