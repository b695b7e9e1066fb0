"""Environment variable helpers with type coercion and logging.

Usage:
    from pew.utils.env import get_env

    min_runs = get_env("PEW_MIN_RUNS", default=8, as_type=int)
    min_duration = get_env("PEW_MIN_DURATION", default=1.0, as_type=float)
    bench_filter = get_env("PEW_FILTER", log=True)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

# Recognized variables
ENV_LOG_LEVEL = "PEW_LOG_LEVEL"
ENV_FILTER = "PEW_FILTER"
ENV_MIN_DURATION = "PEW_MIN_DURATION"
ENV_MIN_RUNS = "PEW_MIN_RUNS"


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
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        # "false", "0", "" are False
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
        return as_type(value)

    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    """Log an environment variable read if the logger is configured."""
    from pew.utils.logger import Logger

    if not Logger.is_configured():
        return
    Logger.get("env").debug(f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set or empty.
        as_type: Type to convert the value to (bool, int, float, str or any
            callable taking a string).
        log: If True, log the access (uses Logger if configured).

    Returns:
        The value, converted to as_type if specified, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("PEW_MIN_RUNS", default=8, as_type=int)
        8
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None or value == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value
