"""Pydantic models for configuration and results."""

from pew.models.run_models import (
    DEFAULT_MIN_DURATION_NS,
    DEFAULT_MIN_RUNS,
    RunConfig,
    RunResult,
)

__all__ = [
    "DEFAULT_MIN_DURATION_NS",
    "DEFAULT_MIN_RUNS",
    "RunConfig",
    "RunResult",
]
