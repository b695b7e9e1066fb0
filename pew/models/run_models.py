"""Models for run configuration and results."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MIN_DURATION_NS = 1_000_000_000
DEFAULT_MIN_RUNS = 8
NANOS_PER_SECOND = 1_000_000_000


class RunConfig(BaseModel):
    """Settings for one invocation of the runner."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    filter: str | None = Field(
        None, description="Only run benchmarks whose qualified name contains this"
    )
    min_duration_nanoseconds: int = Field(
        DEFAULT_MIN_DURATION_NS,
        ge=0,
        description="Keep running until total active time reaches this",
    )
    min_runs: int = Field(
        DEFAULT_MIN_RUNS, ge=1, description="Keep running until this many runs"
    )

    @field_validator("filter")
    @classmethod
    def _empty_filter_matches_all(cls, value: str | None) -> str | None:
        return value or None

    @classmethod
    def from_seconds(
        cls,
        min_duration: float,
        min_runs: int = DEFAULT_MIN_RUNS,
        filter: str | None = None,
    ) -> "RunConfig":
        """Build a config from a duration in seconds, as the CLI accepts it."""
        return cls(
            filter=filter,
            min_duration_nanoseconds=int(min_duration * NANOS_PER_SECOND),
            min_runs=min_runs,
        )


class RunResult(BaseModel):
    """Mean time for one (entry, body, size) triple."""

    model_config = ConfigDict(frozen=True)

    qualified_name: str = Field(..., description="entry/body/size")
    mean_nanoseconds: int = Field(..., ge=0, description="Mean active time per run")
    run_count: int = Field(..., ge=1, description="Runs performed")
    total_nanoseconds: int = Field(..., ge=0, description="Sum of active time")
