"""Exception hierarchy shared across pew.

Component-specific errors (timer misuse, registry lookups, body failures,
transpose parsing) live beside their components and derive from PewError.
"""


class PewError(Exception):
    """Base exception for all pew errors."""

    pass


class BenchmarkConfigurationError(PewError):
    """Raised when a benchmark entry or run configuration is invalid.

    Always raised before any benchmark body executes.
    """

    def __init__(self, benchmark: str | None, reason: str) -> None:
        self.benchmark = benchmark
        self.reason = reason
        if benchmark:
            super().__init__(f"Invalid benchmark '{benchmark}': {reason}")
        else:
            super().__init__(f"Invalid configuration: {reason}")
