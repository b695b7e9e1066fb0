"""Selecting which benchmarks run."""


def matches(qualified_name: str, filter: str | None) -> bool:
    """Return True if qualified_name should run under filter.

    An absent or empty filter matches everything; otherwise the filter must
    appear in the name as a case-sensitive substring.

    Example:
        >>> [n for n in ["a/gen/1", "a/range/1"] if matches(n, "gen")]
        ['a/gen/1']
    """
    if not filter:
        return True
    return filter in qualified_name
