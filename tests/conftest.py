"""Shared fixtures for pew tests."""

import logging

import pytest

from pew.utils.logger import Logger


class FakeClock:
    """Deterministic nanosecond clock; benchmarks advance it explicitly."""

    def __init__(self, start: int = 1_000) -> None:
        self.now = start
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now

    def advance(self, nanoseconds: int) -> None:
        self.now += nanoseconds


@pytest.fixture
def clock():
    """A fresh fake clock."""
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the global pew logger unconfigured after every test."""
    yield
    logger = logging.getLogger("pew")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    Logger._configured = False
