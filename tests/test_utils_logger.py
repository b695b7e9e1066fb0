"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from pew.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")


def test_get_or_default_without_configuration():
    """Test library code can log before the CLI configures anything."""
    Logger._configured = False
    assert Logger.get_or_default("runner").name == "pew.runner"
    assert Logger.get_or_default().name == "pew"


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[pew.test_config]" in content
    assert "Debug message" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_runner_logs_through_configured_logger():
    """Test engine modules log to the configured handler."""
    from pew.benchmarks.base import Benchmark
    from pew.benchmarks.runner import Runner
    from pew.models.run_models import RunConfig

    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    entry = Benchmark("logged").with_range(1, 1, 2).with_bench(lambda s: None, name="b")
    list(Runner(RunConfig(min_runs=1, min_duration_nanoseconds=0)).run([entry]))

    content = output.getvalue()
    assert "[pew.runner]" in content
    assert "logged/b/1: 1 runs" in content


def test_invalid_level():
    """Test unknown levels are rejected."""
    with pytest.raises(ValueError):
        Logger.configure(level="LOUD", output=StringIO())
