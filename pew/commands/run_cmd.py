"""Run command - execute benchmark files and print CSV results.

CLI Examples:
    pew run benches/vectors.py                     # Run everything, CSV on stdout
    pew run benches/vectors.py -f gen              # Only names containing "gen"
    pew run benches/*.py -d 0.5 -r 16              # 0.5 s and 16 runs minimum
    pew run benches/vectors.py --config pew.yaml   # Settings from a file
    pew run benches/vectors.py -o results.csv      # Write CSV to a file
"""

import json
import math
import sys
import traceback
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from pew.benchmarks.registry import BenchmarkRegistry
from pew.benchmarks.results import CsvReporter
from pew.benchmarks.runner import Runner
from pew.errors import BenchmarkConfigurationError, PewError
from pew.models.run_models import NANOS_PER_SECOND, RunConfig
from pew.utils.env import (
    ENV_FILTER,
    ENV_MIN_DURATION,
    ENV_MIN_RUNS,
    EnvVarError,
    get_env,
)
from pew.utils.logger import Logger


def _load_config(config_path: str | None) -> dict[str, Any]:
    """Load run settings from a JSON or YAML file.

    Raises:
        BenchmarkConfigurationError: If the file is unreadable or not a mapping.
    """
    if not config_path:
        return {}

    path = Path(config_path)
    try:
        content = path.read_text()
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise BenchmarkConfigurationError(
            None, f"cannot read config file {config_path}: {e}"
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BenchmarkConfigurationError(
            None, f"config file {config_path} must contain a mapping"
        )
    return data


def build_config(
    config_path: str | None = None,
    filter: str | None = None,
    min_duration: float | None = None,
    min_runs: int | None = None,
) -> RunConfig:
    """Merge config file, environment and command-line settings.

    Precedence, lowest to highest: defaults, config file, PEW_* environment
    variables, explicit options.

    Raises:
        BenchmarkConfigurationError: If any value is invalid.
        EnvVarError: If an environment variable has the wrong type.
    """
    data = _load_config(config_path)

    env_filter = get_env(ENV_FILTER, log=True)
    env_duration = get_env(ENV_MIN_DURATION, as_type=float, log=True)
    env_runs = get_env(ENV_MIN_RUNS, as_type=int, log=True)

    for key, value in (
        ("filter", env_filter),
        ("min_duration_nanoseconds", _seconds_to_nanos(env_duration)),
        ("min_runs", env_runs),
        ("filter", filter),
        ("min_duration_nanoseconds", _seconds_to_nanos(min_duration)),
        ("min_runs", min_runs),
    ):
        if value is not None:
            data[key] = value

    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise BenchmarkConfigurationError(None, str(e)) from e


def _seconds_to_nanos(seconds: float | None) -> int | None:
    if seconds is None:
        return None
    if not math.isfinite(seconds):
        raise BenchmarkConfigurationError(
            None, f"min_duration must be finite, got {seconds}"
        )
    return int(seconds * NANOS_PER_SECOND)


def load_registry(files: tuple[str, ...]) -> BenchmarkRegistry:
    """Register the benchmarks of every file, in command-line order."""
    registry = BenchmarkRegistry()
    for path in files:
        registry.load_file(path)
    return registry


def run_benchmarks(
    files: tuple[str, ...],
    config_path: str | None,
    filter: str | None,
    min_duration: float | None,
    min_runs: int | None,
    output: str | None,
    debug: bool,
) -> None:
    """Load, run and report benchmarks; exits with status 1 on any error."""
    log = Logger.get("run")
    try:
        config = build_config(config_path, filter, min_duration, min_runs)
        registry = load_registry(files)
        log.info(
            f"Running {len(registry)} benchmarks "
            f"(min_runs={config.min_runs}, "
            f"min_duration={config.min_duration_nanoseconds} ns, "
            f"filter={config.filter!r})"
        )
        results = Runner(config).run(registry)
        if output:
            with open(output, "w", newline="") as f:
                rows = CsvReporter(f).report(results)
            click.echo(f"Wrote {rows} results to {output}", err=True)
        else:
            CsvReporter(sys.stdout).report(results)
    except (PewError, EnvVarError, OSError) as e:
        log.error(str(e))
        click.echo(f"Error: {e}", err=True)
        if debug:
            traceback.print_exc()
        sys.exit(1)
