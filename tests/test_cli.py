"""Tests for the pew command-line interface."""

import re
import textwrap

import pytest
from click.testing import CliRunner

from pew.cli import pew

ROW = re.compile(r"^[^,]+/[^,]+/[0-9]+,[0-9]+$")


@pytest.fixture
def bench_file(tmp_path):
    """A small benchmark file with two bodies."""
    path = tmp_path / "benches.py"
    path.write_text(
        textwrap.dedent(
            """
            from pew import Benchmark

            def bm_sum(state):
                sum(range(state.get_input()))

            def bm_gen(state):
                state.get_input().copy()

            ranges = Benchmark("ranges").with_range(1, 4, 2).with_bench(bm_sum)
            gens = (
                Benchmark("gens")
                .with_range(1, 4, 2)
                .with_generator(lambda n: list(range(n)))
                .with_bench(bm_gen)
            )
            """
        )
    )
    return path


def test_version():
    """Test the version command."""
    result = CliRunner().invoke(pew, ["version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("pew ")


def test_run_prints_csv(bench_file):
    """Test run writes the header and one row per triple to stdout."""
    result = CliRunner().invoke(pew, ["run", str(bench_file), "-d", "0", "-r", "1"])

    assert result.exit_code == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[0] == "Name,Time (ns)"
    assert [line.split(",")[0] for line in lines[1:]] == [
        "ranges/bm_sum/1",
        "ranges/bm_sum/2",
        "ranges/bm_sum/4",
        "gens/bm_gen/1",
        "gens/bm_gen/2",
        "gens/bm_gen/4",
    ]
    assert all(ROW.match(line) for line in lines[1:])


def test_run_filter(bench_file):
    """Test --filter limits the rows."""
    result = CliRunner().invoke(
        pew, ["run", str(bench_file), "-d", "0", "-r", "1", "-f", "gen"]
    )
    assert result.exit_code == 0, result.stderr
    names = [line.split(",")[0] for line in result.stdout.splitlines()[1:]]
    assert names == ["gens/bm_gen/1", "gens/bm_gen/2", "gens/bm_gen/4"]


def test_run_config_file_and_env(bench_file, tmp_path, monkeypatch):
    """Test settings come from a YAML file, overridden by the environment."""
    config = tmp_path / "pew.yaml"
    config.write_text("min_runs: 1\nmin_duration_nanoseconds: 0\nfilter: ranges\n")
    monkeypatch.setenv("PEW_FILTER", "/4")

    result = CliRunner().invoke(pew, ["run", str(bench_file), "--config", str(config)])

    assert result.exit_code == 0, result.stderr
    names = [line.split(",")[0] for line in result.stdout.splitlines()[1:]]
    assert names == ["ranges/bm_sum/4", "gens/bm_gen/4"]


def test_run_output_file(bench_file, tmp_path):
    """Test --output writes the CSV to a file."""
    out = tmp_path / "results.csv"
    result = CliRunner().invoke(
        pew, ["run", str(bench_file), "-d", "0", "-r", "1", "-o", str(out)]
    )
    assert result.exit_code == 0, result.stderr
    assert result.stdout == ""
    assert out.read_text().startswith("Name,Time (ns)\nranges/bm_sum/1,")


def test_run_invalid_settings(bench_file):
    """Test invalid run settings exit with an error and no output."""
    result = CliRunner().invoke(pew, ["run", str(bench_file), "-r", "0"])
    assert result.exit_code == 1
    assert "Error:" in result.stderr
    assert result.stdout == ""


@pytest.mark.parametrize("duration", ["nan", "inf"])
def test_run_non_finite_duration_option(bench_file, duration):
    """Test a non-finite --min-duration is a configuration error, not a crash."""
    result = CliRunner().invoke(pew, ["run", str(bench_file), "-d", duration])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error:" in result.stderr
    assert "finite" in result.stderr
    assert result.stdout == ""


def test_run_non_finite_duration_env(bench_file, monkeypatch):
    """Test PEW_MIN_DURATION=inf is reported like any other bad setting."""
    monkeypatch.setenv("PEW_MIN_DURATION", "inf")
    result = CliRunner().invoke(pew, ["run", str(bench_file)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "finite" in result.stderr


def test_run_body_failure_keeps_earlier_rows(tmp_path):
    """Test a failing body exits non-zero after streaming completed rows."""
    path = tmp_path / "failing.py"
    path.write_text(
        textwrap.dedent(
            """
            from pew import Benchmark

            def bm_ok(state):
                pass

            def bm_fail(state):
                raise RuntimeError("kaboom")

            ok = Benchmark("ok").with_range(1, 1, 2).with_bench(bm_ok)
            bad = Benchmark("bad").with_range(1, 1, 2).with_bench(bm_fail)
            """
        )
    )
    result = CliRunner().invoke(pew, ["run", str(path), "-d", "0", "-r", "1"])

    assert result.exit_code == 1
    assert result.stdout.startswith("Name,Time (ns)\nok/bm_ok/1,")
    assert "bad/bm_fail/1" not in result.stdout
    assert "kaboom" in result.stderr


def test_list(bench_file):
    """Test list prints names without running."""
    result = CliRunner().invoke(pew, ["list", str(bench_file), "-f", "ranges"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "ranges/bm_sum/1",
        "ranges/bm_sum/2",
        "ranges/bm_sum/4",
    ]


def test_transpose_stdin():
    """Test transpose reads stdin and writes the table to stdout."""
    result = CliRunner().invoke(
        pew, ["transpose"], input="Name,Time (ns)\nfoo/bar/10,100\nbaz/qux/10,200\n"
    )
    assert result.exit_code == 0
    assert result.stdout == "Size,foo/bar,baz/qux\n10,100,200\n"


def test_transpose_to_file_echoes_input(tmp_path):
    """Test --file writes the table and passes input through to stdout."""
    data = "Name,Time (ns)\na/x/1,10\na/x/2,20\n"
    out = tmp_path / "table.csv"
    result = CliRunner().invoke(pew, ["transpose", "-f", str(out)], input=data)

    assert result.exit_code == 0
    assert result.stdout == data
    assert out.read_text() == "Size,a/x\n1,10\n2,20\n"


def test_transpose_malformed_input():
    """Test malformed rows fail with the line number."""
    result = CliRunner().invoke(pew, ["transpose"], input="Name,Time (ns)\noops\n")
    assert result.exit_code == 1
    assert "line 2" in result.stderr


def test_list_uses_run_filter_settings(bench_file, tmp_path, monkeypatch):
    """Test list selects names the way run does: config file, then PEW_FILTER."""
    config = tmp_path / "pew.yaml"
    config.write_text("filter: gens\n")

    result = CliRunner().invoke(pew, ["list", str(bench_file), "--config", str(config)])
    assert result.exit_code == 0, result.stderr
    assert result.stdout.splitlines() == ["gens/bm_gen/1", "gens/bm_gen/2", "gens/bm_gen/4"]

    monkeypatch.setenv("PEW_FILTER", "/2")
    result = CliRunner().invoke(pew, ["list", str(bench_file), "--config", str(config)])
    assert result.stdout.splitlines() == ["ranges/bm_sum/2", "gens/bm_gen/2"]

    result = CliRunner().invoke(pew, ["list", str(bench_file), "-f", "ranges/bm_sum/4"])
    assert result.stdout.splitlines() == ["ranges/bm_sum/4"]
