"""Tests for the benchmark registry."""

import sys
import textwrap

import pytest

from pew.benchmarks.base import Benchmark, BenchmarkEntry
from pew.benchmarks.inputs import InputSequence
from pew.benchmarks.registry import (
    BenchmarkLoadError,
    BenchmarkNameCollisionError,
    BenchmarkNotFoundError,
    BenchmarkRegistry,
)
from pew.errors import BenchmarkConfigurationError


def bm_noop(state):
    """Body that does nothing."""
    _ = state


def test_register_preserves_order():
    """Test entries come back in registration order."""
    registry = BenchmarkRegistry()
    registry.register(Benchmark("zeta").with_bench(bm_noop))
    registry.register(Benchmark("alpha").with_bench(bm_noop).build())

    assert [entry.name for entry in registry] == ["zeta", "alpha"]
    assert len(registry) == 2
    assert "alpha" in registry
    assert "missing" not in registry


def test_name_collision():
    """Test two entries cannot share a name."""
    registry = BenchmarkRegistry([Benchmark("dup").with_bench(bm_noop)])
    with pytest.raises(BenchmarkNameCollisionError):
        registry.register(Benchmark("dup").with_bench(bm_noop))


def test_get_entry():
    """Test getting an entry by name."""
    registry = BenchmarkRegistry([Benchmark("found").with_bench(bm_noop)])
    assert registry.get_entry("found").name == "found"
    with pytest.raises(BenchmarkNotFoundError):
        registry.get_entry("NonExistent")


def test_register_builder_without_bodies_raises():
    """Test incomplete builders are rejected on registration."""
    with pytest.raises(BenchmarkConfigurationError):
        BenchmarkRegistry().register(Benchmark("empty"))


def test_qualified_names_in_run_order():
    """Test qualified names are listed without running anything."""
    calls = []

    def generator(n):
        calls.append(n)
        return n

    registry = BenchmarkRegistry(
        [
            Benchmark("a")
            .with_range(1, 2, 2)
            .with_generator(generator)
            .with_bench(bm_noop, name="x")
            .with_bench(bm_noop, name="y")
        ]
    )
    assert list(registry.qualified_names()) == ["a/x/1", "a/x/2", "a/y/1", "a/y/2"]
    assert calls == []


def test_load_file(tmp_path):
    """Test module-level benchmarks are loaded in definition order."""
    path = tmp_path / "benches.py"
    path.write_text(
        textwrap.dedent(
            """
            from pew import Benchmark

            def bm_sum(state):
                sum(range(state.get_input()))

            second = Benchmark("second").with_range(1, 4, 2).with_bench(bm_sum)
            first = Benchmark("first").with_bench(bm_sum).build()
            alias = second
            """
        )
    )
    registry = BenchmarkRegistry()
    loaded = registry.load_file(path)

    assert [entry.name for entry in loaded] == ["second", "first"]
    assert [entry.name for entry in registry] == ["second", "first"]


def test_load_file_import_error(tmp_path):
    """Test a benchmark file that fails to import is reported, not skipped."""
    path = tmp_path / "broken.py"
    path.write_text("raise ImportError('missing dependency')\n")

    with pytest.raises(BenchmarkLoadError, match="missing dependency") as exc_info:
        BenchmarkRegistry().load_file(path)
    assert exc_info.value.path == path


def test_load_file_configuration_error(tmp_path):
    """Test configuration errors inside a benchmark file name the file."""
    path = tmp_path / "bad_range.py"
    path.write_text(
        "from pew import Benchmark\n"
        "bad = Benchmark('bad').with_range(1, 10, 1)\n"
    )
    with pytest.raises(BenchmarkLoadError, match="multiplier"):
        BenchmarkRegistry().load_file(path)


def test_load_non_python_file(tmp_path):
    """Test only .py files can be loaded."""
    path = tmp_path / "notes.txt"
    path.write_text("nothing")
    with pytest.raises(BenchmarkLoadError):
        BenchmarkRegistry().load_file(path)
    with pytest.raises(BenchmarkLoadError):
        BenchmarkRegistry().load_file(tmp_path / "missing.py")


def test_load_file_without_benchmarks(tmp_path):
    """Test a file with no benchmarks loads nothing."""
    path = tmp_path / "empty.py"
    path.write_text("X = 1\n")
    assert BenchmarkRegistry().load_file(path) == []


def test_load_file_skips_imported_benchmarks(tmp_path, monkeypatch):
    """Test benchmarks imported from a helper module belong to that module only."""
    (tmp_path / "shared_benches.py").write_text(
        textwrap.dedent(
            """
            from pew import Benchmark

            def bm_sum(state):
                sum(range(state.get_input()))

            shared = Benchmark("shared").with_range(1, 2, 2).with_bench(bm_sum)
            shared_entry = Benchmark("shared_entry").with_bench(bm_sum).build()
            """
        )
    )
    own = tmp_path / "own_benches.py"
    own.write_text(
        textwrap.dedent(
            """
            from pew import Benchmark
            from shared_benches import bm_sum, shared, shared_entry

            own = Benchmark("own").with_range(1, 2, 2).with_bench(bm_sum)
            """
        )
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    try:
        registry = BenchmarkRegistry()
        loaded = registry.load_file(own)
        assert [entry.name for entry in loaded] == ["own"]

        registry.load_file(tmp_path / "shared_benches.py")
        assert [entry.name for entry in registry] == ["own", "shared", "shared_entry"]
    finally:
        sys.modules.pop("shared_benches", None)


def test_entry_records_defining_module():
    """Test builders and entries remember the module that created them."""
    builder = Benchmark("here").with_bench(bm_noop)
    assert builder.module == __name__
    assert builder.build().module == __name__

    entry = BenchmarkEntry("direct", InputSequence(1, 2, 2), (("noop", bm_noop),))
    assert entry.module == __name__
