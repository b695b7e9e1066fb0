"""Ordered registry of benchmark entries, optionally loaded from files.

Usage:
    from pew.benchmarks.registry import BenchmarkRegistry

    registry = BenchmarkRegistry()
    registry.register(gen_bench)
    registry.load_file("benches/vectors.py")

    for entry in registry:
        ...
"""

import importlib.util
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

from pew.benchmarks.base import Benchmark, BenchmarkEntry
from pew.errors import PewError
from pew.utils.logger import Logger


class BenchmarkRegistryError(PewError):
    """Base exception for registry errors."""

    pass


class BenchmarkNameCollisionError(BenchmarkRegistryError):
    """Raised when two entries have the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Benchmark name collision: '{name}' is registered twice")


class BenchmarkNotFoundError(BenchmarkRegistryError):
    """Raised when a requested entry is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Benchmark not found: '{name}'")


class BenchmarkLoadError(BenchmarkRegistryError):
    """Raised when a benchmark file cannot be imported."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load benchmarks from {path}: {reason}")


class BenchmarkRegistry:
    """Ordered collection of benchmark entries.

    Registration order is run order, and therefore output order. Builders are
    frozen into entries on registration, so a builder without bodies is
    rejected here rather than at run time.

    Raises BenchmarkNameCollisionError if two entries share a name.
    """

    def __init__(self, entries: list[Benchmark | BenchmarkEntry] | None = None) -> None:
        self._entries: dict[str, BenchmarkEntry] = {}
        for entry in entries or []:
            self.register(entry)

    @property
    def logger(self) -> logging.Logger:
        return Logger.get_or_default("registry")

    def register(self, benchmark: Benchmark | BenchmarkEntry) -> BenchmarkEntry:
        """Add an entry (or a builder, which is built first).

        Raises:
            BenchmarkConfigurationError: If a builder has no bodies.
            BenchmarkNameCollisionError: If the name is taken.
        """
        entry = benchmark.build() if isinstance(benchmark, Benchmark) else benchmark
        if entry.name in self._entries:
            raise BenchmarkNameCollisionError(entry.name)
        self._entries[entry.name] = entry
        self.logger.debug(
            f"Registered {entry.name} with bodies {', '.join(entry.body_names)}"
        )
        return entry

    def load_file(self, filepath: str | Path) -> list[BenchmarkEntry]:
        """Import a Python file and register its module-level benchmarks.

        Every Benchmark or BenchmarkEntry the file defines at module level is
        registered in definition order. Objects it only imports from another
        module are left to that module.

        Returns:
            The entries registered from this file.

        Raises:
            BenchmarkLoadError: If the file is missing or fails to import.
        """
        path = Path(filepath)
        if not path.is_file() or path.suffix != ".py":
            raise BenchmarkLoadError(path, "not a Python file")

        module = self._import(path)
        loaded = []
        seen: set[int] = set()
        for value in list(vars(module).values()):
            if not isinstance(value, Benchmark | BenchmarkEntry):
                continue
            if value.module != module.__name__ or id(value) in seen:
                continue
            seen.add(id(value))
            loaded.append(self.register(value))

        if not loaded:
            self.logger.warning(f"No benchmarks defined in {path}")
        return loaded

    def _import(self, path: Path) -> ModuleType:
        module_name = f"pew_benchmarks_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise BenchmarkLoadError(path, "no module loader available")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            del sys.modules[module_name]
            raise BenchmarkLoadError(path, f"{type(e).__name__}: {e}") from e
        return module

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def get_entry(self, name: str) -> BenchmarkEntry:
        """Get an entry by name.

        Raises:
            BenchmarkNotFoundError: If no entry has that name.
        """
        if name not in self._entries:
            raise BenchmarkNotFoundError(name)
        return self._entries[name]

    @property
    def entries(self) -> list[BenchmarkEntry]:
        return list(self._entries.values())

    def qualified_names(self) -> Iterator[str]:
        """Yield every entry/body/size name in run order."""
        for entry in self._entries.values():
            for body_name in entry.body_names:
                for size in entry.input_sequence.sizes():
                    yield entry.qualified_name(body_name, size)

    def __iter__(self) -> Iterator[BenchmarkEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        """Return number of registered entries."""
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        """Check if an entry is registered."""
        return name in self._entries
