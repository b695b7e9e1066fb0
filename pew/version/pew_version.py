import hashlib
import os
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for pew.

    Includes major, minor, and patch numbers following semver, plus a
    hash of the package sources and the release date.
    """

    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.3.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return full version info including hash and date."""
        return f"{self} (hash: {self.hash[:8]}, date: {self.date.strftime('%Y-%m-%d')})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)


def _compute_package_hash() -> str:
    """SHA256 over the pew package sources, skipping caches and bytecode."""
    package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    hasher = hashlib.sha256()

    for root, dirs, files in os.walk(package_dir):
        dirs[:] = sorted(d for d in dirs if d != "__pycache__")
        for file in sorted(files):
            if not file.endswith(".py"):
                continue
            with open(os.path.join(root, file), "rb") as f:
                hasher.update(f.read())

    return hasher.hexdigest()


PEW_VERSION = Version(
    major=0,
    minor=3,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 16),
)
