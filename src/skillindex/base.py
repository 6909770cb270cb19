"""Base types for the index builder.

This module defines the core abstractions:
- Artifact: A discovered SKILL.md and the metadata extracted from it
- BuildResult: Outcome of a single index run
- IndexBuildError and subclasses: Fatal errors that abort a run
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Artifact:
    """A discovered artifact, one row of the index table.

    Derived fresh on every run from the metadata file at ``source``.
    """

    name: str
    description: str
    relative_path: str
    source: Path | None = None

    @property
    def is_empty(self) -> bool:
        """True when neither name nor description could be extracted."""
        return not self.name and not self.description


@dataclass
class BuildResult:
    """Outcome of an index build."""

    target: Path
    table: str
    artifacts: list[Artifact] = field(default_factory=list)
    changed: bool = False
    written: bool = False


class IndexBuildError(Exception):
    """Base class for errors that abort an index run."""

    pass


class DiscoveryError(IndexBuildError):
    """Raised when the repository tree cannot be traversed."""

    pass


class MarkerNotFound(IndexBuildError):
    """Raised when the target document lacks a sentinel marker."""

    def __init__(self, marker: str, path: Path | None = None) -> None:
        self.marker = marker
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Marker not found{where}: {marker}")


class IndexIOError(IndexBuildError):
    """Raised when a file cannot be read or written."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class ConfigError(IndexBuildError):
    """Raised when the index configuration is invalid."""

    pass
