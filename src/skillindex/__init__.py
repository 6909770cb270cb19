"""Index builder for skill repositories.

Scans a repository for SKILL.md files and keeps the artifact table in
README.md, between the INDEX:START and INDEX:END markers, in sync with the
name and description lines of each file.
"""

from .base import (
    Artifact,
    BuildResult,
    ConfigError,
    DiscoveryError,
    IndexBuildError,
    IndexIOError,
    MarkerNotFound,
)
from .builder import IndexBuilder
from .config import IndexConfig, load_config
from .discovery import discover_artifact_files
from .parser import extract_field, read_artifact
from .paths import relative_link
from .render import render_table
from .splice import splice, write_atomic

__all__ = [
    "Artifact",
    "BuildResult",
    "ConfigError",
    "DiscoveryError",
    "IndexBuildError",
    "IndexIOError",
    "MarkerNotFound",
    "IndexBuilder",
    "IndexConfig",
    "load_config",
    "discover_artifact_files",
    "extract_field",
    "read_artifact",
    "relative_link",
    "render_table",
    "splice",
    "write_atomic",
]
