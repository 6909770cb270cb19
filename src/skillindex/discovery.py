"""Artifact discovery: find metadata files under the repository root."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .base import DiscoveryError
from .config import DEFAULT_ARTIFACT_FILENAMES, DEFAULT_EXCLUDE_DIRS

logger = logging.getLogger(__name__)


def discover_artifact_files(
    root: Path,
    filenames: Iterable[str] = DEFAULT_ARTIFACT_FILENAMES,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> list[Path]:
    """Find every artifact metadata file below ``root``.

    Args:
        root: Directory to scan recursively.
        filenames: File names that mark an artifact (e.g. SKILL.md).
        exclude_dirs: Directory names that are pruned from the walk.

    Returns:
        Paths sorted by their full POSIX path string. Empty if none match.

    Raises:
        DiscoveryError: If root is missing or part of the tree cannot be read.
    """
    root = Path(root)
    if not root.exists():
        raise DiscoveryError(f"Repository root not found: {root}")
    if not root.is_dir():
        raise DiscoveryError(f"Repository root is not a directory: {root}")

    wanted = set(filenames)
    excluded = set(exclude_dirs)

    def _on_error(err: OSError) -> None:
        raise DiscoveryError(f"Cannot scan {err.filename}: {err.strerror}") from err

    found: list[Path] = []
    for dirpath, dirnames, files in os.walk(root, onerror=_on_error):
        dirnames[:] = [d for d in dirnames if d not in excluded]
        for name in files:
            if name in wanted:
                path = Path(dirpath) / name
                logger.debug("Found artifact file %s", path)
                found.append(path)

    return sorted(found, key=lambda p: p.as_posix())
