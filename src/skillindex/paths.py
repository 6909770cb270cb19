"""Relative link computation for index rows."""

import os
from pathlib import Path, PurePath


def relative_link(directory: str | Path, root: str | Path) -> str:
    """Return ``directory`` relative to ``root`` with forward slashes.

    The result is used as a markdown link target from a document at the
    repository root. A directory equal to the root yields ".".
    """
    rel = os.path.relpath(os.fspath(directory), os.fspath(root))
    return PurePath(rel).as_posix()
