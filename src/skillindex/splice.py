"""Splicing generated content between sentinel markers.

The document text outside the marker region is never touched. Files are read
and written with newline translation disabled so line endings survive a
rewrite byte for byte.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .base import IndexIOError, MarkerNotFound
from .config import DEFAULT_END_MARKER, DEFAULT_START_MARKER

logger = logging.getLogger(__name__)


def splice(
    document: str,
    content: str,
    start_marker: str = DEFAULT_START_MARKER,
    end_marker: str = DEFAULT_END_MARKER,
    path: Path | None = None,
) -> str:
    """Replace the text between two markers.

    Uses the first start marker and the first end marker after it. The
    markers are kept, each separated from the new content by one newline.

    Args:
        document: Full text of the target document.
        content: Text to place between the markers (surrounding whitespace
            is stripped).
        start_marker: Literal opening marker.
        end_marker: Literal closing marker.
        path: Document path, only used in error messages.

    Returns:
        The new document text.

    Raises:
        MarkerNotFound: If the start marker is missing, or no end marker
            follows it.
    """
    start = document.find(start_marker)
    if start == -1:
        raise MarkerNotFound(start_marker, path)

    region_start = start + len(start_marker)
    region_end = document.find(end_marker, region_start)
    if region_end == -1:
        raise MarkerNotFound(end_marker, path)

    if document.count(start_marker) > 1 or document.count(end_marker) > 1:
        logger.warning(
            "Markers appear more than once in %s, using the first pair",
            path or "document",
        )

    return document[:region_start] + "\n" + content.strip() + "\n" + document[region_end:]


def read_document(path: Path) -> str:
    """Read a target document without newline translation."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise IndexIOError(f"Cannot decode document as UTF-8 ({e.reason})", path) from e
    except OSError as e:
        raise IndexIOError(f"Cannot read document ({e.strerror})", path) from e


def write_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in a single rename.

    The new content goes to a temporary file beside the target which is then
    renamed over it. On failure the temporary file is removed and the target
    is left as it was. A symlinked target is followed, so the link survives
    and the file it points to receives the content.

    Raises:
        IndexIOError: If the temporary file cannot be written or renamed.
    """
    path = Path(os.path.realpath(path))
    directory = path.parent
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    except OSError as e:
        raise IndexIOError(f"Cannot create temporary file ({e.strerror})", path) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise IndexIOError(f"Cannot write document ({e.strerror})", path) from e

    logger.debug("Wrote %d characters to %s", len(text), path)
