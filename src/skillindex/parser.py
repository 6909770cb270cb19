"""Metadata extraction for artifact files.

Reads the ``name:`` and ``description:`` lines from the header of a SKILL.md.
The header is isolated with python-frontmatter's YAML fence detection; the
values themselves are taken verbatim from their lines rather than parsed as
YAML, so free text such as ``description: use a: b`` survives unchanged.
"""

import logging
from pathlib import Path

import frontmatter

from .base import Artifact, IndexIOError
from .paths import relative_link

logger = logging.getLogger(__name__)

_HANDLER = frontmatter.YAMLHandler()


def header_block(text: str) -> str:
    """Return the fenced header of ``text``.

    Falls back to the whole text when the file has no ``---`` fence or the
    fence is never closed.
    """
    if not _HANDLER.detect(text):
        return text

    try:
        header, _ = _HANDLER.split(text)
    except ValueError:
        logger.debug("Unclosed frontmatter fence, scanning whole file")
        return text
    return header


def extract_field(text: str, key: str) -> str:
    """Extract a single ``key: value`` field from the header of ``text``.

    The first line starting with ``key:`` wins. The key prefix is removed and
    surrounding whitespace stripped from the rest of the line.

    Args:
        text: Full content of an artifact file.
        key: Field name without the colon.

    Returns:
        The field value, or "" if no line carries the key.
    """
    prefix = f"{key}:"
    for line in header_block(text).splitlines():
        if line.startswith(prefix):
            return line[len(prefix):].strip()
    return ""


def read_artifact(path: Path, link_base: Path) -> Artifact:
    """Read an artifact file and build its index entry.

    Args:
        path: Path to the metadata file (e.g. skills/foo/SKILL.md).
        link_base: Directory of the index document; the row links from there.

    Returns:
        Artifact with name and description, empty where a field is absent.

    Raises:
        IndexIOError: If the file cannot be read or decoded.
    """
    try:
        content = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise IndexIOError(f"Cannot decode artifact file as UTF-8 ({e.reason})", path) from e
    except OSError as e:
        raise IndexIOError(f"Cannot read artifact file ({e.strerror})", path) from e

    name = extract_field(content, "name")
    description = extract_field(content, "description")

    if not name:
        logger.debug("No name field in %s", path)
    if not description:
        logger.debug("No description field in %s", path)

    return Artifact(
        name=name,
        description=description,
        relative_path=relative_link(path.parent, link_base),
        source=path,
    )
