"""Markdown table rendering for the artifact index."""

import logging
from collections.abc import Iterable

from .base import Artifact

logger = logging.getLogger(__name__)

TABLE_HEADER = "| Artifact | Description |"
TABLE_SEPARATOR = "|----------|-------------|"


def format_row(artifact: Artifact) -> str:
    """Format one artifact as a table row. Values are not escaped."""
    return f"| [{artifact.name}]({artifact.relative_path}) | {artifact.description} |"


def render_table(artifacts: Iterable[Artifact], skip_empty: bool = True) -> str:
    """Render the index table.

    Args:
        artifacts: Artifacts in discovery order.
        skip_empty: Drop artifacts that have neither a name nor a description.

    Returns:
        Header, separator and one row per artifact, joined by newlines,
        without a trailing newline.
    """
    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    for artifact in artifacts:
        if skip_empty and artifact.is_empty:
            logger.warning(
                "Skipping %s: no name or description", artifact.source or artifact.relative_path
            )
            continue
        lines.append(format_row(artifact))
    return "\n".join(lines)
