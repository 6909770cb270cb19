"""IndexBuilder: regenerates the artifact table in the target document.

The IndexBuilder runs the whole pipeline:
- Discovery: Scanning the repository for artifact files
- Extraction: Reading name and description from each header
- Rendering: Building the markdown table
- Splice: Replacing the marker region and writing the document back

Every fatal error is raised before the document is written.
"""

import logging

from .base import Artifact, BuildResult
from .config import IndexConfig
from .discovery import discover_artifact_files
from .parser import read_artifact
from .render import render_table
from .splice import read_document, splice, write_atomic

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Builds the artifact index for one repository.

    Example:
        config = IndexConfig(root=Path("."))
        builder = IndexBuilder(config)

        # Rewrite README.md if the table is stale
        result = builder.build()

        # Only report whether README.md is stale
        result = builder.build(check=True)
    """

    def __init__(self, config: IndexConfig | None = None) -> None:
        """Initialize the IndexBuilder.

        Args:
            config: Configuration for the run. Uses defaults if None.
        """
        self.config = config or IndexConfig()

    def collect(self) -> list[Artifact]:
        """Discover artifact files and extract their metadata."""
        paths = discover_artifact_files(
            self.config.root,
            filenames=self.config.artifact_filenames,
            exclude_dirs=self.config.exclude_dirs,
        )
        logger.debug("Discovered %d artifact file(s) under %s", len(paths), self.config.root)
        link_base = self.config.target.parent
        return [read_artifact(path, link_base) for path in paths]

    def render(self, artifacts: list[Artifact] | None = None) -> str:
        """Render the index table, collecting artifacts if none are given."""
        if artifacts is None:
            artifacts = self.collect()
        return render_table(artifacts, skip_empty=self.config.skip_empty_rows)

    def build(self, check: bool = False) -> BuildResult:
        """Regenerate the index region of the target document.

        Args:
            check: If True, compute the result without writing anything.

        Returns:
            BuildResult; ``changed`` tells whether the document was stale.

        Raises:
            DiscoveryError: If the repository cannot be scanned.
            IndexIOError: If an artifact or the document cannot be read or written.
            MarkerNotFound: If the document lacks a sentinel marker.
        """
        target = self.config.target
        artifacts = self.collect()
        table = self.render(artifacts)

        current = read_document(target)
        updated = splice(
            current,
            table,
            start_marker=self.config.start_marker,
            end_marker=self.config.end_marker,
            path=target,
        )

        result = BuildResult(
            target=target,
            table=table,
            artifacts=artifacts,
            changed=updated != current,
        )

        if not result.changed:
            logger.info("Index in %s is up to date", target)
        elif check:
            logger.info("Index in %s is stale", target)
        else:
            write_atomic(target, updated)
            result.written = True
            logger.info("Index updated in %s", target)

        return result
