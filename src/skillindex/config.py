"""Index configuration loader.

Loads index settings from an optional ``.skillindex.json`` at the repository
root and provides the defaults the builder runs with.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .base import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".skillindex.json"

DEFAULT_TARGET = "README.md"
DEFAULT_START_MARKER = "<!-- INDEX:START -->"
DEFAULT_END_MARKER = "<!-- INDEX:END -->"
DEFAULT_ARTIFACT_FILENAMES = ("SKILL.md",)
DEFAULT_EXCLUDE_DIRS = (".git",)


@dataclass
class IndexConfig:
    """Configuration for one index run.

    Attributes:
        root: Repository root that is scanned for artifacts.
        target: Document holding the index, relative paths resolve against root.
        artifact_filenames: File names treated as artifact metadata files.
        exclude_dirs: Directory names never descended into.
        start_marker: Line that opens the generated region.
        end_marker: Line that closes the generated region.
        skip_empty_rows: Drop artifacts with neither name nor description.
    """

    root: Path = field(default_factory=Path.cwd)
    target: Path = Path(DEFAULT_TARGET)
    artifact_filenames: list[str] = field(
        default_factory=lambda: list(DEFAULT_ARTIFACT_FILENAMES)
    )
    exclude_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    start_marker: str = DEFAULT_START_MARKER
    end_marker: str = DEFAULT_END_MARKER
    skip_empty_rows: bool = True

    def __post_init__(self) -> None:
        """Validate config and set defaults."""
        self.root = Path(self.root).expanduser()

        target = Path(self.target).expanduser()
        self.target = target if target.is_absolute() else self.root / target

        if not self.artifact_filenames:
            raise ConfigError("artifact_filenames must name at least one file")

        if not self.start_marker.strip() or not self.end_marker.strip():
            raise ConfigError("Markers cannot be empty")

        if self.start_marker == self.end_marker:
            raise ConfigError("start_marker and end_marker must differ")


def load_config(root: Path, config_path: Path | None = None, **overrides: Any) -> IndexConfig:
    """Load IndexConfig from a JSON file.

    The config file should have this structure:
    ```json
    {
      "index": {
        "target": "README.md",
        "artifacts": ["SKILL.md", "AGENT.md"],
        "exclude": [".git", "node_modules"],
        "markers": {
          "start": "<!-- INDEX:START -->",
          "end": "<!-- INDEX:END -->"
        },
        "skip_empty_rows": true
      }
    }
    ```

    Args:
        root: Repository root.
        config_path: Path to config file. Uses <root>/.skillindex.json if None.
        **overrides: Values that take precedence over the file (None is ignored).

    Returns:
        IndexConfig instance with loaded values.

    Raises:
        ConfigError: If an explicit config_path does not exist, or the
            resulting values are invalid.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    path = config_path or Path(root) / CONFIG_FILENAME
    data: dict[str, Any] = {}

    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Invalid JSON in %s: %s. Using defaults.", path, e)
        except OSError as e:
            logger.warning("Cannot read %s: %s. Using defaults.", path, e)

    values = _parse_config(data)
    values.update({k: v for k, v in overrides.items() if v is not None})
    return IndexConfig(root=Path(root), **values)


def _parse_config(data: dict[str, Any]) -> dict[str, Any]:
    """Parse config dictionary into IndexConfig keyword arguments.

    Args:
        data: Parsed JSON data.

    Returns:
        Keyword arguments for IndexConfig, only for keys present and well-typed.
    """
    if not isinstance(data, dict):
        return {}

    index_data = data.get("index", {})
    if not isinstance(index_data, dict):
        logger.warning("Ignoring non-object 'index' section in config")
        return {}

    values: dict[str, Any] = {}

    target = index_data.get("target")
    if isinstance(target, str) and target:
        values["target"] = Path(target)

    artifacts = index_data.get("artifacts")
    if isinstance(artifacts, list) and all(isinstance(a, str) for a in artifacts):
        values["artifact_filenames"] = artifacts

    exclude = index_data.get("exclude")
    if isinstance(exclude, list) and all(isinstance(e, str) for e in exclude):
        values["exclude_dirs"] = exclude

    markers = index_data.get("markers", {})
    if isinstance(markers, dict):
        if isinstance(markers.get("start"), str):
            values["start_marker"] = markers["start"]
        if isinstance(markers.get("end"), str):
            values["end_marker"] = markers["end"]

    skip_empty = index_data.get("skip_empty_rows")
    if isinstance(skip_empty, bool):
        values["skip_empty_rows"] = skip_empty

    return values
