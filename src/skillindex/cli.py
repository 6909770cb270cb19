"""Command-line interface for the index builder.

Regenerates the artifact table in README.md, or checks that it is current.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .base import IndexBuildError
from .builder import IndexBuilder
from .config import IndexConfig, load_config


def _options_from_env() -> dict[str, str | None]:
    """Load root and target overrides from environment variables."""
    return {
        "root": os.getenv("SKILLINDEX_ROOT"),
        "target": os.getenv("SKILLINDEX_TARGET"),
    }


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_config(args: argparse.Namespace) -> IndexConfig:
    """Merge CLI flags, environment and the config file."""
    env = _options_from_env()
    root = Path(args.root or env["root"] or Path.cwd())
    target = args.target or env["target"]

    return load_config(
        root,
        config_path=args.config,
        target=Path(target) if target else None,
    )


def cmd_build(builder: IndexBuilder, args: argparse.Namespace) -> int:
    """Rewrite the index region, or report staleness with --check."""
    result = builder.build(check=args.check)
    count = len(result.artifacts)

    if args.check:
        if result.changed:
            print(f"Index is out of date in {result.target} ({count} artifact(s))")
            return 1
        print(f"Index is up to date in {result.target} ({count} artifact(s))")
        return 0

    if result.written:
        print(f"Index updated in {result.target} ({count} artifact(s))")
    else:
        print(f"Index already up to date in {result.target} ({count} artifact(s))")
    return 0


def cmd_print(builder: IndexBuilder, args: argparse.Namespace) -> int:
    """Print the rendered table without touching the document."""
    print(builder.render())
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the index CLI."""
    parser = argparse.ArgumentParser(
        prog="skill-index",
        description="Regenerate the artifact index table between the README markers",
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Repository root to scan (default: $SKILLINDEX_ROOT or current directory)",
    )
    parser.add_argument(
        "--target",
        help="Document holding the index, relative to the root (default: README.md)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON config file (default: <root>/.skillindex.json)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the index is out of date, without writing",
    )
    mode.add_argument(
        "--print",
        dest="print_table",
        action="store_true",
        help="Print the rendered table instead of updating the document",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def run_cli(argv: list[str] | None = None) -> int:
    """Run the index CLI with given arguments.

    Args:
        argv: Command-line arguments. Uses sys.argv[1:] if None.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        builder = IndexBuilder(_build_config(args))
        handler = cmd_print if args.print_table else cmd_build
        return handler(builder, args)
    except IndexBuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(run_cli())
