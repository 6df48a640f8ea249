"""CLI entrypoint for oedipus."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import OedipusError
from .logging import configure_logging
from .naming import COLLISION_POLICIES
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oedipus",
        description="Generate Sphinx/Breathe API reference documents from module type metadata.",
    )
    parser.add_argument(
        "-f",
        "--files",
        nargs="+",
        required=True,
        metavar="FILE",
        help="Module files to document, listed in the order they should appear.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory; it is deleted and recreated (defaults to ./apidocs).",
    )
    parser.add_argument(
        "-d",
        "--description",
        default=None,
        help="Text placed under the title of the root index.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .oedipus.yml or the directory containing it.",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help="Metadata provider used to read module types (default: manifest).",
    )
    parser.add_argument(
        "--search-path",
        dest="search_paths",
        action="append",
        default=None,
        metavar="DIR",
        help="Extra directory searched for metadata snapshots. May be repeated.",
    )
    parser.add_argument(
        "--on-collision",
        choices=COLLISION_POLICIES,
        default=None,
        help="What to do when two names map to the same file slug.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for oedipus."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.provider:
        config.provider = args.provider
    if args.search_paths:
        config.search_paths.extend(Path(path) for path in args.search_paths)
    if args.on_collision:
        config.collisions = args.on_collision

    output = Path(args.output) if args.output else config.output or Path.cwd() / "apidocs"

    try:
        orchestrator = Orchestrator(config)
        result = orchestrator.run(args.files, output, args.description)
    except (OedipusError, OSError, ValueError) as exc:
        parser.exit(1, f"oedipus failed: {exc}\nRun with --verbose for more details.\n")

    if not result.ok:
        for failure in result.failures:
            print(f"ERROR: {failure.message}")
        parser.exit(1)

    print(f"API documentation written to {_relativize(result.output_dir)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
