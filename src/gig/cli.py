"""Command line interface.

Usage:
    gig [--orgs ORGS] [--current-project MODULE] [--in-place] [--diff]
        [--imports-only] [--config FILE] [--verbose] PATH

Imports are organized into groups:
1. Go standard library
2. Third-party packages
3. Organization packages (configurable, further split by project)
4. Current project packages

PATH can be a single Go file or a directory. Directories are processed
recursively, skipping vendor and hidden directories.

Examples:
    # Print the rewritten file
    gig --orgs=github.com/myorg main.go

    # Rewrite every Go file of a project
    gig --orgs=github.com/myorg,github.com/acme-corp --in-place ./
"""
from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Sequence

from gig.config import FormatterConfig, find_config_file, load_config_file
from gig.errors import MSG_FILES_FAILED_TO_PROCESS, ConfigError, GigError
from gig.formatter import preview_imports, process_path

logger = logging.getLogger(__name__)

DISTRIBUTION = "go-imports-group"
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def get_version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gig",
        description="Go imports grouper - group and sort the imports of Go files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("path", nargs="?", help="Go file or directory to process")
    parser.add_argument(
        "--orgs",
        action="append",
        default=None,
        metavar="ORGS",
        help="Comma-separated organization prefixes (e.g. github.com/myorg,github.com/acme-corp)",
    )
    parser.add_argument(
        "--current-project",
        default=None,
        metavar="MODULE",
        help="Module path of the current project (default: read from go.mod)",
    )
    parser.add_argument(
        "--in-place",
        action="store_true",
        default=None,
        help="Modify files in place instead of printing to stdout",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--diff",
        action="store_true",
        help="Print a unified diff instead of the rewritten source",
    )
    output.add_argument(
        "--imports-only",
        action="store_true",
        help="Print only the package clause and the organized imports",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="TOML configuration file (default: nearest .gig.toml)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Go Imports Group (GIG) version {get_version()}",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def load_config(args: argparse.Namespace) -> FormatterConfig:
    """Merge the configuration file with command line flags."""
    config_path = args.config or find_config_file(Path.cwd())
    data = load_config_file(config_path) if config_path else {}
    if config_path:
        logger.debug("Using configuration %s", config_path)
    return FormatterConfig.from_mapping(
        data,
        org_prefixes=args.orgs,
        current_project=args.current_project,
        in_place=args.in_place,
    )


def _write(text: bytes | str) -> None:
    if isinstance(text, str):
        sys.stdout.write(text)
        return
    # Source bytes go out as read, whatever their encoding
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(text.decode("utf-8", errors="replace"))
        return
    sys.stdout.flush()
    stream.write(text)
    stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.path is None:
        parser.print_usage(sys.stderr)
        logger.error("the following arguments are required: PATH")
        return EXIT_USAGE

    try:
        config = load_config(args)
    except ConfigError as e:
        logger.error(str(e))
        return EXIT_USAGE

    path = Path(args.path)
    single_file = path.is_file()

    if single_file and not config.in_place and args.imports_only:
        try:
            preview = preview_imports(path.read_bytes(), config, path)
        except OSError as e:
            logger.error("%s: %s", path, e)
            return EXIT_FAILURE
        except GigError as e:
            logger.error(str(e.with_path(path) if e.path is None else e))
            return EXIT_FAILURE
        _write(preview)
        return EXIT_OK

    batch = process_path(path, config)

    if args.diff:
        diff = batch.diff
        if diff:
            _write(diff)
    elif single_file and not config.in_place:
        for result in batch.succeeded:
            _write(result.data or b"")

    if single_file:
        for result in batch.failed:
            logger.error(result.message)
    elif batch.failure_count:
        # Per-file errors were logged while processing
        logger.error(MSG_FILES_FAILED_TO_PROCESS.format(count=batch.failure_count))

    return EXIT_OK if batch.success else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
