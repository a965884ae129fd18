"""Command line entry point for clean-deps."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from clean_deps import __version__
from clean_deps.core.cleaner import DepsCleaner
from clean_deps.core.languages import Language, ordered_targets
from clean_deps.core.models import CleanOptions, ScanRequest
from clean_deps.reporting.base import Reporter
from clean_deps.reporting.reporters import ConsoleReporter, JSONReporter
from clean_deps.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def _language_help() -> str:
    return "; ".join(
        f"{language} -> {', '.join(ordered_targets(language))}" for language in Language
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clean-deps",
        description=(
            "Find build and dependency directories of one ecosystem below PATH "
            "and list them, or delete them with --delete."
        ),
        epilog=f"Target directories: {_language_help()}.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to scan (default: current working directory)",
    )
    parser.add_argument(
        "-l",
        "--language",
        required=True,
        type=str.lower,
        choices=Language.names(),
        help="Ecosystem whose directories are matched",
    )
    parser.add_argument(
        "-d",
        "--delete",
        action="store_true",
        help="Delete matched directories instead of listing them",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only match directories that sit beside a project manifest "
        "(Cargo.toml, package.json, *.sln or *.csproj)",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        action="store_true",
        help="Measure matches, show their sizes and handle the largest first",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a single JSON document instead of one line per match",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the summary panel",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write a debug log here"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def build_request(args: argparse.Namespace) -> ScanRequest:
    """Builds the scan request from parsed arguments."""
    root = Path(args.path) if args.path else Path(os.getcwd())
    return ScanRequest(
        root=root,
        language=Language.from_name(args.language),
        delete=args.delete,
        options=CleanOptions(strict=args.strict, compute_sizes=args.sizes),
    )


def build_reporter(args: argparse.Namespace) -> Reporter:
    if args.json:
        return JSONReporter()
    return ConsoleReporter(show_summary=not args.quiet)


def main(argv: Optional[List[str]] = None) -> int:
    """Runs clean-deps and returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    error_console = Console(stderr=True)

    try:
        setup_logging(
            log_file=args.log_file, log_level=args.log_level, verbose=args.verbose
        )
        request = build_request(args)
        cleaner = DepsCleaner(request, reporter=build_reporter(args))
    except (OSError, ValueError) as e:
        logger.debug(f"Invalid arguments: {e!r}")
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return EXIT_FATAL

    try:
        cleaner.run()
    except KeyboardInterrupt:
        error_console.print("[yellow]Interrupted.[/yellow]")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
