#!/usr/bin/env python3
"""
CLI runner for File Diff Finder.

Provides command-line interface for:
- Serving the diff API over HTTP
- Computing a single delta against a baseline

Usage:
    python cli.py serve --port 8080 --file-version 13 --content abcabc
    python cli.py diff --content abcabcabc --text abcabxabc
    python cli.py diff --content-file base.txt --text-file new.txt --version 2
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from config import settings

# Configure logging before imports
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.LOG_LEVEL.upper())
    ),
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr)
)

logger = structlog.get_logger()

from api.schemas import ChangeRecordResponse, DiffResponse
from diffing.cancellation import CancelSignal
from diffing.change_detector import FileDiffFinder
from diffing.exceptions import DiffCancelledError, VersionError
from storage.version_manager import VersionManager


def read_text(inline: Optional[str], path: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """Pick inline text, then file contents, then the default."""
    if inline is not None:
        return inline
    if path is not None:
        return Path(path).read_text(encoding="utf-8")
    return default


def build_finder(args) -> FileDiffFinder:
    content = read_text(args.content, args.content_file, settings.FILE_CONTENT)
    file_version = args.file_version if args.file_version is not None else settings.FILE_VERSION
    return FileDiffFinder(VersionManager(content, file_version))


def cmd_serve(args) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn
    from main import create_app

    finder = build_finder(args)
    port = args.port if args.port is not None else settings.PORT

    logger.info(
        "Service is initializing",
        port=port,
        file_version=finder.version(),
        file_length=len(finder.content())
    )

    uvicorn.run(create_app(diff_finder=finder), host=settings.HOST, port=port, log_level="info")
    return 0


def cmd_diff(args) -> int:
    """Compute one delta and print it in the API response shape."""
    text = read_text(args.text, args.text_file)
    if text is None:
        logger.error("Nothing to diff: pass --text or --text-file")
        return 2

    finder = build_finder(args)
    updated_version = args.version if args.version is not None else finder.version() + 1

    try:
        finder.validate_version(updated_version)
        timeout = args.timeout if args.timeout is not None else settings.DIFF_TIMEOUT_SECONDS
        delta = finder.diff(CancelSignal.with_timeout(timeout), text)
    except (VersionError, DiffCancelledError) as e:
        logger.error("Diff failed", error=str(e))
        return 1

    response = DiffResponse(
        delta=[ChangeRecordResponse.from_record(record) for record in delta],
        current_version=finder.version(),
        updated_version=updated_version
    )
    print(json.dumps(response.model_dump(), indent=2))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="File Diff Finder CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  serve     Serve the diff API
  diff      Compute a single delta and print it as JSON

Examples:
  python cli.py serve --port 8080 --file-version 13 --content abcabcabc
  python cli.py diff --content abcabcabc --text 1bcabcabc
        """
    )

    parser.add_argument(
        "command",
        choices=["serve", "diff"],
        help="Command to execute"
    )

    baseline = parser.add_mutually_exclusive_group()
    baseline.add_argument("--content", help="Baseline file text (default: FILE_CONTENT)")
    baseline.add_argument("--content-file", help="Read the baseline from a file")

    parser.add_argument(
        "--file-version",
        type=int,
        help="Baseline version (default: FILE_VERSION)"
    )

    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (for 'serve' command)"
    )

    candidate = parser.add_mutually_exclusive_group()
    candidate.add_argument("--text", help="Updated text (for 'diff' command)")
    candidate.add_argument("--text-file", help="Read the updated text from a file")

    parser.add_argument(
        "--version",
        type=int,
        help="Version of the updated text (default: baseline version + 1)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Diff deadline in seconds (default: DIFF_TIMEOUT_SECONDS)"
    )

    args = parser.parse_args(argv)

    try:
        if args.command == "serve":
            return cmd_serve(args)
        return cmd_diff(args)
    except (OSError, ValueError) as e:
        logger.error("Invalid input", error=str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
