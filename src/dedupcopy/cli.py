#!/usr/bin/env python3
"""
dedupcopy CLI — copy a directory tree keeping one file per distinct content.
The source tree is only read; all writes go under the destination root.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
from pathlib import Path
from typing import NoReturn, Optional
import logging

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("DEBUG") else logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)
logger = logging.getLogger(__name__)

from dedupcopy.core.models import DeduplicationConfig, DeduplicationParams, HashAlgorithmName, RunStats
from dedupcopy.core.exceptions import DedupError
from dedupcopy.commands import DeduplicationCommand
from dedupcopy.utils.convert_utils import ConvertUtils
from dedupcopy.aliases import HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT, EPILOG_TEXT

PATH_COLUMN_WIDTH = 50


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.parser: argparse.ArgumentParser = self.build_parser()

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dedupcopy",
            description="dedupcopy — copy a directory tree, keeping one file per distinct content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required paths, checked in validate_args() so a missing one exits with status 1
        parser.add_argument(
            "--in",
            dest="source_dir",
            default="",
            type=str,
            metavar="PATH",
            help="Where the source files are (required)"
        )
        parser.add_argument(
            "--out",
            dest="destination_dir",
            default="",
            type=str,
            metavar="PATH",
            help="Where the deduplicated files will go (required)"
        )

        # Hashing options
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default="xxh3",
            type=str,
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--chunk-size",
            default=str(DeduplicationConfig.CHUNK_SIZE),
            type=str,
            metavar='',
            help="Read size for hashing and copying (e.g., 64K, 1M). Default: 64K"
        )

        # Output options
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Print every file with 'copying' or 'skip'"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {_package_version()}"
        )
        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if not args.source_dir or not args.destination_dir:
            self.parser.print_usage(sys.stderr)
            sys.exit(1)

        source_path = Path(args.source_dir)
        if not source_path.exists():
            self.error_exit(f"Directory not found: {args.source_dir}")
        if not source_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.source_dir}")

        try:
            if ConvertUtils.human_to_bytes(args.chunk_size) <= 0:
                self.error_exit("Chunk size must be positive")
        except ValueError as e:
            self.error_exit(f"Invalid chunk size: {e}")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams(
                source_dir=args.source_dir,
                destination_dir=args.destination_dir,
                algorithm=HASH_ALIASES.get(args.hash, HashAlgorithmName.XXH3),
                chunk_size=ConvertUtils.human_to_bytes(args.chunk_size)
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, relative_path: str, action: str) -> None:
        """CLI progress callback - one line per file in verbose mode."""
        if not self.verbose:
            return
        print(f"{relative_path:>{PATH_COLUMN_WIDTH}}: {action}")

    def run_deduplication(self, params: DeduplicationParams) -> RunStats:
        """Execute deduplication workflow."""
        command = DeduplicationCommand()
        try:
            return command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except DedupError as e:
            self.error_exit(f"Dedup failed: {e}")

    def output_results(self, stats: RunStats) -> None:
        """Print the summary; a run that copied nothing exits with status 1."""
        if stats.is_noop:
            print("Nothing happened?")
            sys.exit(1)

        # The summary is always the last line on stdout
        print(stats.summary())
        logger.debug(
            f"{stats.copied_files} files copied ({ConvertUtils.bytes_to_human(stats.copied_bytes)}), "
            f"{stats.skipped_files} duplicates skipped ({ConvertUtils.bytes_to_human(stats.skipped_bytes)})"
        )

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args: Optional[list] = None) -> None:
        """Main entry point."""
        parsed = self.parse_args(args)
        self.verbose = parsed.verbose

        self.validate_args(parsed)
        params = self.create_params(parsed)

        stats = self.run_deduplication(params)
        self.output_results(stats)


def _package_version() -> str:
    from dedupcopy import __version__
    return __version__


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
