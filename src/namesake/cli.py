#!/usr/bin/env python3
"""
Namesake CLI — Command line interface for finding files that share a name.
Runs the same core engine as library callers; only parsing and printing live here.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn, TextIO
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

try:
    import rich
except ImportError:
    _MISSING_DEPS.append("rich")

if _MISSING_DEPS:
    print("Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from namesake.core.models import ScanParams, ScanResult, HashAlgorithmName
from namesake.core.errors import NamesakeError, OutputWriteError
from namesake.commands import ScanCommand
from namesake.reporter import ReportWriter
from namesake.aliases import HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = True
        self.output: Optional[TextIO] = None

        # UTF-8 for Windows consoles; surrogateescape writes undecodable filenames back as raw bytes
        sys.stdout.reconfigure(encoding='utf-8', errors='surrogateescape')
        sys.stderr.reconfigure(encoding='utf-8', errors='surrogateescape')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="namesake",
            description="Namesake — find files sharing a name across directory trees",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="*",
            default=[],
            help="Directories to scan. Default: current directory"
        )

        parser.add_argument(
            "-strict", "--strict",
            action="store_true",
            help="Only report files whose content is byte-identical"
        )
        parser.add_argument(
            "-no-verbose", "--no-verbose",
            action="store_true",
            dest="no_verbose",
            help="Don't display verbose output, progress and colors"
        )
        parser.add_argument(
            "-output", "--output",
            default="",
            type=str,
            metavar="FILE",
            help="Append the report to FILE instead of printing it to the console"
        )

        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default="sha256",
            type=str,
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--workers",
            default=50,
            type=int,
            metavar="N",
            help="Maximum number of matching workers. Default: 50"
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                paths=list(args.paths),
                strict=args.strict,
                verbose=not args.no_verbose,
                output_file=args.output or None,
                hash_algorithm=HASH_ALIASES.get(args.hash, HashAlgorithmName.SHA256),
                max_workers=args.workers,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def open_output(path: str) -> TextIO:
        """Open the report file for appending, creating it if needed."""
        try:
            return open(path, "a", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise OutputWriteError(f"Cannot open output file {path}: {e.strerror or e}", path=path) from e

    def announce_modes(self, params: ScanParams) -> None:
        """Startup notices shown in verbose mode only."""
        if not self.verbose:
            return
        self.warning("[!] Verbose mode enabled, to disable it add the option: -no-verbose")
        if params.strict:
            self.warning(f"[!] Strict mode enabled ({params.hash_algorithm.display_name}), "
                         "to disable it remove the option: -strict")
        if not params.output_file:
            self.warning("[!] No output file specified, printing to console. "
                         "Specify -output filename to output to a file")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
            sys.stderr.flush()
            if current == total:
                sys.stderr.write("\n")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files loaded...")
            sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> ScanResult:
        """Execute the scan workflow."""
        command = ScanCommand()
        try:
            result, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
                notice_callback=self.warning
            )
        except NamesakeError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)

        return result

    def output_results(self, result: ScanResult) -> None:
        """Write groups in the order produced by the core."""
        stream = self.output or sys.stdout
        writer = ReportWriter(
            stream,
            verbose=self.verbose,
            color=self.verbose and self.output is None
        )

        if self.verbose:
            print("Duplicated files:")
        writer.write(result)
        stream.flush()

        if self.verbose:
            ReportWriter(sys.stdout, verbose=True, color=True).write_totals(result)

    def warning(self, message: str) -> None:
        """Print an informational message to stderr (verbose mode only)."""
        if self.verbose:
            print(message, file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        params = self.create_params(args)
        self.verbose = params.verbose
        self.announce_modes(params)

        if params.output_file:
            try:
                self.output = self.open_output(params.output_file)
            except OutputWriteError as e:
                self.error_exit(str(e))

        try:
            result = self.run_scan(params)
            self.output_results(result)
        finally:
            if self.output is not None:
                self.output.close()
                self.output = None

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
