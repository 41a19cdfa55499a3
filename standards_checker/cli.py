"""Command-line entry point for the frontend standards checker."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List

from . import __version__
from .checker import ScanOptions, ScanOutcome, run_scan
from .config import ConfigError
from .reporter import REPORT_FORMATS, Reporter
from .result import format_summary_table

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT_CODE = 2
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frontend-standards-checker",
        description="Check a JavaScript/TypeScript project against frontend coding standards",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root to scan (defaults to the current directory).",
    )
    parser.add_argument(
        "--zones",
        "-z",
        dest="zones",
        action="append",
        default=[],
        help="Zone to scan, relative to the root (repeatable).",
    )
    parser.add_argument(
        "--config",
        "-c",
        dest="config_path",
        default=None,
        help="Path to the configuration file (defaults to frontend-standards.yml in the root).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        default=None,
        help="Path of the report file (defaults to frontend-standards.log in the root).",
    )
    parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default="text",
        help="Report format for file output (defaults to text).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging.")
    parser.add_argument("--debug", action="store_true", help="Alias of --verbose.")
    parser.add_argument("--skip-structure", action="store_true", help="Skip structure rules and checks.")
    parser.add_argument("--skip-naming", action="store_true", help="Skip naming rules.")
    parser.add_argument("--skip-content", action="store_true", help="Skip content rules.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def options_from_args(args: argparse.Namespace) -> ScanOptions:
    return ScanOptions(
        root=Path(args.root),
        zones=tuple(args.zones),
        config_path=Path(args.config_path) if args.config_path else None,
        skip_structure=args.skip_structure,
        skip_naming=args.skip_naming,
        skip_content=args.skip_content,
    )


def write_output(outcome: ScanOutcome, output_path: str | None, report_format: str) -> None:
    print(format_summary_table(outcome.result))

    reporter = Reporter(outcome.project.root, Path(output_path) if output_path else None)
    for path in reporter.write(outcome, report_format):
        print(f"\nReport written to {path}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose or args.debug)

    try:
        outcome = asyncio.run(run_scan(options_from_args(args)))
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        print(f"Configuration error: {exc}")
        return CONFIG_ERROR_EXIT_CODE

    write_output(outcome, args.output_path, args.format)
    return outcome.result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
