"""Command-line entry point for the archivist exporter."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings
from adapters.markdown_sink import MarkdownDirectorySink
from adapters.sqlite_source import SQLiteRecordSource
from core.config import EXPORT_MODES, MODE_SINGLE
from core.errors import ArchiveError
from core.exporter import ArchiveExporter

NAME = "ARCHIVIST"
FONT = "tarty-1"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: dict) -> None:
    if not config.get("enabled", True):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/archivist.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers, force=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archivist",
        description="Extracts Discord messages from a SQLite export and formats them as Markdown",
    )
    parser.add_argument("-i", "--input-db", required=True, help="Path to the source SQLite database file")
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output directory (monthly mode) or Markdown file path (single mode)",
    )
    parser.add_argument("--mode", choices=EXPORT_MODES, default=None, help="Output layout (default: from config, else monthly)")
    parser.add_argument(
        "--sort-within-groups",
        action="store_true",
        default=None,
        help="Re-sort messages by timestamp inside each file instead of trusting the database order",
    )
    parser.add_argument("--no-banner", action="store_true", help="Do not print the startup banner")
    return parser


def _run(args: argparse.Namespace) -> int:
    config = settings.load_config()
    _configure_logging(settings.logging_config(config))
    logger = logging.getLogger(__name__)

    export_config = settings.build_export_config(
        config,
        mode=args.mode,
        sort_within_groups=args.sort_within_groups,
        single_file_name=os.path.basename(args.output) or None,
    )
    # Single mode treats --output as a file path, monthly mode as a directory.
    if export_config.mode == MODE_SINGLE:
        output_dir = os.path.dirname(args.output) or "."
    else:
        output_dir = args.output
    logger.info("Starting export from %s (mode=%s)", args.input_db, export_config.mode)

    # Concrete adapters are chosen here; the exporter only sees the ports.
    exporter = ArchiveExporter(
        source=SQLiteRecordSource(args.input_db),
        sink=MarkdownDirectorySink(output_dir),
        config=export_config,
    )
    summary = exporter.run()
    print(f"Successfully extracted {summary.records} messages to {args.output}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    if not args.no_banner:
        _print_banner()

    try:
        return _run(args)
    except ArchiveError as exc:
        print(f"Error during extraction: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
