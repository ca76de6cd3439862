"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from pydantic import ValidationError

from date_range_label import __version__
from date_range_label.config import configure_logging, get_settings
from date_range_label.formatter import InvalidRangeError, format_date_range
from date_range_label.options import environment_locale, parse_locale
from date_range_label.schemas import FormatOptions
from date_range_label.timefmt import format_time

logger = logging.getLogger(__name__)


def _iso_datetime(value: str) -> datetime:
    """argparse type for ISO-8601 datetimes."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 datetime: {value!r}") from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="date-range-label",
        description="Human-readable labels for date-time ranges",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'format' command - label a range
    format_parser = subparsers.add_parser("format", help="Format a date-time range")
    format_parser.add_argument("start", type=_iso_datetime, help="Range start (ISO-8601)")
    format_parser.add_argument("end", type=_iso_datetime, help="Range end (ISO-8601)")
    format_parser.add_argument(
        "--today",
        type=_iso_datetime,
        default=None,
        help="Reference instant for Today/Tomorrow (default: now)",
    )
    format_parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Locale for time of day, e.g. en_US or de-DE (default: environment)",
    )
    format_parser.add_argument(
        "--no-time",
        dest="include_time",
        action="store_false",
        default=None,
        help="Omit time of day",
    )
    format_parser.add_argument(
        "--separator",
        type=str,
        default=None,
        help="Token between start and end (default: -)",
    )

    # 'time' command - compact time of day
    time_parser = subparsers.add_parser("time", help="Format a time of day")
    time_parser.add_argument("instant", type=_iso_datetime, help="Instant (ISO-8601)")
    time_parser.add_argument("--locale", type=str, default=None, help="Locale for time of day")

    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_format(args: argparse.Namespace) -> int:
    """Handle the 'format' command."""
    options = FormatOptions(
        today=args.today,
        locale=args.locale,
        include_time=args.include_time,
        separator=args.separator,
    )
    try:
        label = format_date_range(args.start, args.end, options)
    except InvalidRangeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(label)
    return 0


def cmd_time(args: argparse.Namespace) -> int:
    """Handle the 'time' command."""
    print(format_time(args.instant, args.locale or environment_locale()))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Locale: {parse_locale(environment_locale(settings))}")
    print(f"Debug: {settings.debug}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings\n{e}", file=sys.stderr)
        return 1
    debug = getattr(args, "debug", False) or settings.debug
    configure_logging("DEBUG" if debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "format": cmd_format,
        "time": cmd_time,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        logger.debug("Running command %s", args.command)
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
