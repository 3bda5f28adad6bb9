"""
Zone Constraint Renderer - command line interface.

Builds a zone from constraint specs (or a JSON zone document) and prints it
as a tree or as JSON.

Usage:
    zonecat '+region=east,-ssd'                     # One set, all replicas
    zonecat '2:+region=east' '1:-region=west'       # Replica-scoped sets
    zonecat --zone-json '{"constraints": {"+region=east": 2}}'
    zonecat '2:+region=east' '1:-region=west' --style box
    zonecat '2:+region=east' --format json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import (
    AppConfig,
    TreeConfig,
    load_environment,
    reload_settings,
    setup_logging,
    validate_config,
)
from .formatters import ZoneFormatter
from .parsers import ZoneParser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=AppConfig.APP_NAME,
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Constraints for all replicas
  zonecat '+region=east,-ssd'

  # Two replicas in east, one outside west
  zonecat '2:+region=east' '1:-region=west'

  # Zone document as JSON
  zonecat --zone-json '{"constraints": ["+region=east"]}'

  # Box-drawing tree
  zonecat '2:+region=east' '1:-region=west' --style box

  # Specs starting with '-' go after --
  zonecat -- '-region=west'
        """
    )

    parser.add_argument(
        "specs",
        nargs="*",
        metavar="SPEC",
        help="Constraint set as '[COUNT:]CONSTRAINTS', e.g. '2:+region=east,-ssd'. "
             "Without COUNT the set applies to all replicas."
    )

    parser.add_argument(
        "--zone-json", "-z",
        help="Zone document as JSON, e.g. '{\"constraints\": {\"+region=east\": 2}}'"
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(AppConfig.OUTPUT_FORMATS),
        default=None,
        help=f"Output format (default: {AppConfig.DEFAULT_OUTPUT_FORMAT})"
    )

    parser.add_argument(
        "--style", "-s",
        choices=list(TreeConfig.STYLES),
        default=None,
        help=f"Tree style (default: {TreeConfig.STYLE})"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with settings"
    )

    parser.add_argument(
        "--log-file",
        help="Also write logs to this file (rotated per LOG_FILE_MAX_BYTES / LOG_FILE_BACKUP_COUNT)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.env_file:
            load_environment(args.env_file)
            reload_settings()
        validate_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"\n❌ {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    if args.zone_json and args.specs:
        parser.error("pass either SPEC arguments or --zone-json, not both")

    try:
        if args.zone_json:
            zone = ZoneParser.from_dict(json.loads(args.zone_json))
        else:
            zone = ZoneParser.from_specs(args.specs)
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors too
        logger.error(f"Failed to parse zone: {e}")
        print(f"\n❌ Invalid zone: {e}", file=sys.stderr)
        sys.exit(1)

    formatter = ZoneFormatter(output_format=args.format, style=args.style)
    print(formatter.format(zone))


def run():
    """Console entry point"""
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)
