"""Command line entry point for the portal group membership harvest.

Prints one line per (group, member) pair to stdout:

    groupId, username, "fullName", joinedEpochMillis

Logs go to stderr. The URL, agent, thread count and system-account option can
also be set through the environment (see infrastructure.configuration);
flags take precedence.

Usage:
    portal-group-members -u https://maps.example.net/portal/sharing/rest -t 20 -v
"""

import argparse
import sys
from typing import List, Optional

from infrastructure.configuration import settings
from infrastructure.logging import configure_logging, get_module_logger
from modules.portal_groups import HarvestConfig, StreamSink, run_harvest

logger = get_module_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portal-group-members",
        description="List the members of every public group of a portal.",
    )
    parser.add_argument(
        "-u",
        "--url",
        default=settings.portal.REST_URL or None,
        required=not settings.portal.REST_URL,
        help="Portal sharing REST root, e.g. https://host/portal/sharing/rest",
    )
    parser.add_argument(
        "-t",
        "--threads",
        type=int,
        default=None,
        help=f"Number of concurrent group workers (default: {settings.harvest.workers})",
    )
    parser.add_argument(
        "-a",
        "--agent",
        default=None,
        help="User-Agent header sent with every request",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each group as it is processed",
    )
    parser.add_argument(
        "-e",
        "--esri",
        action="store_true",
        default=None,
        help="Include esri_ system accounts in the output",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification (self-signed portals only)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the harvest and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.threads is not None and args.threads < 1:
        parser.error("--threads must be at least 1")

    configure_logging(log_level="DEBUG" if args.verbose else None)

    try:
        config = HarvestConfig.from_settings(
            settings,
            base_url=args.url,
            workers=args.threads,
            user_agent=args.agent,
            verbose=args.verbose,
            include_system_accounts=args.esri,
            verify_tls=False if args.insecure else None,
        )
    except ValueError as e:
        parser.error(str(e))

    sink = StreamSink()
    summary = run_harvest(config, sink)
    sink.flush()

    if not summary.listing_complete or summary.groups_failed:
        logger.warning(
            "harvest_incomplete",
            listing_complete=summary.listing_complete,
            groups_failed=summary.groups_failed,
        )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
