"""CLI entry point for timestamp-parse."""

import argparse
import logging
import sys

from .modules.cli import run_header, run_httpdate, run_rfc3339
from .modules.config import load_config
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="timestamp-parse",
        description="Parse RFC 2616 and RFC 3339 timestamps and print them as JSON.",
    )
    parser.add_argument("-c", "--config", default=None, help="Path to config JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")

    sub = parser.add_subparsers(dest="command", required=True)

    p_http = sub.add_parser("httpdate", help="Parse an RFC 2616 HTTP-date")
    p_http.add_argument("text")

    p_rfc = sub.add_parser("rfc3339", help="Parse an RFC 3339 timestamp")
    p_rfc.add_argument("text")
    p_rfc.add_argument("-z", "--zone", default=None, help="Target time zone (default: value from config)")

    p_header = sub.add_parser("header", help="Parse an HTTP-date header of a URL")
    p_header.add_argument("url")
    p_header.add_argument("-n", "--name", default=None, help="Header name (default: value from config)")

    return parser.parse_args(argv)


def main(argv=None):
    """Application entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    config = load_config(args.config)
    logger.debug("Running command: %s", args.command)

    if args.command == "httpdate":
        return run_httpdate(args.text)
    if args.command == "rfc3339":
        return run_rfc3339(config, args.text, args.zone)
    return run_header(config, args.url, args.name)


if __name__ == "__main__":
    sys.exit(main())
