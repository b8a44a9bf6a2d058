"""CLI command implementations for timestamp-parse."""

import json
import logging

from .headers import fetch_header_date
from .parse import httpdate, rfc3339

logger = logging.getLogger(__name__)


def run_httpdate(text):
    """Parse an RFC 2616 timestamp and print the outcome. Returns the exit status."""
    return _emit(httpdate(text))


def run_rfc3339(config, text, zone=None):
    """Parse an RFC 3339 timestamp into *zone* (default from config) and print it."""
    return _emit(rfc3339(text, zone or config.default_zone))


def run_header(config, url, name=None):
    """Fetch *url* and print the parsed HTTP-date header *name*."""
    name = name or config.header
    outcome = fetch_header_date(url, name, timeout=config.timeout)
    if outcome is None:
        logger.error("Could not read header %s from %s", name, url)
        return 1
    return _emit(outcome)


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _emit(outcome):
    print(json.dumps(outcome.as_dict(), ensure_ascii=False))
    return 0 if outcome.ok else 1
