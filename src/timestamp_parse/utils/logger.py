"""Logging configuration utility."""

import logging
import sys


def setup_logging(verbose=False):
    """Configure root logger with appropriate level and format.

    Log records go to stderr so that command output on stdout stays parseable.
    Does nothing if the root logger already has handlers.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
