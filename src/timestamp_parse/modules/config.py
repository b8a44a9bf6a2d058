"""Configuration loading and validation."""

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Command-line defaults."""

    default_zone: str = "UTC"
    header: str = "Date"
    timeout: int = 10


def load_config(config_path=None):
    """Load configuration from a JSON file.

    Returns the defaults when *config_path* is None.  Exits the process if
    the file is missing or holds invalid values.
    """
    if config_path is None:
        return AppConfig()

    path = Path(config_path).resolve()
    if not path.exists():
        logger.error("Config file not found: %s", config_path)
        sys.exit(1)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        logger.error("Invalid config file %s: %s", config_path, exc)
        sys.exit(1)

    if not isinstance(raw, dict):
        logger.error("Config file %s must hold a JSON object", config_path)
        sys.exit(1)

    defaults = AppConfig()
    timeout = raw.get("timeout", defaults.timeout)
    if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout <= 0:
        logger.error("timeout must be a positive integer, got %r", timeout)
        sys.exit(1)

    for key in ("default_zone", "header"):
        value = raw.get(key, getattr(defaults, key))
        if not isinstance(value, str) or not value:
            logger.error("%s must be a non-empty string, got %r", key, value)
            sys.exit(1)

    return AppConfig(
        default_zone=raw.get("default_zone", defaults.default_zone),
        header=raw.get("header", defaults.header),
        timeout=timeout,
    )
