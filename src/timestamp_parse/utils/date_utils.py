"""Field coercion helpers shared by the timestamp parsers."""

import re

_RE_LEADING_DIGITS = re.compile(r"\d+")

_MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}


def to_int(text):
    """Parse the leading decimal digits of *text* as an integer.

    Any trailing non-digit remainder is ignored.

    Raises
    ------
    ValueError
        If *text* does not start with a digit.
    """
    match = _RE_LEADING_DIGITS.match(text)
    if not match:
        raise ValueError(f"Not an integer: '{text}'")
    return int(match.group(0))


def hours_mins_to_secs(hours_text, mins_text):
    """Convert hour and minute digit strings to a number of seconds."""
    return to_int(hours_text) * 3600 + to_int(mins_text) * 60


def month_number(name):
    """Return the month number for a three-letter abbreviation.

    Unknown names map to ``0`` so that calendar validation rejects them.
    """
    return _MONTHS.get(name.lower(), 0)
