"""Parsers for RFC 2616 (HTTP-date) and RFC 3339 timestamps.

Both parsers only do lexical extraction and offset arithmetic.  Whether the
extracted fields form a real date and time is decided by
:func:`~.datetime_value.from_fields`, so every failure comes back as an
:class:`~.outcome.Outcome` rather than an exception.
"""

import logging
import re

from .datetime_value import UTC, from_fields, from_gregorian_seconds, gregorian_seconds, shift_zone
from .outcome import Outcome, Status
from ..utils.date_utils import hours_mins_to_secs, month_number, to_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

# e.g. "Sat, 06 Sep 2014 09:09:08 GMT"
_RE_HTTPDATE = re.compile(
    r"(?P<weekday>\S{3}),\s(?P<day>\d{2})\s(?P<month>\S{3})\s(?P<year>\d{4})"
    r"\D(?P<hour>\d{2})\D(?P<min>\d{2})\D(?P<sec>\d{2})\sGMT",
    re.ASCII,
)

# e.g. "1996-12-19T16:39:57-08:00"; digits after the first fractional one
# are consumed but not kept.
_RE_RFC3339 = re.compile(
    r"(?P<year>\d{4})\D(?P<month>\d{2})\D(?P<day>\d{2})"
    r"\D(?P<hour>\d{2})\D(?P<min>\d{2})\D(?P<sec>\d{2})"
    r"(?:\.(?P<fraction>\d)\d*)?"
    r"(?P<z>[zZ])?"
    r"(?:(?P<offset_sign>[+-])(?P<offset_hours>\d{1,2}):(?P<offset_mins>\d{2}))?",
    re.ASCII,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def httpdate(text):
    """Parse an RFC 2616 timestamp such as ``Sat, 06 Sep 2014 09:09:08 GMT``.

    The weekday is not checked against the date.  An unknown month name
    becomes month ``0`` and is rejected as ``INVALID_DATETIME``.

    Returns
    -------
    Outcome
        ``OK`` with a UTC :class:`~.datetime_value.DateTimeValue`,
        ``BAD_FORMAT`` or ``INVALID_DATETIME``.
    """
    match = _RE_HTTPDATE.search(text)
    if not match:
        logger.debug("Not an RFC 2616 timestamp: %r", text)
        return Outcome.failure(Status.BAD_FORMAT)

    date_fields = (to_int(match["year"]), month_number(match["month"]), to_int(match["day"]))
    return from_fields(date_fields, _time_fields(match), UTC)


def rfc3339(text, time_zone=UTC):
    """Parse an RFC 3339 timestamp and express it in *time_zone*.

    Examples
    --------
    >>> rfc3339("1996-12-19T16:39:57-08:00").value.day
    20
    >>> rfc3339("1996-12-19T16:39:57-8:00", "America/Los_Angeles").value.abbr
    'PST'

    Returns
    -------
    Outcome
        ``OK``, ``BAD_FORMAT``, ``INVALID_DATETIME`` or, when *time_zone*
        is unknown, ``INVALID_TIME_ZONE``.
    """
    utc = rfc3339_as_utc(text)
    if time_zone == UTC or not utc.ok:
        return utc
    return shift_zone(utc.value, time_zone)


def rfc3339_as_utc(text):
    """Parse an RFC 3339 timestamp, normalizing any offset to UTC."""
    match = _RE_RFC3339.search(text)
    if not match:
        logger.debug("Not an RFC 3339 timestamp: %r", text)
        return Outcome.failure(Status.BAD_FORMAT)

    date_fields = (to_int(match["year"]), to_int(match["month"]), to_int(match["day"]))
    time_fields = _time_fields(match)
    offset = _offset_seconds(match)
    if offset == 0:
        return from_fields(date_fields, time_fields, UTC)

    try:
        utc_date, utc_time = from_gregorian_seconds(gregorian_seconds(date_fields, time_fields) - offset)
    except ValueError as exc:
        logger.debug("Cannot apply offset %d to %r: %s", offset, text, exc)
        return Outcome.failure(Status.INVALID_DATETIME)
    return from_fields(utc_date, utc_time, UTC)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _time_fields(match):
    return to_int(match["hour"]), to_int(match["min"]), to_int(match["sec"])


def _offset_seconds(match):
    """Return the signed UTC offset in seconds; zulu or no offset is zero."""
    if match["z"]:
        return 0
    magnitude = hours_mins_to_secs(match["offset_hours"] or "00", match["offset_mins"] or "00")
    return -magnitude if match["offset_sign"] == "-" else magnitude
