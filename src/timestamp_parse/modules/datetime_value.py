"""Calendar validation and time zone shifting for parsed timestamps.

Parsers hand raw calendar fields to :func:`from_fields`, which validates them
and attaches zone information.  :func:`shift_zone` re-expresses a validated
instant in another zone.  Offset arithmetic is done on a linear count of
seconds (see :func:`gregorian_seconds`) so that no manual day/month/year
carrying is needed.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .outcome import Outcome, Status

logger = logging.getLogger(__name__)

UTC = "UTC"

_SECONDS_PER_DAY = 86400

# Days from 0000-01-01 to 0001-01-01 in the proleptic Gregorian calendar
# (year 0 is a leap year).
_YEAR_ZERO_DAYS = 366


@dataclass(frozen=True)
class DateTimeValue:  # pylint: disable=too-many-instance-attributes
    """Calendar fields of an instant plus the zone they are expressed in.

    ``utc_off`` is the zone's standard offset from UTC in seconds and
    ``std_off`` the additional daylight saving offset, so the total offset is
    ``utc_off + std_off``.

    The split follows the ``isdst`` flags of the time zone database.  Zones
    recorded with negative daylight saving time report it as such: Europe/Dublin
    in winter is ``GMT`` with ``utc_off=3600`` and ``std_off=-3600``.  Only the
    total is guaranteed to be the offset in effect.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    timezone: str
    abbr: str
    std_off: int
    utc_off: int

    def to_datetime(self):
        """Return an aware :class:`datetime.datetime` for this value."""
        fields = (self.year, self.month, self.day, self.hour, self.minute, self.second)
        total = timedelta(seconds=self.utc_off + self.std_off)
        tzinfo = _resolve_zone(self.timezone)
        if tzinfo is None:
            return datetime(*fields, tzinfo=timezone(total, self.abbr))
        result = datetime(*fields, tzinfo=tzinfo)
        # Repeated wall-clock hour at the end of daylight saving time
        if result.utcoffset() != total:
            result = result.replace(fold=1)
        return result

    def isoformat(self):
        return self.to_datetime().isoformat()

    def as_dict(self):
        return asdict(self)


def from_fields(date_fields, time_fields, zone):
    """Validate calendar fields and build a value in *zone*.

    Parameters
    ----------
    date_fields : tuple[int, int, int]
        ``(year, month, day)``
    time_fields : tuple[int, int, int]
        ``(hour, minute, second)``
    zone : str
        Time zone name, e.g. ``"UTC"`` or ``"Europe/Paris"``.

    Returns
    -------
    Outcome
        ``OK`` with a :class:`DateTimeValue`, ``INVALID_DATETIME`` when the
        fields do not form a real date and time, or ``INVALID_TIME_ZONE``.
    """
    try:
        naive = datetime(*date_fields, *time_fields)
    except ValueError as exc:
        logger.debug("Rejected calendar fields %s %s: %s", date_fields, time_fields, exc)
        return Outcome.failure(Status.INVALID_DATETIME)

    tzinfo = _resolve_zone(zone)
    if tzinfo is None:
        return Outcome.failure(Status.INVALID_TIME_ZONE)
    return Outcome.success(_from_aware(naive.replace(tzinfo=tzinfo), zone))


def shift_zone(value, zone):
    """Re-express *value* as local fields of *zone*."""
    tzinfo = _resolve_zone(zone)
    if tzinfo is None:
        return Outcome.failure(Status.INVALID_TIME_ZONE)
    return Outcome.success(_from_aware(value.to_datetime().astimezone(tzinfo), zone))


def gregorian_seconds(date_fields, time_fields):
    """Return seconds elapsed since 0000-01-01T00:00:00 for the given fields.

    The date must be a real calendar date.  The time fields are not
    range-checked: they are folded into the total as plain arithmetic.

    Raises
    ------
    ValueError
        If *date_fields* is not a valid date.
    """
    hour, minute, second = time_fields
    days = date(*date_fields).toordinal() - 1 + _YEAR_ZERO_DAYS
    return days * _SECONDS_PER_DAY + hour * 3600 + minute * 60 + second


def from_gregorian_seconds(seconds):
    """Inverse of :func:`gregorian_seconds`.

    Returns
    -------
    tuple[tuple[int, int, int], tuple[int, int, int]]
        ``((year, month, day), (hour, minute, second))``

    Raises
    ------
    ValueError
        If the result falls outside the years 1 to 9999.
    """
    days, rest = divmod(seconds, _SECONDS_PER_DAY)
    day = date.fromordinal(days + 1 - _YEAR_ZERO_DAYS)
    hour, rest = divmod(rest, 3600)
    minute, second = divmod(rest, 60)
    return (day.year, day.month, day.day), (hour, minute, second)


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _resolve_zone(name):
    """Return a tzinfo for *name*, or None if the zone is unknown."""
    if name == UTC:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError):
        logger.debug("Unknown time zone: %r", name)
        return None


def _from_aware(moment, zone):
    dst = moment.dst() or timedelta(0)
    return DateTimeValue(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
        timezone=zone,
        abbr=moment.tzname(),
        std_off=int(dst.total_seconds()),
        utc_off=int((moment.utcoffset() - dst).total_seconds()),
    )
