"""Tagged parse results and the matching exception types."""

from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """Result kind of a parse or zone shift."""

    OK = "ok"
    BAD_FORMAT = "bad_format"
    INVALID_DATETIME = "invalid_datetime"
    INVALID_TIME_ZONE = "invalid_time_zone"


class TimestampError(ValueError):
    """Base class for failures raised by :meth:`Outcome.unwrap`."""

    status = None


class BadFormatError(TimestampError):
    """Input text does not match the expected grammar."""

    status = Status.BAD_FORMAT


class InvalidDatetimeError(TimestampError):
    """Fields were extracted but do not form a valid date and time."""

    status = Status.INVALID_DATETIME


class InvalidTimeZoneError(TimestampError):
    """Time zone name is not known to the time zone database."""

    status = Status.INVALID_TIME_ZONE


_ERRORS = {
    Status.BAD_FORMAT: BadFormatError,
    Status.INVALID_DATETIME: InvalidDatetimeError,
    Status.INVALID_TIME_ZONE: InvalidTimeZoneError,
}


@dataclass(frozen=True)
class Outcome:
    """Result of a parse: a status plus a value that is only set on success."""

    status: Status
    value: object = None

    @classmethod
    def success(cls, value):
        return cls(Status.OK, value)

    @classmethod
    def failure(cls, status):
        return cls(status, None)

    @property
    def ok(self):
        return self.status is Status.OK

    def unwrap(self):
        """Return the value, or raise the exception matching the failure status."""
        if self.ok:
            return self.value
        raise _ERRORS[self.status](self.status.value)

    def as_dict(self):
        """Return a JSON-serialisable representation."""
        return {
            "status": self.status.value,
            "value": self.value.as_dict() if self.value is not None else None,
        }
