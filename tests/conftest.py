"""
Shared fixtures for timestamp-parse tests.
"""

import pytest
import requests

from timestamp_parse.modules.datetime_value import DateTimeValue


@pytest.fixture
def utc_value():
    """Build a UTC DateTimeValue from calendar fields."""

    def _build(year, month, day, hour, minute, second):
        return DateTimeValue(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            timezone="UTC",
            abbr="UTC",
            std_off=0,
            utc_off=0,
        )

    return _build


@pytest.fixture
def make_response():
    """Build a requests.Response carrying the given headers."""

    def _build(headers, status_code=200):
        resp = requests.Response()
        resp.status_code = status_code
        resp.reason = "OK" if status_code < 400 else "Error"
        resp.url = "https://example.com/"
        resp.headers.update(headers)
        return resp

    return _build
