"""
Tests for HTTP-date header helpers.
"""

import logging
from unittest.mock import patch

import requests

from timestamp_parse.modules.headers import expires, fetch_header_date, header_date, last_modified
from timestamp_parse.modules.outcome import Status

HTTP_DATE = "Sat, 06 Sep 2014 09:09:08 GMT"


def test_header_date_from_mapping(utc_value):
    outcome = header_date({"date": HTTP_DATE})

    assert outcome.value == utc_value(2014, 9, 6, 9, 9, 8)


def test_header_date_from_response(make_response, utc_value):
    resp = make_response({"Date": HTTP_DATE})

    assert header_date(resp).value == utc_value(2014, 9, 6, 9, 9, 8)


def test_header_date_missing_header():
    assert header_date({}, "Last-Modified").status is Status.BAD_FORMAT


def test_header_date_malformed_value():
    assert header_date({"Date": "yesterday"}).status is Status.BAD_FORMAT


def test_last_modified_and_expires(make_response, utc_value):
    resp = make_response(
        {
            "Last-Modified": "Wed, 21 Oct 2015 07:28:00 GMT",
            "Expires": "Thu, 01 Dec 1994 16:00:00 GMT",
        }
    )

    assert last_modified(resp).value == utc_value(2015, 10, 21, 7, 28, 0)
    assert expires(resp).value == utc_value(1994, 12, 1, 16, 0, 0)


def test_fetch_header_date(make_response, utc_value):
    with patch("timestamp_parse.modules.headers.requests.head") as mock_head:
        mock_head.return_value = make_response({"Date": HTTP_DATE})
        outcome = fetch_header_date("https://example.com/", timeout=5)

    mock_head.assert_called_once_with("https://example.com/", timeout=5, allow_redirects=True)
    assert outcome.value == utc_value(2014, 9, 6, 9, 9, 8)


def test_fetch_header_date_connection_error(caplog):
    with patch("timestamp_parse.modules.headers.requests.head") as mock_head:
        mock_head.side_effect = requests.ConnectionError("refused")
        with caplog.at_level(logging.WARNING):
            outcome = fetch_header_date("https://example.com/")

    assert outcome is None
    assert "HEAD request to https://example.com/ failed" in caplog.text


def test_fetch_header_date_http_error(make_response):
    with patch("timestamp_parse.modules.headers.requests.head") as mock_head:
        mock_head.return_value = make_response({"Date": HTTP_DATE}, status_code=404)
        assert fetch_header_date("https://example.com/") is None
