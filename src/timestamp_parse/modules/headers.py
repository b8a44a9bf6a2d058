"""Read HTTP-date header values from responses and header mappings."""

import logging

import requests
from requests.structures import CaseInsensitiveDict

from .outcome import Outcome, Status
from .parse import httpdate

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 10


def header_date(headers, name="Date"):
    """Parse the HTTP-date header *name*.

    Parameters
    ----------
    headers : requests.Response or Mapping[str, str]
        A response, or its headers.  Header names are matched
        case-insensitively.
    name : str
        Header to read, e.g. ``Date``, ``Last-Modified`` or ``Expires``.

    Returns
    -------
    Outcome
        As :func:`~.parse.httpdate`; ``BAD_FORMAT`` when the header is absent.
    """
    if isinstance(headers, requests.Response):
        headers = headers.headers
    raw = CaseInsensitiveDict(headers).get(name)
    if raw is None:
        logger.debug("Header %s not present", name)
        return Outcome.failure(Status.BAD_FORMAT)
    return httpdate(raw)


def last_modified(response):
    """Parse the ``Last-Modified`` header of *response*."""
    return header_date(response, "Last-Modified")


def expires(response):
    """Parse the ``Expires`` header of *response*."""
    return header_date(response, "Expires")


def fetch_header_date(url, name="Date", timeout=_DEFAULT_TIMEOUT):
    """Send a ``HEAD`` request to *url* and parse the header *name*.

    Returns
    -------
    Outcome or None
        None when the request fails or the server answers with an error status.
    """
    try:
        resp = requests.head(url, timeout=timeout, allow_redirects=True)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("HEAD request to %s failed: %s", url, exc)
        return None
    return header_date(resp, name)
