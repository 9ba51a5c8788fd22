"""
Availability Checker

Fetches a TestFlight join page and decides whether the beta still has room.
The page is considered full while it contains the FULL_MARKER text.
"""

import logging
import requests

from config.models import AvailabilityResult
from config.settings import FULL_MARKER
from monitoring.errors import FetchError, UnexpectedStatusError, ReadError

logger = logging.getLogger(__name__)


def is_full(page_text, marker=FULL_MARKER):
    """Return True if the page text contains the "beta is full" marker."""
    return marker in (page_text or "")


def check(url, session=None, timeout=None):
    """
    Check a single target URL for an open slot.

    Args:
        url (str): TestFlight join URL
        session (requests.Session, optional): Session to use (defaults to the requests module)
        timeout (float, optional): Request timeout; None keeps the transport default

    Returns:
        AvailabilityResult: AVAILABLE or UNAVAILABLE

    Raises:
        FetchError: If the request could not be made
        UnexpectedStatusError: If the page did not answer with HTTP 200
        ReadError: If the response body could not be read
    """
    http = session or requests

    try:
        response = http.get(url, stream=True, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Error fetching URL: {e}") from e

    # Release the connection on every path, including errors below
    with response:
        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code)

        try:
            body = response.text
        except requests.RequestException as e:
            raise ReadError(f"Error reading page content: {e}") from e

    logger.debug(f"Fetched {len(body)} characters from {url}")

    if is_full(body):
        return AvailabilityResult.UNAVAILABLE
    return AvailabilityResult.AVAILABLE
