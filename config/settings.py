"""
Configuration Management

Handles application constants and environment variables.
Values are read once at startup; missing credentials are not validated
here and only show up later as failed notification sends.
"""

import os
import math
import logging

from config.models import NotificationCredentials

logger = logging.getLogger(__name__)

# Page text shown by TestFlight when no more testers can join
FULL_MARKER = "This beta is full"

PUSHOVER_API_URL = "https://api.pushover.net/1/messages.json"
PUSHOVER_URL_TITLE = "TestFlight Link"

DEFAULT_CHECK_INTERVAL = 5  # Seconds between cycles
DEFAULT_LOG_LEVEL = "INFO"


def load_credentials(environ=None):
    """Build notification credentials from the environment; unset values become empty strings."""
    env = os.environ if environ is None else environ
    return NotificationCredentials(
        pushover_user_key=env.get("PUSHOVER_USER_KEY", ""),
        pushover_api_token=env.get("PUSHOVER_API_TOKEN", ""),
        webhook_url=env.get("DISCORD_WEBHOOK_URL", ""),
    )


def is_valid_interval(interval):
    """Sleep intervals must be finite and not negative."""
    return math.isfinite(interval) and interval >= 0


def get_check_interval(environ=None):
    """
    Read CHECK_INTERVAL in seconds, falling back to the default when unset or invalid.
    """
    env = os.environ if environ is None else environ
    raw = env.get("CHECK_INTERVAL")
    if not raw:
        return DEFAULT_CHECK_INTERVAL

    try:
        interval = float(raw)
    except ValueError:
        logger.warning(f"Invalid CHECK_INTERVAL '{raw}', using {DEFAULT_CHECK_INTERVAL}s")
        return DEFAULT_CHECK_INTERVAL

    if not is_valid_interval(interval):
        logger.warning(f"Out of range CHECK_INTERVAL '{raw}', using {DEFAULT_CHECK_INTERVAL}s")
        return DEFAULT_CHECK_INTERVAL
    return interval


def get_log_level(environ=None):
    env = os.environ if environ is None else environ
    return env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
