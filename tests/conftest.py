"""
Shared fixtures for monitor tests.

HTTP is never touched: sessions and responses are mocks.
"""

import pytest
from unittest.mock import MagicMock, PropertyMock

from config.models import MonitoredTarget, NotificationCredentials


def make_response(status_code=200, text="", json_data=None, json_error=None, read_error=None):
    """Build a mock requests.Response usable as a context manager."""
    response = MagicMock()
    response.status_code = status_code
    if read_error is not None:
        type(response).text = PropertyMock(side_effect=read_error)
    else:
        response.text = text
        response.content = text.encode("utf-8")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    response.__enter__.return_value = response
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def credentials():
    return NotificationCredentials(
        pushover_user_key="user-key",
        pushover_api_token="api-token",
        webhook_url="https://discord.example/api/webhooks/1/abc",
    )


@pytest.fixture
def whatsapp():
    return MonitoredTarget(name="WhatsApp", url="https://testflight.apple.com/join/krUFQpyJ")
