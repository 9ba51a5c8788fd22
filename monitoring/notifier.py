"""
Notification Module

Handles the outbound notification channels:
- Pushover push notifications
- Discord-style incoming webhooks

Each channel implements Notifier.notify(target_name, target_url) and raises
a NotifyError subclass on failure. Exactly one HTTP request is made per call.
"""

import logging
import requests

from config.settings import PUSHOVER_API_URL, PUSHOVER_URL_TITLE
from monitoring.errors import NotificationError, TransportError

logger = logging.getLogger(__name__)


class Notifier:
    """Base class for a notification channel."""

    label = "Notifier"

    def __init__(self, session=None):
        self.session = session or requests

    def notify(self, target_name, target_url):
        raise NotImplementedError


class PushoverNotifier(Notifier):
    """
    Sends push notifications through the Pushover messages API.
    """

    label = "Pushover"

    def __init__(self, credentials, session=None):
        super().__init__(session)
        self.credentials = credentials

    def build_payload(self, target_name, target_url):
        return {
            "token": self.credentials.pushover_api_token,
            "user": self.credentials.pushover_user_key,
            "title": f"Slot available: {target_name}",
            "message": f"A slot for the app '{target_name}' is available. Here is the link: {target_url}",
            "url": target_url,
            "url_title": PUSHOVER_URL_TITLE,
        }

    def notify(self, target_name, target_url):
        """
        Send a Pushover notification for an available target.

        Raises:
            TransportError: If the request could not be sent
            NotificationError: If Pushover answered with anything but HTTP 200
        """
        payload = self.build_payload(target_name, target_url)

        try:
            response = self.session.post(PUSHOVER_API_URL, data=payload)
        except requests.RequestException as e:
            raise TransportError(f"Error sending Pushover notification: {e}") from e

        with response:
            if response.status_code != 200:
                # Pushover returns a JSON error body; tolerate anything else
                try:
                    detail = response.json()
                except ValueError:
                    detail = {}
                raise NotificationError(
                    "Error sending Pushover notification",
                    status_code=response.status_code,
                    detail=detail,
                )

        logger.info(f"Pushover notification sent for {target_name}")


class WebhookNotifier(Notifier):
    """
    Posts a chat message to an incoming webhook (Discord format).
    """

    label = "Discord"

    def __init__(self, webhook_url, session=None):
        super().__init__(session)
        self.webhook_url = webhook_url

    def build_payload(self, target_name, target_url):
        return {
            "content": f"Slot available for **{target_name}**! Check it out here: {target_url}",
        }

    def notify(self, target_name, target_url):
        """
        Post the availability message to the webhook.

        Raises:
            TransportError: If the payload or request could not be built or sent
            NotificationError: If the webhook answered with anything but HTTP 204
        """
        payload = self.build_payload(target_name, target_url)

        # requests raises InvalidJSONError and MissingSchema as RequestException subclasses
        try:
            response = self.session.post(self.webhook_url, json=payload)
        except (requests.RequestException, ValueError) as e:
            raise TransportError(f"Error sending Discord notification: {e}") from e

        with response:
            if response.status_code != 204:
                raise NotificationError(
                    "Unexpected Discord response",
                    status_code=response.status_code,
                    detail=response.text,
                )

        logger.info(f"Discord notification sent for {target_name}")


def build_notifiers(credentials, session=None):
    """Create the default channels in send order: Pushover, then the webhook."""
    return [
        PushoverNotifier(credentials, session=session),
        WebhookNotifier(credentials.webhook_url, session=session),
    ]
