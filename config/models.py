"""
Data Models

In-memory models for monitored targets and notification credentials.
Nothing here is persisted; counters reset on every restart.
"""

from dataclasses import dataclass
from enum import Enum


class AvailabilityResult(Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass
class MonitoredTarget:
    name: str
    url: str
    consecutive_misses: int = 0  # Only field that changes after startup

    def record_miss(self):
        """Increment the miss counter and return the new value."""
        self.consecutive_misses += 1
        return self.consecutive_misses

    def reset_misses(self):
        self.consecutive_misses = 0


@dataclass(frozen=True)
class NotificationCredentials:
    pushover_user_key: str = ""
    pushover_api_token: str = ""
    webhook_url: str = ""
