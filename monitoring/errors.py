"""
Monitor Errors

Exception hierarchy for checking and notifying. None of these are fatal:
the monitor loop logs them and moves on.
"""


class MonitorError(Exception):
    pass


class CheckError(MonitorError):
    """Raised when a target could not be classified this cycle."""


class FetchError(CheckError):
    pass


class UnexpectedStatusError(CheckError):
    def __init__(self, status_code):
        self.status_code = status_code
        super().__init__(f"Unexpected HTTP status code: {status_code}")


class ReadError(CheckError):
    pass


class NotifyError(MonitorError):
    """Raised when a notification could not be delivered."""


class TransportError(NotifyError):
    pass


class NotificationError(NotifyError):
    def __init__(self, message, status_code=None, detail=None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{message}: {detail}" if detail else message)
