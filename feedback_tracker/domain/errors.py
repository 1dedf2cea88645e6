from typing import Optional


class FeedbackClientError(Exception):
    """Base class for failures surfaced to the user as an inline message."""


class TransportError(FeedbackClientError):
    """The request never produced a response (network failure, timeout)."""


class ServerError(FeedbackClientError):
    """The remote store answered with a non-2xx status or an unreadable body."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message or f"Request failed with status {status_code}")


class ClientValidationError(FeedbackClientError):
    """Input rejected before any request was issued."""


class ViewClosedError(Exception):
    """A result arrived after its view was unmounted and must be ignored."""

    def __init__(self, view_name: str):
        self.view_name = view_name
        super().__init__(f"View '{view_name}' is closed")
