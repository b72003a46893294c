"""Exception hierarchy for the OneSignal SDK.

Every error raised by the client derives from :class:`OneSignalError`. Errors
produced after a response was received keep that response on ``.response`` so
callers can still look at the status code and headers.
"""

from __future__ import annotations

from typing import List, Optional

import httpx


class OneSignalError(Exception):
    """Base exception for all SDK errors.

    Attributes:
        response: The HTTP response that produced the error, if one was
            received.
    """

    def __init__(self, message: str, *, response: Optional[httpx.Response] = None) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code


class ConfigurationError(OneSignalError):
    """Raised when the client is missing a credential or identifier.

    Construction fails when neither an application key nor a user key is
    supplied. A call also fails with this error when it needs a key kind (or
    an app id) the client was never given.

    Example:
        try:
            client = Client(ClientConfig(app_id="..."))
        except ConfigurationError:
            raise SystemExit("set ONESIGNAL_API_KEY or ONESIGNAL_USER_KEY")
    """


class TransportError(OneSignalError):
    """Raised when sending the request failed before any response arrived.

    Connection refused, timeouts and TLS failures all land here. The original
    ``httpx`` exception is chained as ``__cause__``.
    """


class SerializationError(OneSignalError):
    """Raised when a request body cannot be encoded as JSON."""


class DecodeError(OneSignalError):
    """Raised when a response body cannot be decoded.

    On error statuses this replaces the API error when the body is not the
    expected ``{"errors": [...]}`` document.
    """


class APIError(OneSignalError):
    """Raised when OneSignal rejected the request.

    Attributes:
        messages: The human-readable messages from the ``errors`` array.

    Example:
        try:
            client.players.get("unknown")
        except APIError as e:
            for message in e.messages:
                logger.warning("OneSignal: %s", message)
    """

    def __init__(self, messages: List[str], *, response: Optional[httpx.Response] = None) -> None:
        self.messages = list(messages)
        super().__init__(self._render(self.messages), response=response)

    @staticmethod
    def _render(messages: List[str]) -> str:
        return "API errors:\n - " + "\n - ".join(messages)


class InternalServerError(OneSignalError):
    """Raised for HTTP 500 responses; the body is never parsed."""

    def __init__(self, *, response: Optional[httpx.Response] = None) -> None:
        super().__init__("internal server error", response=response)


__all__ = [
    "OneSignalError",
    "ConfigurationError",
    "TransportError",
    "SerializationError",
    "DecodeError",
    "APIError",
    "InternalServerError",
]
