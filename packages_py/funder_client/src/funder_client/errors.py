"""
Exceptions raised by funder_client.
"""
from typing import Any, Optional

from .types import ErrorEnvelope


class FunderError(Exception):
    """Base class for all funder_client errors."""


class ConfigurationError(FunderError, ValueError):
    """Client configuration is missing or invalid at call time."""


class TransportUnavailableError(FunderError):
    """No response was obtained from the backend."""

    def __init__(self, envelope: Optional[ErrorEnvelope], url: str = ""):
        self.envelope = envelope
        self.url = url
        message = envelope.message if envelope else "Service unavailable"
        super().__init__(f"Service unavailable ({url}): {message}")


class MalformedResponseError(FunderError):
    """The backend answered but the body is not valid JSON."""

    def __init__(self, envelope: Optional[ErrorEnvelope], url: str = ""):
        self.envelope = envelope
        self.url = url
        self.status = envelope.code if envelope else 0
        message = envelope.message if envelope else "Malformed response"
        super().__init__(f"Malformed response from {url} (HTTP {self.status}): {message}")


class FunderHTTPError(FunderError):
    """The backend answered with a 4xx/5xx status.

    ``body`` is the backend's decoded JSON, untouched.
    """

    def __init__(self, status: int, body: Any, url: str = ""):
        self.status = status
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status} from {url}")
