"""Errors raised by the portal client and response decoding."""

from typing import Optional


class PortalError(Exception):
    """Base class for failures talking to the portal.

    Attributes:
        message: human-friendly message
        url: the request URL, when known
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url


class TransportError(PortalError):
    """Connection failure, timeout or non-2xx response.

    Attributes:
        status_code: HTTP status code when a response was received
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(PortalError):
    """Body could not be decoded into a page.

    Raised for unsupported or corrupt content encodings, malformed JSON,
    unexpected envelope shapes and portal error envelopes.
    """
