"""Portal REST API client.

Exports:
    PortalHttpClient: Shared HTTP client (connection pool, timeouts, TLS)
    decode_content: Undo a response's Content-Encoding
    PortalError, TransportError, DecodeError: Failure taxonomy
"""

from infrastructure.clients.portal.client import PortalHttpClient
from infrastructure.clients.portal.content import decode_content
from infrastructure.clients.portal.errors import (
    DecodeError,
    PortalError,
    TransportError,
)

__all__ = [
    "PortalHttpClient",
    "decode_content",
    "PortalError",
    "TransportError",
    "DecodeError",
]
