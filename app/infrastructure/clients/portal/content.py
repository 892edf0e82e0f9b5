"""HTTP content-encoding support for portal responses."""

import gzip
import zlib
from typing import Optional

from infrastructure.clients.portal.errors import DecodeError

SUPPORTED_ENCODINGS = frozenset({"identity", "gzip", "x-gzip", "deflate"})


def _inflate(body: bytes) -> bytes:
    # "deflate" is zlib-wrapped per RFC 9110 but some servers send raw streams
    try:
        return zlib.decompress(body)
    except zlib.error:
        return zlib.decompress(body, -zlib.MAX_WBITS)


def decode_content(body: bytes, content_encoding: Optional[str]) -> bytes:
    """Undo the Content-Encoding applied to a response body.

    Args:
        body: Raw body bytes as received on the wire
        content_encoding: Value of the Content-Encoding header (may be None)

    Returns:
        Decoded body bytes

    Raises:
        DecodeError: If the encoding is unsupported or the body is corrupt
    """
    encoding = (content_encoding or "identity").strip().lower() or "identity"

    if encoding not in SUPPORTED_ENCODINGS:
        raise DecodeError(f"Unsupported content encoding: {encoding}")

    try:
        if encoding in ("gzip", "x-gzip"):
            return gzip.decompress(body)
        if encoding == "deflate":
            return _inflate(body)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Corrupt {encoding} body: {e}") from e

    return body
