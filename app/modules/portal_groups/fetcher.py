"""Page fetcher: one GET against a listing endpoint, decoded into a Page."""

from typing import Dict, Optional, Protocol

from infrastructure.clients.portal.errors import DecodeError
from modules.portal_groups.decoder import decode_page
from modules.portal_groups.domain.models import Page


class PortalClient(Protocol):
    """What the fetcher needs from the shared HTTP client."""

    def get_bytes(self, url: str, headers: Optional[Dict[str, str]] = None) -> bytes:
        ...


class PageFetcher:
    """Fetches and decodes listing pages through a shared client.

    Each enumerator and worker owns one fetcher for the lifetime of its loop;
    the header set is per fetcher and reused across requests, while the
    connection pool belongs to the shared client.

    Args:
        client: Shared portal client
        accept_encoding: Accept-Encoding to advertise; None asks for identity
    """

    def __init__(self, client: PortalClient, accept_encoding: Optional[str] = None):
        self._client = client
        self._headers: Dict[str, str] = {
            "Accept": "application/json",
            # Explicit, or requests would advertise its default "gzip, deflate"
            "Accept-Encoding": accept_encoding or "identity",
        }

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def fetch(self, url: str) -> Page:
        """Fetch one page.

        Raises:
            TransportError: If the request fails
            DecodeError: If the body cannot be decoded; carries the URL
        """
        body = self._client.get_bytes(url, headers=self._headers)
        try:
            return decode_page(body)
        except DecodeError as e:
            raise DecodeError(e.message, url=url) from e
