"""Shared HTTP client for the portal REST API.

One client is created per harvest run and shared by the group enumerator and
every worker. It owns the connection pool and the settings common to all
requests (User-Agent, timeouts, TLS verification). Per-request headers are
supplied by each caller, so no request state is shared between threads.

Usage:
    from infrastructure.clients.portal import PortalHttpClient

    client = PortalHttpClient(user_agent="harvester/1.0", pool_size=41)
    body = client.get_bytes(url, headers={"Accept": "application/json"})
"""

from typing import Mapping, Optional

import requests
import structlog
import urllib3
from requests.adapters import HTTPAdapter

from infrastructure.clients.portal.content import decode_content
from infrastructure.clients.portal.errors import TransportError

logger = structlog.get_logger(__name__)


class PortalHttpClient:
    """HTTP client for portal listing endpoints.

    Attributes:
        user_agent: User-Agent header sent with every request
        connect_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds
        verify_tls: Whether server certificates are verified
    """

    def __init__(
        self,
        user_agent: str,
        pool_size: int = 10,
        connect_timeout: float = 40.0,
        read_timeout: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        """Initialize the portal HTTP client.

        Args:
            user_agent: User-Agent header value
            pool_size: Maximum pooled connections per host
            connect_timeout: Connect timeout in seconds
            read_timeout: Read timeout in seconds
            verify_tls: Verify server certificates. Disabling this is an
                explicit opt-in for portals behind self-signed certificates.
        """
        self.user_agent = user_agent
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.verify_tls = verify_tls
        self._logger = logger.bind(component="portal_http_client")

        self._session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=1, pool_maxsize=pool_size, pool_block=True
        )
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)
        self._session.headers.update({"User-Agent": user_agent})
        self._session.verify = verify_tls

        if not verify_tls:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            self._logger.warning("tls_verification_disabled")

    def get_bytes(self, url: str, headers: Optional[Mapping[str, str]] = None) -> bytes:
        """Send a GET request and return the content-decoded body.

        The body is read without transparent decompression and decoded
        according to the response's Content-Encoding header.

        Args:
            url: Fully-formed request URL
            headers: Per-request headers

        Returns:
            Decoded response body

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
            DecodeError: If the body's content encoding cannot be undone
        """
        log = self._logger.bind(url=url)
        log.debug("portal_http_request")

        try:
            response = self._session.get(
                url,
                headers=dict(headers or {}),
                timeout=(self.connect_timeout, self.read_timeout),
                stream=True,
            )
        except requests.Timeout as e:
            raise TransportError(f"Request timeout: {e}", url=url) from e
        except requests.RequestException as e:
            raise TransportError(f"Connection error: {e}", url=url) from e

        try:
            if not 200 <= response.status_code < 300:
                raise TransportError(
                    f"Unexpected status code: {response.status_code}",
                    url=url,
                    status_code=response.status_code,
                )
            raw = response.raw.read(decode_content=False)
            content_encoding = response.headers.get("Content-Encoding")
        except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
            raise TransportError(f"Error reading response: {e}", url=url) from e
        finally:
            response.close()

        log.debug(
            "portal_http_response",
            status_code=response.status_code,
            content_encoding=content_encoding,
            size=len(raw),
        )
        return decode_content(raw, content_encoding)

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("portal_http_client_closed")


__all__ = ["PortalHttpClient"]
