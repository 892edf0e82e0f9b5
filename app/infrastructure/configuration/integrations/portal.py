"""Content portal integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/41.0.2227.0 Safari/537.36"
)


class PortalSettings(IntegrationSettings):
    """Portal REST API connection configuration.

    Environment Variables:
        PORTAL_REST_URL: Portal sharing REST root
            (e.g. https://maps.company.net/portal/sharing/rest)
        PORTAL_USER_AGENT: User-Agent header sent with every request
        PORTAL_VERIFY_TLS: Verify server certificates (default: True).
            Set to false only for portals behind internal or self-signed
            certificates.
        PORTAL_CONNECT_TIMEOUT_SECONDS: Connect timeout (default: 40s)
        PORTAL_READ_TIMEOUT_SECONDS: Read timeout (default: 30s)

    Example:
        ```python
        from infrastructure.configuration import settings

        base_url = settings.portal.REST_URL
        if not settings.portal.VERIFY_TLS:
            ...
        ```
    """

    REST_URL: str = Field(default="", alias="PORTAL_REST_URL")
    USER_AGENT: str = Field(default=DEFAULT_USER_AGENT, alias="PORTAL_USER_AGENT")
    VERIFY_TLS: bool = Field(default=True, alias="PORTAL_VERIFY_TLS")
    CONNECT_TIMEOUT_SECONDS: float = Field(
        default=40.0, gt=0, alias="PORTAL_CONNECT_TIMEOUT_SECONDS"
    )
    READ_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, alias="PORTAL_READ_TIMEOUT_SECONDS"
    )
