"""Run configuration handed to the enumerator and every worker."""

from dataclasses import dataclass
from typing import Any

from infrastructure.configuration import Settings
from infrastructure.configuration.integrations.portal import DEFAULT_USER_AGENT


@dataclass(frozen=True)
class HarvestConfig:
    """Immutable configuration for one harvest run.

    Attributes:
        base_url: Portal sharing REST root
        workers: Number of concurrent group workers
        user_agent: User-Agent header value
        verbose: Log per-group progress
        include_system_accounts: Also emit reserved system accounts
        system_account_prefix: Username prefix of reserved accounts
        page_size: Items requested per page
        verify_tls: Verify portal certificates
        connect_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds
        listing_max_attempts: Attempts per group-listing page, 0 for unbounded
        listing_retry_base_delay: Base backoff delay in seconds
        listing_retry_max_delay: Maximum backoff delay in seconds
    """

    base_url: str
    workers: int = 40
    user_agent: str = DEFAULT_USER_AGENT
    verbose: bool = False
    include_system_accounts: bool = False
    system_account_prefix: str = "esri_"
    page_size: int = 100
    verify_tls: bool = True
    connect_timeout: float = 40.0
    read_timeout: float = 30.0
    listing_max_attempts: int = 5
    listing_retry_base_delay: float = 1.0
    listing_retry_max_delay: float = 30.0

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url is required")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        if not 1 <= self.page_size <= 100:
            raise ValueError("page_size must be between 1 and 100")
        if self.listing_max_attempts < 0:
            raise ValueError("listing_max_attempts must not be negative")

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "HarvestConfig":
        """Build a config from settings, with explicit overrides taking precedence.

        Args:
            settings: Loaded application settings
            **overrides: Field values that replace the settings (e.g. from CLI)

        Returns:
            HarvestConfig
        """
        values = {
            "base_url": settings.portal.REST_URL,
            "workers": settings.harvest.workers,
            "user_agent": settings.portal.USER_AGENT,
            "include_system_accounts": settings.harvest.include_system_accounts,
            "system_account_prefix": settings.harvest.system_account_prefix,
            "page_size": settings.harvest.page_size,
            "verify_tls": settings.portal.VERIFY_TLS,
            "connect_timeout": settings.portal.CONNECT_TIMEOUT_SECONDS,
            "read_timeout": settings.portal.READ_TIMEOUT_SECONDS,
            "listing_max_attempts": settings.harvest.listing_max_attempts,
            "listing_retry_base_delay": settings.harvest.listing_retry_base_delay_seconds,
            "listing_retry_max_delay": settings.harvest.listing_retry_max_delay_seconds,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
