"""Group membership harvest feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class HarvestSettings(FeatureSettings):
    """Configuration for the group membership harvest.

    Environment Variables:
        HARVEST_WORKERS: Number of concurrent group workers (default: 40)
        HARVEST_PAGE_SIZE: Items requested per page, portal maximum is 100
        HARVEST_INCLUDE_SYSTEM_ACCOUNTS: Also emit reserved system accounts
        HARVEST_SYSTEM_ACCOUNT_PREFIX: Username prefix of reserved accounts
        HARVEST_LISTING_MAX_ATTEMPTS: Attempts per group-listing page before
            enumeration stops (default: 5). 0 retries forever.
        HARVEST_LISTING_RETRY_BASE_DELAY_SECONDS: Base exponential backoff delay
        HARVEST_LISTING_RETRY_MAX_DELAY_SECONDS: Maximum backoff delay

    Exponential Backoff:
        Delay calculation: min(base_delay * (2 ^ attempt), max_delay)

        Example with defaults (base=1s, max=30s):
            Attempt 1: 1s
            Attempt 2: 2s
            Attempt 3: 4s
            Attempt 4: 8s

    Example:
        ```python
        from infrastructure.configuration import settings

        workers = settings.harvest.workers
        if settings.harvest.listing_max_attempts == 0:
            # listing retries never give up
            ...
        ```
    """

    workers: int = Field(
        default=40,
        ge=1,
        alias="HARVEST_WORKERS",
        description="Number of concurrent group workers",
    )
    page_size: int = Field(
        default=100,
        ge=1,
        le=100,
        alias="HARVEST_PAGE_SIZE",
        description="Items requested per listing page",
    )
    include_system_accounts: bool = Field(
        default=False,
        alias="HARVEST_INCLUDE_SYSTEM_ACCOUNTS",
        description="Emit records for reserved system accounts",
    )
    system_account_prefix: str = Field(
        default="esri_",
        min_length=1,
        alias="HARVEST_SYSTEM_ACCOUNT_PREFIX",
        description="Username prefix identifying reserved system accounts",
    )
    listing_max_attempts: int = Field(
        default=5,
        ge=0,
        alias="HARVEST_LISTING_MAX_ATTEMPTS",
        description="Attempts per group-listing page, 0 for unbounded",
    )
    listing_retry_base_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        alias="HARVEST_LISTING_RETRY_BASE_DELAY_SECONDS",
        description="Base delay for exponential backoff (seconds)",
    )
    listing_retry_max_delay_seconds: float = Field(
        default=30.0,
        ge=0,
        alias="HARVEST_LISTING_RETRY_MAX_DELAY_SECONDS",
        description="Maximum delay for exponential backoff (seconds)",
    )
