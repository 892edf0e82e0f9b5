"""Harvester configuration settings - main aggregator."""

from pydantic_settings import BaseSettings

from infrastructure.configuration.base import SECTION_CONFIG

# Integration settings
from infrastructure.configuration.integrations import PortalSettings

# Feature settings
from infrastructure.configuration.features import HarvestSettings


class Settings(BaseSettings):
    """Harvester configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configurations (the portal REST API)
    - **Features**: Feature module configurations (the membership harvest)

    Environment Variables:
        ENVIRONMENT: Deployment environment name (default: production)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        APP_NAME: Application name attached to every log entry
        APP_VERSION: Application version attached to every log entry

    Example:
        ```python
        from infrastructure.configuration import settings

        base_url = settings.portal.REST_URL
        workers = settings.harvest.workers

        if settings.is_production:
            # JSON logs...
        ```
    """

    # Application-level settings
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "portal-group-members"
    APP_VERSION: str = "0.1.0"

    # Integration settings
    portal: PortalSettings

    # Feature settings
    harvest: HarvestSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "portal": PortalSettings,
            # Features
            "harvest": HarvestSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SECTION_CONFIG


# Create the singleton settings instance
settings = Settings()
