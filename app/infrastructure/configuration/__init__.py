"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the harvester
using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    PortalSettings: Portal connection settings class
    HarvestSettings: Harvest feature settings class

Example:
    ```python
    from infrastructure.configuration import settings

    base_url = settings.portal.REST_URL
    workers = settings.harvest.workers

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.integrations import PortalSettings
from infrastructure.configuration.features import HarvestSettings

__all__ = ["Settings", "settings", "PortalSettings", "HarvestSettings"]
