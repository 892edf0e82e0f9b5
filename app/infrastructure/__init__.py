"""Infrastructure modules for the harvester.

Centralized infrastructure components:
- configuration: Settings management (settings, PortalSettings, HarvestSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- clients: External API clients (portal REST API)
- concurrency: Thread coordination (RendezvousChannel)
"""

# Configuration
from infrastructure.configuration import settings

__all__ = [
    # Configuration
    "settings",
]
