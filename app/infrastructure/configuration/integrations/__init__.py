"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.portal import PortalSettings

__all__ = [
    "PortalSettings",
]
