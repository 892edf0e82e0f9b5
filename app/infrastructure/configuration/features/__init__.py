"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.harvest import HarvestSettings

__all__ = [
    "HarvestSettings",
]
