"""Base classes shared by the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Every section reads the same .env file; variable names are exact
SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Settings for a remote service the harvester talks to."""

    model_config = SECTION_CONFIG


class FeatureSettings(BaseSettings):
    """Settings for a harvester feature (how the run behaves)."""

    model_config = SECTION_CONFIG
