"""
Environment Settings
====================
Load the scalar configuration fields from environment variables using
Pydantic Settings.

Variables are prefixed with ``ANALYTICS_`` (``ANALYTICS_ENDPOINT``,
``ANALYTICS_FLUSH_INTERVAL``, ``ANALYTICS_BATCH_SIZE``, ``ANALYTICS_VERBOSE``).
Anything missing stays unset so the library defaults apply.
"""

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from analytics_relay.config import AnalyticsConfig, configure


class AnalyticsSettings(BaseSettings):
    """Analytics client settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = ""
    flush_interval: float = Field(default=0.0, description="Seconds, 0 means default")
    batch_size: int = Field(default=0, description="Messages per request, 0 means default")
    verbose: bool = False

    def to_config(self, **overrides: Any) -> AnalyticsConfig:
        """
        Build an unresolved configuration from these settings.

        Args:
            **overrides: Field values taking precedence over the environment,
                including the non-scalar ones (transport, logger, ...)
        """
        fields: dict[str, Any] = {
            "endpoint": self.endpoint,
            "flush_interval": self.flush_interval,
            "batch_size": self.batch_size,
            "verbose": self.verbose,
        }
        fields.update(overrides)
        return AnalyticsConfig(**fields)


@lru_cache
def get_settings() -> AnalyticsSettings:
    """Get cached settings instance."""
    return AnalyticsSettings()


def config_from_env(**overrides: Any) -> AnalyticsConfig:
    """Validate and resolve a configuration read from the environment."""
    return configure(get_settings().to_config(**overrides))
