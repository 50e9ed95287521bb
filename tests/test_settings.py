"""
Settings Tests
==============
Tests for loading configuration from environment variables.
"""

import pytest

from analytics_relay.config import DEFAULT_BATCH_SIZE, DEFAULT_ENDPOINT, DEFAULT_FLUSH_INTERVAL
from analytics_relay.errors import ConfigError
from analytics_relay.settings import AnalyticsSettings, config_from_env, get_settings


class TestAnalyticsSettings:
    """Tests for the environment-backed settings."""

    def test_unset_environment(self, clean_env: pytest.MonkeyPatch):
        """Test that missing variables leave every field unset."""
        config = AnalyticsSettings().to_config()

        assert config.endpoint == ""
        assert config.flush_interval == 0
        assert config.batch_size == 0
        assert config.verbose is False
        assert "endpoint" in config.unset_fields()

    def test_reads_environment(self, clean_env: pytest.MonkeyPatch):
        """Test that prefixed variables are picked up."""
        clean_env.setenv("ANALYTICS_ENDPOINT", "https://env.example.com")
        clean_env.setenv("ANALYTICS_FLUSH_INTERVAL", "2.5")
        clean_env.setenv("ANALYTICS_BATCH_SIZE", "100")
        clean_env.setenv("ANALYTICS_VERBOSE", "true")

        config = AnalyticsSettings().to_config()

        assert config.endpoint == "https://env.example.com"
        assert config.flush_interval == 2.5
        assert config.batch_size == 100
        assert config.verbose is True

    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path):
        """Test that a .env file in the working directory is honoured."""
        (tmp_path / ".env").write_text("ANALYTICS_BATCH_SIZE=7\n")
        assert AnalyticsSettings().batch_size == 7

    def test_overrides(self, clean_env: pytest.MonkeyPatch):
        """Test that explicit overrides beat the environment."""
        clean_env.setenv("ANALYTICS_BATCH_SIZE", "100")
        config = AnalyticsSettings().to_config(batch_size=5, verbose=True)

        assert config.batch_size == 5
        assert config.verbose is True

    def test_settings_cached(self, clean_env: pytest.MonkeyPatch):
        """Test that get_settings returns a cached instance."""
        assert get_settings() is get_settings()


class TestConfigFromEnv:
    """Tests for resolving a configuration from the environment."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch):
        """Test that an empty environment resolves to library defaults."""
        config = config_from_env()

        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.flush_interval == DEFAULT_FLUSH_INTERVAL
        assert config.batch_size == DEFAULT_BATCH_SIZE
        assert config.unset_fields() == ()

    def test_negative_batch_size(self, clean_env: pytest.MonkeyPatch):
        """Test that negative values from the environment are rejected."""
        clean_env.setenv("ANALYTICS_BATCH_SIZE", "-5")

        with pytest.raises(ConfigError) as exc_info:
            config_from_env()

        assert exc_info.value.field == "batch_size"
        assert exc_info.value.value == -5
