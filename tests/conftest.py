"""
Test Configuration
==================
Pytest fixtures for analytics relay tests.
"""

from collections.abc import Generator

import httpx
import pytest

from analytics_relay.config import AnalyticsConfig
from analytics_relay.defaults import reset_defaults
from analytics_relay.settings import get_settings

ENV_VARS = (
    "ANALYTICS_ENDPOINT",
    "ANALYTICS_FLUSH_INTERVAL",
    "ANALYTICS_BATCH_SIZE",
    "ANALYTICS_VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_defaults() -> Generator[None, None, None]:
    """Start every test with no cached defaults or settings."""
    reset_defaults()
    get_settings.cache_clear()
    yield
    reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Remove analytics variables and keep a stray .env file out of reach."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests captured by ``mock_transport``."""
    return []


@pytest.fixture
def mock_transport(recorded_requests: list[httpx.Request]) -> httpx.MockTransport:
    """Transport answering every request with an empty JSON object."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json={})

    return httpx.MockTransport(handler)


@pytest.fixture
def custom_config(mock_transport: httpx.MockTransport) -> AnalyticsConfig:
    """Configuration with every field explicitly set."""

    class ListLogger:
        def __init__(self):
            self.lines = []

        def info(self, event, *args, **kwargs):
            self.lines.append(("info", event))

        def error(self, event, *args, **kwargs):
            self.lines.append(("error", event))

    return AnalyticsConfig(
        endpoint="https://custom.example.com",
        flush_interval=1.5,
        transport=mock_transport,
        logger=ListLogger(),
        batch_size=10,
        verbose=True,
        uid_generator=lambda: "fixed-id",
        clock=lambda: None,
        retry_policy=lambda attempt: 0.0,
    )
