"""
HTTP Transport
==============
Wire a configuration into the httpx client used to reach the ingestion API.
"""

from typing import Optional

import httpx

from analytics_relay import __version__
from analytics_relay.config import AnalyticsConfig, configure

USER_AGENT = f"analytics-relay-python/{__version__}"


def build_http_client(
    config: Optional[AnalyticsConfig] = None,
    timeout: float = 30.0,
) -> httpx.Client:
    """
    Create an HTTP client bound to the configured endpoint and transport.

    Args:
        config: Configuration, resolved here if it isn't already
        timeout: Request timeout in seconds

    Returns:
        An ``httpx.Client``; closing it is the caller's job

    Raises:
        ConfigError: If the configuration is invalid
    """
    config = configure(config)

    return httpx.Client(
        base_url=config.endpoint.rstrip("/"),
        transport=config.transport,
        timeout=timeout,
        headers={
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        },
    )
