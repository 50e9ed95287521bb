"""
Analytics Relay
===============
Configuration layer for a background client that batches analytics
messages and forwards them to a collection endpoint.
"""

__version__ = "1.0.0"

from analytics_relay.backoff import ExponentialBackoff, retrying, wait_retry_policy
from analytics_relay.config import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_ENDPOINT,
    DEFAULT_FLUSH_INTERVAL,
    MAX_REQUEST_BYTES,
    AnalyticsConfig,
    configure,
    resolve,
    validate,
)
from analytics_relay.defaults import default_uid
from analytics_relay.errors import AnalyticsError, ConfigError
from analytics_relay.log import Logger
from analytics_relay.settings import AnalyticsSettings, config_from_env
from analytics_relay.transport import build_http_client

__all__ = [
    "AnalyticsConfig",
    "AnalyticsError",
    "AnalyticsSettings",
    "ConfigError",
    "ExponentialBackoff",
    "Logger",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_ENDPOINT",
    "DEFAULT_FLUSH_INTERVAL",
    "MAX_REQUEST_BYTES",
    "build_http_client",
    "config_from_env",
    "configure",
    "default_uid",
    "resolve",
    "retrying",
    "validate",
    "wait_retry_policy",
]
