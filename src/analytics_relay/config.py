"""
Client Configuration
====================
Configuration record for the analytics client, with validation and defaults.

Every field may be left unset (``None``, or the empty/zero value of its
type), in which case ``resolve`` substitutes the library default.
"""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

import httpx

from analytics_relay.backoff import RetryPolicy
from analytics_relay.defaults import (
    default_clock,
    default_logger,
    default_retry_policy,
    default_transport,
    default_uid,
)
from analytics_relay.errors import ConfigError
from analytics_relay.log import Logger

logger = logging.getLogger(__name__)

# Endpoint client instances send messages to if none was explicitly set.
DEFAULT_ENDPOINT = "https://api.segment.io"

# Flush interval in seconds used if none was explicitly set.
DEFAULT_FLUSH_INTERVAL = 5.0

# Maximum number of messages per request used if none was explicitly set.
DEFAULT_BATCH_SIZE = 250

# Request body ceiling applied by the API regardless of batch size.
MAX_REQUEST_BYTES = 500 * 1024


@dataclass(frozen=True)
class AnalyticsConfig:
    """
    Options controlling an analytics client.

    Attributes:
        endpoint: Base URL of the ingestion service
        flush_interval: Seconds a queued batch may wait before being sent
        transport: httpx transport used to send requests
        logger: Sink for info and error messages from background operations
        batch_size: Maximum number of messages sent in one request
        verbose: Log more frequent and detailed messages
        uid_generator: Returns a unique identifier for each message
        clock: Returns the current time used to timestamp messages
        retry_policy: Maps the number of attempts made so far to the
            seconds to wait before retrying a failed request
    """

    endpoint: Optional[str] = None
    flush_interval: Optional[float] = None
    transport: Optional[httpx.BaseTransport] = None
    logger: Optional[Logger] = None
    batch_size: Optional[int] = None
    verbose: bool = False
    uid_generator: Optional[Callable[[], str]] = None
    clock: Optional[Callable[[], datetime]] = None
    retry_policy: Optional[RetryPolicy] = None

    def validate(self) -> None:
        """
        Check the fields that have invalid non-zero values.

        Raises:
            ConfigError: On the first invalid field, flush interval first
        """
        if self.flush_interval is not None and not self.flush_interval >= 0:
            raise ConfigError(
                reason="negative time intervals are not supported",
                field="flush_interval",
                value=self.flush_interval,
            )

        if self.batch_size is not None and self.batch_size < 0:
            raise ConfigError(
                reason="negative batch sizes are not supported",
                field="batch_size",
                value=self.batch_size,
            )

    def resolve(self) -> "AnalyticsConfig":
        """
        Return a copy with every unset field replaced by its default.

        Values are not validated here, call ``validate`` first.
        """
        changes: dict[str, Any] = {}

        if not self.endpoint:
            changes["endpoint"] = DEFAULT_ENDPOINT

        if not self.flush_interval:
            changes["flush_interval"] = DEFAULT_FLUSH_INTERVAL

        if self.transport is None:
            changes["transport"] = default_transport()

        if self.logger is None:
            changes["logger"] = default_logger(self.verbose)

        if not self.batch_size:
            changes["batch_size"] = DEFAULT_BATCH_SIZE

        if self.uid_generator is None:
            changes["uid_generator"] = default_uid

        if self.clock is None:
            changes["clock"] = default_clock

        if self.retry_policy is None:
            changes["retry_policy"] = default_retry_policy()

        return dataclasses.replace(self, **changes)

    def unset_fields(self) -> tuple[str, ...]:
        """Names of the fields that ``resolve`` would fill in."""
        unset = []
        for f in dataclasses.fields(self):
            if f.name == "verbose":
                continue
            value = getattr(self, f.name)
            if f.name in _SCALAR_FIELDS:
                if not value:
                    unset.append(f.name)
            elif value is None:
                unset.append(f.name)
        return tuple(unset)


# Fields whose empty string or zero value also means "use the default".
_SCALAR_FIELDS = frozenset({"endpoint", "flush_interval", "batch_size"})


def validate(config: AnalyticsConfig) -> None:
    """Validate a configuration, raising ``ConfigError`` if it is invalid."""
    config.validate()


def resolve(config: AnalyticsConfig) -> AnalyticsConfig:
    """Fill the unset fields of a configuration with their defaults."""
    return config.resolve()


def configure(config: Optional[AnalyticsConfig] = None, **fields: Any) -> AnalyticsConfig:
    """
    Validate and resolve a configuration in one step.

    Args:
        config: Base configuration (an empty one if not provided)
        **fields: Field values overriding those of ``config``

    Returns:
        The fully resolved configuration

    Raises:
        ConfigError: If a field holds an invalid value
    """
    config = config or AnalyticsConfig()
    if fields:
        config = dataclasses.replace(config, **fields)

    config.validate()
    resolved = config.resolve()

    logger.debug(
        "Resolved analytics config: endpoint=%s flush_interval=%s batch_size=%s verbose=%s",
        resolved.endpoint,
        resolved.flush_interval,
        resolved.batch_size,
        resolved.verbose,
    )
    return resolved
