"""
Defaults
========
Process-wide default collaborators used when a configuration leaves them unset.

The transport, loggers and retry policy are built on first use and shared by
every configuration resolved afterwards.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Generic, TypeVar

import httpx

from analytics_relay.backoff import ExponentialBackoff
from analytics_relay.log import Logger, make_stderr_logger

T = TypeVar("T")

_UNSET = object()


class LazyDefault(Generic[T]):
    """Builds a value at most once, even when first requested concurrently."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value: Any = _UNSET
        self._lock = threading.Lock()

    def get(self) -> T:
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._factory()
        return self._value

    def reset(self) -> None:
        """Drop the cached value; the next ``get`` builds a fresh one."""
        with self._lock:
            self._value = _UNSET


_transport: LazyDefault[httpx.BaseTransport] = LazyDefault(httpx.HTTPTransport)
_retry_policy: LazyDefault[ExponentialBackoff] = LazyDefault(ExponentialBackoff)
_loggers = {
    False: LazyDefault(lambda: make_stderr_logger(verbose=False)),
    True: LazyDefault(lambda: make_stderr_logger(verbose=True)),
}


def default_transport() -> httpx.BaseTransport:
    """Get the shared HTTP transport."""
    return _transport.get()


def default_logger(verbose: bool = False) -> Logger:
    """Get the shared stderr logger for the given verbosity."""
    return _loggers[bool(verbose)].get()


def default_retry_policy() -> ExponentialBackoff:
    """Get the shared exponential backoff policy."""
    return _retry_policy.get()


def default_uid() -> str:
    """Generate a random UUID string, used for message identifiers."""
    return str(uuid.uuid4())


def default_clock() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def reset_defaults() -> None:
    """Forget every cached default collaborator."""
    _transport.reset()
    _retry_policy.reset()
    for lazy in _loggers.values():
        lazy.reset()
