"""
Errors
======
Exceptions raised by the analytics relay configuration layer.
"""

from typing import Any


class AnalyticsError(Exception):
    """Base class for analytics relay errors."""


class ConfigError(AnalyticsError, ValueError):
    """
    Raised when a configuration field holds a value that can't be used.

    Attributes:
        reason: Human readable description of the problem
        field: Name of the offending ``AnalyticsConfig`` field
        value: The rejected value, exactly as supplied
    """

    def __init__(self, reason: str, field: str, value: Any):
        super().__init__(reason, field, value)
        self._reason = reason
        self._field = field
        self._value = value

    @property
    def reason(self) -> str:
        return self._reason

    @property
    def field(self) -> str:
        return self._field

    @property
    def value(self) -> Any:
        return self._value

    def __str__(self) -> str:
        return f"analytics_relay: {self._reason} (AnalyticsConfig.{self._field}: {self._value!r})"
