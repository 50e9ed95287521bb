"""
Backoff
=======
Default retry policy and its bridge to tenacity.

A retry policy is any callable mapping the number of attempts already made
(starting at 0) to the number of seconds to wait before the next one.
"""

import random
from typing import TYPE_CHECKING, Any, Callable

import httpx
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
)
from tenacity.wait import wait_base

if TYPE_CHECKING:
    from analytics_relay.config import AnalyticsConfig

RetryPolicy = Callable[[int], float]


class ExponentialBackoff:
    """
    Exponential backoff schedule.

    ``policy(n)`` is ``base * factor ** n`` seconds, optionally moved by up to
    ``jitter`` of itself in either direction, and never more than ``cap``.
    """

    def __init__(
        self,
        base: float = 0.1,
        factor: float = 2,
        jitter: float = 0.0,
        cap: float = 10.0,
    ):
        self.base = base
        self.factor = factor
        self.jitter = jitter
        self.cap = cap

    def __call__(self, attempt: int) -> float:
        if attempt < 0:
            raise ValueError(f"attempt must be >= 0, got {attempt}")

        # Schedule and +/- jitter of segmentio/backo-go.
        delay = self.base * self.factor**attempt
        if self.jitter:
            deviation = random.random() * self.jitter * delay
            if random.getrandbits(1):
                delay += deviation
            else:
                delay -= deviation

        return min(delay, self.cap)

    def __repr__(self) -> str:
        return (
            f"ExponentialBackoff(base={self.base}, factor={self.factor}, "
            f"jitter={self.jitter}, cap={self.cap})"
        )


class wait_retry_policy(wait_base):
    """Tenacity wait strategy driven by a retry policy."""

    def __init__(self, policy: RetryPolicy):
        self.policy = policy

    def __call__(self, retry_state: RetryCallState) -> float:
        return self.policy(retry_state.attempt_number - 1)


def retrying(config: "AnalyticsConfig", attempts: int = 3, **kwargs: Any) -> Retrying:
    """
    Build a tenacity controller honouring the config's retry policy.

    Args:
        config: A resolved configuration
        attempts: Total attempts before the last error is re-raised
        **kwargs: Extra arguments for ``tenacity.Retrying`` (e.g. ``sleep``)

    Returns:
        A ``Retrying`` instance retrying on ``httpx.HTTPError``
    """
    if config.retry_policy is None:
        raise ValueError("retrying() needs a resolved configuration")

    return Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_retry_policy(config.retry_policy),
        retry=retry_if_exception_type(httpx.HTTPError),
        reraise=True,
        **kwargs,
    )
