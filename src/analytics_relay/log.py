"""
Logging
=======
Logger capability expected by the client and the default stderr logger.
"""

import logging
import sys
from typing import Any, Protocol, runtime_checkable

import structlog


@runtime_checkable
class Logger(Protocol):
    """
    Anything the client can report background activity to.

    structlog loggers and ``logging.Logger`` instances both qualify.
    """

    def info(self, event: str, *args: Any, **kwargs: Any) -> Any: ...

    def error(self, event: str, *args: Any, **kwargs: Any) -> Any: ...


def make_stderr_logger(verbose: bool = False) -> Logger:
    """
    Build a structlog logger that writes plain console lines to stderr.

    Args:
        verbose: Emit debug events as well as info and above

    Returns:
        A bound structlog logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
    ).bind(logger="analytics_relay")
