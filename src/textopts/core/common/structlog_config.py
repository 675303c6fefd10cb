"""
Structured logging configuration.

This module provides utilities for configuring and using structured logging.
"""

import logging
from enum import Enum

import structlog
from structlog.typing import Processor


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def configure_structlog(log_format: LogFormat = LogFormat.PLAIN) -> None:
    """Route structlog events through the standard library logging handlers.

    Args:
        log_format: Rendering used for the event dictionary
    """
    renderer: Processor
    if log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    elif log_format == LogFormat.CONSOLE:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.KeyValueRenderer(
            key_order=["event"], sort_keys=True
        )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    logging.getLogger(__name__).debug(
        "structlog configured with %s format", log_format.value
    )
