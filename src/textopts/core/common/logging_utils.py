"""
Logging utilities for the application.

This module provides utilities for logging, including:
- Test/production environment tagging
- Root logger configuration shared by the CLI and the test suite
"""

import logging
import os
import sys
from typing import Literal

from textopts.core.common.structlog_config import get_logger

__all__ = [
    "EnvironmentTaggingFilter",
    "EnvironmentTaggingFormatter",
    "configure_logging_with_environment_tagging",
    "get_logger",
    "install_environment_tagging",
    "parse_log_level",
]

DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)


def _is_running_under_pytest() -> bool:
    """Detect if we're running under pytest."""
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    """Get the environment tag for logging.

    Returns:
        'test' if running under pytest, 'prod' otherwise
    """
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Logging formatter that includes environment tags."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        if fmt is None:
            fmt = DEFAULT_LOG_FORMAT
        super().__init__(fmt, datefmt, style=style)


def parse_log_level(level: str | int) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant.

    Unknown names fall back to ``logging.INFO``.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def install_environment_tagging() -> None:
    """Install environment tagging filter on the root logger and its handlers."""
    root = logging.getLogger()
    filter_instance = EnvironmentTaggingFilter()

    root.addFilter(filter_instance)

    for handler in list(root.handlers):
        handler.addFilter(filter_instance)
        if isinstance(handler.formatter, logging.Formatter) and not isinstance(
            handler.formatter, EnvironmentTaggingFormatter
        ):
            handler.setFormatter(
                EnvironmentTaggingFormatter(
                    fmt=handler.formatter._fmt, datefmt=handler.formatter.datefmt
                )
            )


def configure_logging_with_environment_tagging(
    level: int = logging.INFO,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure logging with environment tagging.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
    """
    formatter = EnvironmentTaggingFormatter(fmt=log_format or DEFAULT_LOG_FORMAT)

    handlers: list[logging.Handler] = []

    # Diagnostics go to stderr so stdout stays reserved for parsed output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True,
    )

    install_environment_tagging()
