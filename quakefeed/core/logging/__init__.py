"""Logging utilities for monitoring and debugging."""

from quakefeed.core.logging.config import LogConfig
from quakefeed.core.logging.logger import (
    StructuredLogger,
    configure_logging,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
    "log_context",
    "logger",
]
