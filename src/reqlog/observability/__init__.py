"""Observability module for structured logging."""

from .logging import (
    ACCESS_LOGGER_NAME,
    add_service_context,
    add_timestamp,
    get_logger,
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    "ACCESS_LOGGER_NAME",
    # Processors
    "add_service_context",
    "add_timestamp",
]
