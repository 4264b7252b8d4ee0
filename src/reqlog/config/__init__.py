"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- Handler log block settings
- Cached settings access via get_settings()
"""

from .settings import (
    EmitMode,
    Environment,
    LogFormat,
    LogLevel,
    RequestLogSettings,
    Settings,
    get_settings,
)

__all__ = [
    # Main settings
    "Settings",
    "get_settings",
    # Enums
    "Environment",
    "LogLevel",
    "LogFormat",
    "EmitMode",
    # Component settings
    "RequestLogSettings",
]
