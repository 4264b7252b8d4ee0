"""Request-scoped handler logging.

This package contains:
- aspect: the log marker, handler registry and interceptor
- models: Pydantic data models
- config: Configuration management
- observability: Structured logging
"""

from .aspect import (
    HandlerRegistry,
    LogInterceptor,
    RequestScopeMiddleware,
    current_request,
    get_marker,
    get_registry,
    log,
    request_scope,
)
from .errors import (
    MarkerMissing,
    RequestLogError,
    RequestScopeMissing,
    SerializationFailure,
)
from .models import LogMarker, RequestDescriptor

__version__ = "0.1.0"

__all__ = [
    "log",
    "get_marker",
    "HandlerRegistry",
    "get_registry",
    "LogInterceptor",
    "RequestScopeMiddleware",
    "current_request",
    "request_scope",
    "LogMarker",
    "RequestDescriptor",
    "RequestLogError",
    "RequestScopeMissing",
    "MarkerMissing",
    "SerializationFailure",
]
