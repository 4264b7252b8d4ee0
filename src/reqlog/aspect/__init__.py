"""Handler block logging: marker, registry, interceptor and request scope."""

from .interceptor import INTERCEPTED_ATTR, LogInterceptor, handler_identity
from .marker import MARKER_ATTR, get_marker, log
from .registry import HandlerRegistry, get_registry
from .request_scope import RequestScopeMiddleware, current_request, request_scope
from .serialization import serialize, serialize_or_placeholder

__all__ = [
    # Marker
    "log",
    "get_marker",
    "MARKER_ATTR",
    # Wiring
    "HandlerRegistry",
    "get_registry",
    "LogInterceptor",
    "handler_identity",
    "INTERCEPTED_ATTR",
    # Request scope
    "current_request",
    "request_scope",
    "RequestScopeMiddleware",
    # Serialization
    "serialize",
    "serialize_or_placeholder",
]
