"""Ambient access to the request currently being served.

The descriptor lives in a context variable, so each thread and each asyncio
task sees only its own request. Hosts bind it either with
RequestScopeMiddleware (Starlette/FastAPI) or with request_scope().
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from reqlog.errors import RequestScopeMissing
from reqlog.models import RequestDescriptor

# Context variable for the request in scope
_current_request: ContextVar[RequestDescriptor | None] = ContextVar(
    "reqlog_current_request", default=None
)


def current_request() -> RequestDescriptor:
    """Return the request bound to the current context.

    Raises:
        RequestScopeMissing: If no request is in scope
    """
    descriptor = _current_request.get()
    if descriptor is None:
        raise RequestScopeMissing("No inbound request in scope")
    return descriptor


@contextmanager
def request_scope(descriptor: RequestDescriptor) -> Iterator[RequestDescriptor]:
    """Bind a request descriptor for the duration of the block.

    Usage:
        with request_scope(RequestDescriptor(url=..., method="GET", remote_address=...)):
            handler(...)
    """
    token = _current_request.set(descriptor)
    try:
        yield descriptor
    finally:
        _current_request.reset(token)


class RequestScopeMiddleware(BaseHTTPMiddleware):
    """Bind each inbound HTTP request as the ambient request."""

    async def dispatch(self, request: Request, call_next):
        """Process request inside its own request scope."""
        with request_scope(RequestDescriptor.from_request(request)):
            return await call_next(request)
