"""Inbound request snapshot consumed by the handler interceptor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from .base import ReqlogBaseModel

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection


class RequestDescriptor(ReqlogBaseModel):
    """Immutable view of the request currently being served.

    Valid only for the duration of one handler invocation.
    """

    url: str = Field(description="Full request URL")
    method: str = Field(description="HTTP method")
    remote_address: str = Field(description="Caller network address")

    @classmethod
    def from_request(cls, request: HTTPConnection) -> RequestDescriptor:
        """Build a descriptor from a Starlette request or websocket.

        The URL keeps scheme, host and path; the query string is dropped.
        """
        return cls(
            url=str(request.url.replace(query="", fragment="")),
            method=request.scope.get("method", "WEBSOCKET"),
            remote_address=request.client.host if request.client else "unknown",
        )
