"""Marker attached to handlers that opt in to block logging."""

from pydantic import Field

from .base import ReqlogBaseModel


class LogMarker(ReqlogBaseModel):
    """Declarative tag carrying the handler's human-readable description."""

    description: str = Field(min_length=1, description="Copied verbatim into the log block")
