"""Pydantic data models shared by the marker, registry and interceptor."""

from .base import ReqlogBaseModel
from .marker import LogMarker
from .record import (
    END_BANNER,
    LABEL_WIDTH,
    START_BANNER,
    InvocationRecord,
    format_field,
)
from .request import RequestDescriptor

__all__ = [
    "ReqlogBaseModel",
    "LogMarker",
    "RequestDescriptor",
    "InvocationRecord",
    "format_field",
    "LABEL_WIDTH",
    "START_BANNER",
    "END_BANNER",
]
