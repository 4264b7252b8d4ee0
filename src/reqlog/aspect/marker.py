"""Declarative opt-in for handler block logging.

Usage:
    @router.post("/users")
    @log("create user")
    async def create_user(payload: UserCreate) -> User:
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from reqlog.models import LogMarker

if TYPE_CHECKING:
    from .registry import HandlerRegistry

F = TypeVar("F", bound=Callable[..., Any])

MARKER_ATTR = "__reqlog_marker__"


def get_marker(func: Callable[..., Any]) -> LogMarker | None:
    """Return the marker attached to a handler, following ``__wrapped__``."""
    seen: set[int] = set()
    current: Any = func
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        marker = getattr(current, MARKER_ATTR, None)
        if isinstance(marker, LogMarker):
            return marker
        current = getattr(current, "__wrapped__", None)
    return None


def log(description: str, registry: HandlerRegistry | None = None) -> Callable[[F], F]:
    """Mark a handler for block logging.

    The marker is attached at declaration time and the handler registry
    returns the intercepted form, so every later call is logged.

    Args:
        description: Human-readable description, copied into each block
        registry: Registry to wire through (defaults to the process registry)

    Raises:
        ValueError: If the description is empty or not a string
    """
    marker = LogMarker(description=description)

    def decorator(func: F) -> F:
        from .registry import get_registry

        setattr(func, MARKER_ATTR, marker)
        target = registry if registry is not None else get_registry()
        return target.effective_handler(func)

    return decorator
