"""Handler registry: decides which handlers run intercepted."""

from __future__ import annotations

import inspect
import threading
from collections.abc import Callable
from functools import lru_cache
from typing import Any
from weakref import WeakKeyDictionary

from reqlog.config import Settings
from reqlog.models import LogMarker, RequestDescriptor

from .interceptor import INTERCEPTED_ATTR, LogInterceptor
from .marker import get_marker
from .request_scope import current_request


class HandlerRegistry:
    """Maps handlers to their markers and hands out effective handlers.

    The marker cache is filled lazily on first lookup and only ever grows;
    entries are keyed by the unwrapped handler function.
    """

    def __init__(
        self,
        request_accessor: Callable[[], RequestDescriptor] = current_request,
        logger: Any | None = None,
        settings: Settings | None = None,
    ):
        self._markers: WeakKeyDictionary[Callable[..., Any], LogMarker | None] = (
            WeakKeyDictionary()
        )
        self._lock = threading.Lock()
        self.interceptor = LogInterceptor(
            self,
            request_accessor=request_accessor,
            logger=logger,
            settings=settings,
        )

    def marker_for(self, func: Callable[..., Any]) -> LogMarker | None:
        """Return the cached marker for a handler, reading it on first use.

        Unmarked handlers are not cached, so a marker attached later is
        still picked up.
        """
        target = inspect.unwrap(func)
        try:
            return self._markers[target]
        except KeyError:
            pass

        marker = get_marker(func)
        if marker is None:
            return None
        with self._lock:
            return self._markers.setdefault(target, marker)

    def effective_handler(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Return the callable the host should register for ``func``.

        Marked handlers come back wrapped by the interceptor; anything else is
        returned unchanged. Already wrapped handlers are not wrapped twice.
        """
        if getattr(func, INTERCEPTED_ATTR, False):
            return func
        if self.marker_for(func) is None:
            return func
        return self.interceptor.wrap(func)

    def __len__(self) -> int:
        return len(self._markers)

    def __bool__(self) -> bool:
        # An empty registry is still a registry
        return True


@lru_cache
def get_registry() -> HandlerRegistry:
    """Get the process-wide handler registry."""
    return HandlerRegistry()
