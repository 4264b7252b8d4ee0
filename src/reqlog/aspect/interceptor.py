"""Interceptor producing one log block per marked handler call.

Block layout:

    ========================================== Start ==========================================
    Method Description : create user
    URL                : http://testserver/api/v1/users
    HTTP Method        : POST
    Class Method       : app.api.users.create_user
    IP                 : 10.0.0.1
    Request Args       : [{"name":"ada"}]
    Response Args      : {"id":1,"name":"ada"}
    Time-Consuming     : 3 ms
    =========================================== End ===========================================

Response Args and Time-Consuming are only written when the handler returns;
the End banner is written on every path.
"""

from __future__ import annotations

import functools
import inspect
import threading
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from reqlog.config import EmitMode, RequestLogSettings, Settings, get_settings
from reqlog.errors import MarkerMissing, RequestScopeMissing
from reqlog.models import END_BANNER, InvocationRecord, RequestDescriptor
from reqlog.observability import ACCESS_LOGGER_NAME, get_logger

from .serialization import serialize_or_placeholder

if TYPE_CHECKING:
    from .registry import HandlerRegistry

INTERCEPTED_ATTR = "__reqlog_intercepted__"

_INSTANCE_PARAMS = frozenset({"self", "cls"})

# Serializes buffered block flushes across threads
_emit_lock = threading.Lock()

logger = get_logger(__name__)


def handler_identity(func: Callable[..., Any]) -> str:
    """Qualified handler name, e.g. ``app.api.users.UserController.create``."""
    return f"{func.__module__}.{func.__qualname__}"


def _takes_instance(signature: inspect.Signature) -> bool:
    params = list(signature.parameters.values())
    return bool(params) and params[0].name in _INSTANCE_PARAMS


class _LogBlock:
    """Lines of one log block on their way to the sink."""

    def __init__(self, sink: Any, mode: EmitMode):
        self._sink = sink
        self._buffered = mode == EmitMode.BUFFERED
        self._pending: list[tuple[str, str]] = []

    def write(self, line: str, level: str = "info") -> None:
        if self._buffered:
            self._pending.append((level, line))
        else:
            getattr(self._sink, level)(line)

    def close(self) -> None:
        self.write(END_BANNER)
        if not self._buffered:
            return
        with _emit_lock:
            for level, line in self._pending:
                getattr(self._sink, level)(line)
        self._pending.clear()


class LogInterceptor:
    """Wraps marked handlers so each call is logged as one block.

    The interceptor never changes arguments or results and re-raises
    handler failures unchanged once the block is closed.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        request_accessor: Callable[[], RequestDescriptor],
        logger: Any | None = None,
        settings: Settings | None = None,
    ):
        self._registry = registry
        self._request_accessor = request_accessor
        self._logger = logger
        self._settings = settings

    @property
    def sink(self) -> Any:
        """Logger the block lines are written to."""
        return self._logger or get_logger(ACCESS_LOGGER_NAME)

    @property
    def request_log_settings(self) -> RequestLogSettings:
        return (self._settings or get_settings()).request_log

    def wrap(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Return the intercepted form of a marked handler.

        Raises:
            MarkerMissing: If ``func`` carries no marker
        """
        identity = handler_identity(func)
        if self._registry.marker_for(func) is None:
            raise MarkerMissing(identity)

        signature = inspect.signature(func)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                settings = self.request_log_settings
                if not settings.enabled:
                    return await func(*args, **kwargs)

                block, record = self._open(func, identity, signature, args, kwargs, settings)
                start_ns = time.monotonic_ns()
                try:
                    result = await func(*args, **kwargs)
                    self._complete(block, record, result, start_ns, settings)
                    return result
                finally:
                    block.close()

            setattr(async_wrapper, INTERCEPTED_ATTR, True)
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            settings = self.request_log_settings
            if not settings.enabled:
                return func(*args, **kwargs)

            block, record = self._open(func, identity, signature, args, kwargs, settings)
            start_ns = time.monotonic_ns()
            try:
                result = func(*args, **kwargs)
                self._complete(block, record, result, start_ns, settings)
                return result
            finally:
                block.close()

        setattr(wrapper, INTERCEPTED_ATTR, True)
        return wrapper

    def _open(
        self,
        func: Callable[..., Any],
        identity: str,
        signature: inspect.Signature,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        settings: RequestLogSettings,
    ) -> tuple[_LogBlock, InvocationRecord]:
        """Assemble the request half of the record and write its lines."""
        block = _LogBlock(self.sink, settings.mode)

        try:
            descriptor: RequestDescriptor | None = self._request_accessor()
        except RequestScopeMissing:
            descriptor = None
            block.write(
                f"RequestScopeMissing: no inbound request in scope for {identity}",
                level="warning",
            )
        except Exception as e:
            # A broken accessor is reported like a missing scope; the handler still runs
            descriptor = None
            block.write(
                f"RequestScopeMissing: request accessor failed for {identity}: {e!r}",
                level="warning",
            )

        marker = self._registry.marker_for(func)
        if marker is None:
            raise MarkerMissing(identity)

        arguments = self._encode(
            _argument_values(signature, args, kwargs), settings, identity, "arguments"
        )
        record = InvocationRecord(
            description=marker.description,
            handler_identity=identity,
            arguments=arguments,
            url=descriptor.url if descriptor else None,
            method=descriptor.method if descriptor else None,
            remote_address=descriptor.remote_address if descriptor else None,
        )
        for line in record.request_lines():
            block.write(line)
        return block, record

    def _complete(
        self,
        block: _LogBlock,
        record: InvocationRecord,
        result: Any,
        start_ns: int,
        settings: RequestLogSettings,
    ) -> None:
        """Fill in the response half of the record and write its lines."""
        record.elapsed_ms = max(0, (time.monotonic_ns() - start_ns) // 1_000_000)
        record.result = self._encode(result, settings, record.handler_identity, "result")
        for line in record.response_lines():
            block.write(line)

    def _encode(
        self,
        value: Any,
        settings: RequestLogSettings,
        identity: str,
        field: str,
    ) -> str:
        text = serialize_or_placeholder(
            value,
            settings.placeholder,
            max_length=settings.max_value_length,
        )
        if text == settings.placeholder:
            logger.debug("Handler value not serializable", handler=identity, field=field)
        return text


def _argument_values(
    signature: inspect.Signature,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> list[Any]:
    """Argument values in declaration order, without a leading self/cls."""
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        values = [*args, *kwargs.values()]
    else:
        values = list(bound.arguments.values())

    if _takes_instance(signature) and values:
        return values[1:]
    return values
