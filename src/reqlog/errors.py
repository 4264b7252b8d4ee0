"""Errors raised by the handler logging layer."""


class RequestLogError(Exception):
    """Base class for handler logging errors."""

    pass


class RequestScopeMissing(RequestLogError):
    """Raised when no inbound request is bound to the current context."""

    pass


class MarkerMissing(RequestLogError):
    """Raised when interception is requested for a handler without a marker."""

    def __init__(self, handler_identity: str):
        super().__init__(f"Handler '{handler_identity}' carries no log marker")
        self.handler_identity = handler_identity


class SerializationFailure(RequestLogError):
    """Raised when an argument or result cannot be encoded."""

    pass
