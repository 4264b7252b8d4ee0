"""Deterministic JSON rendering of handler arguments and results."""

import json
from collections.abc import Iterator
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from reqlog.errors import SerializationFailure

TRUNCATION_SUFFIX = "..."


def _encode_default(value: Any) -> Any:
    """Fallback for values the json module does not know.

    Pydantic models, dataclasses, datetimes, UUIDs, enums and sets are
    converted through pydantic-core; anything else is rejected. Iterators
    and generators are rejected too, since encoding them would consume them.
    """
    if isinstance(value, Iterator):
        raise TypeError(f"Refusing to consume {type(value).__name__}")
    try:
        return to_jsonable_python(value)
    except PydanticSerializationError as e:
        raise TypeError(str(e)) from e


def serialize(value: Any, max_length: int = 0) -> str:
    """Render a value as compact JSON.

    Args:
        value: Argument list or handler result
        max_length: Truncate output longer than this (0 = unlimited)

    Returns:
        JSON text, e.g. ``["u"]`` or ``{"id":7}``

    Raises:
        SerializationFailure: On circular references or unsupported types
    """
    try:
        text = json.dumps(
            value,
            default=_encode_default,
            ensure_ascii=False,
            separators=(",", ":"),
            check_circular=True,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationFailure(f"Cannot serialize {type(value).__name__}: {e}") from e

    if max_length and len(text) > max_length:
        return text[:max_length] + TRUNCATION_SUFFIX
    return text


def serialize_or_placeholder(value: Any, placeholder: str, max_length: int = 0) -> str:
    """Like serialize(), but returns ``placeholder`` instead of raising."""
    try:
        return serialize(value, max_length=max_length)
    except SerializationFailure:
        return placeholder
