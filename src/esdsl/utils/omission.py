"""Decide whether a field is dropped from a serialized query document.

Elasticsearch treats a missing attribute as its default, so optional fields
are left out of the document instead of being sent as `null` or zero values.
Every serializer path asks `is_omittable` rather than re-deriving the rule.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Omittable(Protocol):
    """A value that knows whether it should be left out of a document."""

    def is_omittable(self) -> bool:
        """Return True if the serializer must drop this value."""
        ...


def is_omittable(value: Any) -> bool:
    """Return True if `value` should be dropped from serialized output.

    - `None` is always dropped.
    - Text and containers are dropped when empty.
    - Objects implementing `Omittable` decide for themselves.
    - Anything else (numbers, booleans, enum members) is kept.
    """
    if value is None:
        return True
    if isinstance(value, Omittable):
        return value.is_omittable()
    if isinstance(value, str | bytes):
        return len(value) == 0
    if isinstance(value, Mapping | list | tuple | set | frozenset):
        return len(value) == 0  # pyright:ignore[reportUnknownArgumentType]
    return False


def compact(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build a dict from key/value pairs, leaving out omittable values."""
    return {key: value for key, value in pairs if not is_omittable(value)}
