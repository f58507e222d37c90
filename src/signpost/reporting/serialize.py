"""Depth-bounded, cycle-safe conversion of arbitrary values for logging."""

import typing as t
from collections.abc import Mapping

DEFAULT_MAX_DEPTH = 4
CIRCULAR = "[Circular Reference]"
TRUNCATED = "[Max Depth Reached]"


def safe_serialize(value: t.Any, max_depth: int = DEFAULT_MAX_DEPTH) -> t.Any:
    """
    Convert a value into JSON-compatible primitives for structured logs.

    Containers are walked up to ``max_depth`` levels. Objects already on
    the current path are replaced by a marker instead of recursing, so
    self-referencing structures are safe. Exceptions become a mapping of
    type, message and public attributes. Anything else falls back to
    ``repr``.

    The set of visited objects lives only for the duration of one call.

    Examples:
        >>> data = {"a": 1}
        >>> data["self"] = data
        >>> safe_serialize(data)
        {'a': 1, 'self': '[Circular Reference]'}
    """
    return _serialize(value, max_depth, set())


def _serialize(value: t.Any, depth: int, path: set[int]) -> t.Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if id(value) in path:
        return CIRCULAR
    if depth <= 0:
        return TRUNCATED

    path.add(id(value))
    try:
        match value:
            case BaseException():
                return {
                    "type": type(value).__name__,
                    "message": str(value),
                    **{
                        key: _serialize(attr, depth - 1, path)
                        for key, attr in _public_attributes(value).items()
                    },
                }
            case Mapping():
                return {
                    str(key): _serialize(item, depth - 1, path)
                    for key, item in value.items()
                }
            case list() | tuple() | set() | frozenset():
                return [_serialize(item, depth - 1, path) for item in value]
            case _:
                return repr(value)
    finally:
        path.discard(id(value))


def _public_attributes(error: BaseException) -> dict[str, t.Any]:
    """Instance attributes set on an exception, excluding private ones."""
    return {
        key: attr
        for key, attr in getattr(error, "__dict__", {}).items()
        if not key.startswith("_")
    }
