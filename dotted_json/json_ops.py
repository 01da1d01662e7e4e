# Copyright 2026 by Hans Meine, licensed under the Apache License 2.0
"""Helper functions for JSON manipulation using dot notation for keys.

A key path like ``"attributes.panels.title"`` names a value nested inside
JSON objects.  Lookups never raise for missing paths; ``None`` doubles as the
"not found" result, so a stored JSON ``null`` looks exactly like a missing key.
"""

from collections.abc import Mapping, MutableMapping
from typing import Sequence

__all__ = ["split_path", "lookup_key", "contains_key", "set_key"]


def split_path(path: str | None) -> list[str]:
    """Split a dot-separated key path into its segments.

    Trailing dots are ignored, so ``"a.b."`` addresses ``a.b``.  Any other
    empty segment (``"a..b"``, ``".a"``, ``"."``) makes the path invalid and
    gives an empty list.
    """
    if not path:
        return []
    segments = path.rstrip(".").split(".")
    if not all(segments):
        return []
    return segments


def _child(obj: Mapping, key: str):
    # plain item access; JSONObject.get is itself path-based
    try:
        return obj[key]
    except KeyError:
        return None


def _find(obj: Mapping, segments: Sequence[str]):
    value = _child(obj, segments[0])
    if value is None:
        return None
    if len(segments) == 1:
        return value
    if isinstance(value, Mapping):
        return _find(value, segments[1:])
    return None


def lookup_key(obj: Mapping, path: str | None):
    """Return the value at the given key path, or None if it does not resolve."""
    segments = split_path(path)
    if not segments:
        return None
    return _find(obj, segments)


def contains_key(obj: Mapping, path: str | None) -> bool:
    """Check if the object has a non-null value at the given key path."""
    return lookup_key(obj, path) is not None


def _change(obj: MutableMapping, segments: Sequence[str], value):
    current = _child(obj, segments[0])
    if isinstance(current, Mapping) and len(segments) > 1:
        _change(current, segments[1:], value)
        return

    # chain ended early: the last segment lands in this object
    key = segments[-1]
    if value is None:
        if key in obj:
            del obj[key]
    else:
        obj[key] = value


def set_key(obj: MutableMapping, path: str | None, value):
    """Set the value of the given key path in the object.

    Intermediate objects are never created: the walk descends only while the
    next value is an object, and the last segment of `path` is written into
    the deepest object reached.  Setting None removes the key.
    """
    segments = split_path(path)
    if not segments:
        return
    _change(obj, segments, value)
