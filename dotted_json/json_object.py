# Copyright 2026 by Hans Meine, licensed under the Apache License 2.0
"""JSON objects whose nested values can be addressed with dot-notation paths."""

import json
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from .json_ops import contains_key, lookup_key, set_key

__all__ = ["JSONObject"]


def _plain(value):
    if isinstance(value, JSONObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


class JSONObject(MutableMapping):
    """An ordered JSON object with path-based access to nested objects.

    ``obj.get("a.b.c")`` descends through nested objects, ``obj.put("a.b", 2)``
    writes into the existing object at ``a`` and ``obj.put("a.b", None)``
    removes the key.  Item access (``obj["a.b"]``) is plain single-key access
    and does not interpret dots.

    Every nested JSON object is held as a JSONObject itself, so values read
    back through either API already support path access.
    """

    def __init__(self, mapping: Mapping | None = None):
        self._data: dict[str, Any] = {}
        if mapping is not None:
            for key, value in mapping.items():
                if isinstance(value, Mapping):
                    value = JSONObject(value)
                self._data[key] = value

    @classmethod
    def from_json(cls, text: str | bytes | None) -> "JSONObject":
        """Parse JSON text; anything but a valid JSON object gives an empty result."""
        if not text:
            return cls()
        try:
            parsed = json.loads(text)
        except ValueError:
            return cls()
        if not isinstance(parsed, dict):
            return cls()
        return cls(parsed)

    @classmethod
    def wrap(cls, value):
        """Return `value` as a JSONObject if it is a mapping, else unchanged."""
        if isinstance(value, JSONObject):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        return value

    # path access

    def get(self, path: str | None, default=None):
        value = lookup_key(self, path)
        return default if value is None else value

    def contains_key(self, path: str | None) -> bool:
        return contains_key(self, path)

    def put(self, path: str | None, value) -> None:
        set_key(self, path, value)

    # single-key access

    def __getitem__(self, key: str):
        return self._data[key]

    def __setitem__(self, key: str, value) -> None:
        self._data[key] = self.wrap(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def setdefault(self, key: str, default=None):
        if key not in self._data:
            self[key] = default
        return self._data[key]

    def remove(self, key: str):
        """Remove `key` and return its previous value, or None if absent."""
        return self._data.pop(key, None)

    def put_all(self, mapping: Mapping) -> None:
        self.update(mapping)

    # serialization

    def to_dict(self) -> dict[str, Any]:
        return {key: _plain(value) for key, value in self._data.items()}

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
