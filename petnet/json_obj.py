"""Typed access to parsed JSON objects and arrays."""

from __future__ import annotations

import json
from typing import Any, Iterator, List

from petnet import log
from petnet.json_types import JsonError, JsonParam, JsonType, check_integer


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return JsonObject(value)
    if isinstance(value, list):
        return JsonArray(value)
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, JsonObject):
        return value.data
    if isinstance(value, JsonArray):
        return value.items
    if value is None or isinstance(value, (bool, int, float, str, dict, list)):
        return value
    raise JsonError(f"cannot store value of type {type(value).__name__}")


def _expect_string(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonError("value is not a string")
    return value


def _expect_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise JsonError("value is not a boolean")
    return value


def _expect_integer(value: Any, kind: JsonType) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise JsonError("value is not an integer")
    return check_integer(value, kind)


def _expect_double(value: Any) -> float:
    if not isinstance(value, float):
        raise JsonError("value is not a floating point number")
    return value


class JsonObject:
    """A JSON object whose members are read and written with type checks.

    Nested objects and arrays returned by accessors share storage with their
    parent, so changes made through them are visible from the parent.
    """

    def __init__(self, data: dict | None = None) -> None:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise JsonError("JSON object data must be a dict")
        self.data = data

    @classmethod
    def parse(cls, text: str) -> "JsonObject":
        """Parse ``text`` into an object; raise ``JsonError`` if it is invalid."""
        try:
            value = json.loads(text)
        except (json.JSONDecodeError, TypeError) as exc:
            log.log_error(f"Could not parse JSON string ({text})")
            raise JsonError("could not parse JSON string") from exc
        if not isinstance(value, dict):
            log.log_error(f"Could not parse JSON string ({text})")
            raise JsonError("JSON text is not an object")
        return cls(value)

    def serialize(self) -> str:
        """Return the object as JSON text."""
        return json.dumps(self.data)

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonObject):
            return self.data == other.data
        return NotImplemented

    def __repr__(self) -> str:
        return f"JsonObject({self.data!r})"

    def _lookup(self, key: str) -> Any:
        try:
            return self.data[key]
        except KeyError:
            raise JsonError(f"no such key: {key!r}") from None

    def get_object(self, key: str) -> "JsonObject":
        value = self._lookup(key)
        if not isinstance(value, dict):
            raise JsonError(f"member {key!r} is not an object")
        return JsonObject(value)

    def get_array(self, key: str) -> "JsonArray":
        value = self._lookup(key)
        if not isinstance(value, list):
            raise JsonError(f"member {key!r} is not an array")
        return JsonArray(value)

    def get_string(self, key: str) -> str:
        return _expect_string(self._lookup(key))

    def get_bool(self, key: str) -> bool:
        return _expect_bool(self._lookup(key))

    def get_int(self, key: str) -> int:
        """Return an integer member that fits a signed 32-bit int."""
        return _expect_integer(self._lookup(key), JsonType.S32)

    def get_double(self, key: str) -> float:
        return _expect_double(self._lookup(key))

    def get_integer(self, key: str, kind: JsonType) -> int:
        """Return an integer member checked against the range of ``kind``."""
        return _expect_integer(self._lookup(key), kind)

    def add(self, key: str, value: Any) -> None:
        """Add a new member; raise ``JsonError`` if ``key`` already exists."""
        if key in self.data:
            raise JsonError(f"key already exists: {key!r}")
        self.data[key] = _unwrap(value)

    def set(self, key: str, value: Any) -> None:
        """Replace the value of an existing member."""
        if key not in self.data:
            raise JsonError(f"no such key: {key!r}")
        self.data[key] = _unwrap(value)

    def delete(self, key: str) -> None:
        """Remove a member if present."""
        self.data.pop(key, None)

    def add_object(self, key: str, obj: "JsonObject | None" = None) -> "JsonObject":
        """Attach ``obj`` (or a new empty object) under ``key`` and return it."""
        if obj is None:
            obj = JsonObject()
        if not isinstance(obj, JsonObject):
            raise JsonError("only a JsonObject can be attached as an object")
        self.add(key, obj)
        return obj

    def add_array(self, key: str) -> "JsonArray":
        """Add a new empty array under ``key`` and return it."""
        arr = JsonArray()
        self.add(key, arr)
        return arr

    def get_params(self, params: List[JsonParam]) -> List[JsonParam]:
        """Fill in the ``value`` of each parameter from this object."""
        for param in params:
            try:
                if param.kind is JsonType.STRING:
                    param.value = self.get_string(param.name)
                elif param.kind is JsonType.OBJECT:
                    log.log_error("PET_JSON_OBJECT not currently supported")
                    raise JsonError("object parameters are not supported")
                elif isinstance(param.kind, JsonType):
                    param.value = self.get_integer(param.name, param.kind)
                else:
                    log.log_error(f"Error Invalid Parameter Type ({param.kind})")
                    raise JsonError(f"invalid parameter type: {param.kind!r}")
            except JsonError:
                log.log_error("Error Parsing JSON value")
                raise
        return params


class JsonArray:
    """A JSON array whose items are read and written with type checks."""

    def __init__(self, items: list | None = None) -> None:
        if items is None:
            items = []
        if not isinstance(items, list):
            raise JsonError("JSON array data must be a list")
        self.items = items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        for item in self.items:
            yield _wrap(item)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonArray):
            return self.items == other.items
        return NotImplemented

    def __repr__(self) -> str:
        return f"JsonArray({self.items!r})"

    def _item(self, idx: int) -> Any:
        if not 0 <= idx < len(self.items):
            raise JsonError(f"array index out of range: {idx}")
        return self.items[idx]

    def get_object(self, idx: int) -> JsonObject:
        value = self._item(idx)
        if not isinstance(value, dict):
            raise JsonError(f"item {idx} is not an object")
        return JsonObject(value)

    def get_string(self, idx: int) -> str:
        return _expect_string(self._item(idx))

    def get_bool(self, idx: int) -> bool:
        return _expect_bool(self._item(idx))

    def get_int(self, idx: int) -> int:
        """Return an integer item that fits a signed 32-bit int."""
        return _expect_integer(self._item(idx), JsonType.S32)

    def get_double(self, idx: int) -> float:
        return _expect_double(self._item(idx))

    def get_integer(self, idx: int, kind: JsonType) -> int:
        """Return an integer item checked against the range of ``kind``."""
        return _expect_integer(self._item(idx), kind)

    def set(self, idx: int, value: Any) -> None:
        """Replace the value of an existing item."""
        self._item(idx)
        self.items[idx] = _unwrap(value)

    def append(self, value: Any) -> int:
        """Add an item at the end and return its index."""
        self.items.append(_unwrap(value))
        return len(self.items) - 1

    def delete(self, idx: int) -> None:
        """Remove the item at ``idx`` if it exists."""
        if 0 <= idx < len(self.items):
            del self.items[idx]