"""Value kinds, typed parameters and integer range checks for JSON access."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from petnet import log


class JsonError(ValueError):
    """Raised when a JSON value is missing, of the wrong kind or out of range."""


class JsonType(enum.Enum):
    """The kinds of value a typed JSON parameter can hold."""

    U8 = 0
    S8 = 1
    U16 = 2
    S16 = 3
    U32 = 4
    S32 = 5
    U64 = 6
    S64 = 7
    STRING = 8
    OBJECT = 9

    @property
    def is_integer(self) -> bool:
        return self not in (JsonType.STRING, JsonType.OBJECT)

    @property
    def bits(self) -> int:
        """Width in bits of an integer kind."""
        if not self.is_integer:
            raise JsonError(f"{self.name} is not an integer kind")
        return _WIDTHS[self]

    @property
    def signed(self) -> bool:
        """Whether an integer kind is signed."""
        if not self.is_integer:
            raise JsonError(f"{self.name} is not an integer kind")
        return self in (JsonType.S8, JsonType.S16, JsonType.S32, JsonType.S64)


_WIDTHS = {
    JsonType.U8: 8,
    JsonType.S8: 8,
    JsonType.U16: 16,
    JsonType.S16: 16,
    JsonType.U32: 32,
    JsonType.S32: 32,
    JsonType.U64: 64,
    JsonType.S64: 64,
}

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


@dataclass
class JsonParam:
    """A named parameter to look up in a JSON object, and the value found."""

    name: str
    kind: JsonType
    value: Optional[Any] = None


def check_integer(value: int, kind: JsonType) -> int:
    """Return ``value`` as an integer of ``kind``, or raise ``JsonError``.

    Signed kinds must fit their range. Unsigned kinds are checked against
    their upper bound only; a negative value wraps to the kind's width.
    """
    if not isinstance(kind, JsonType) or not kind.is_integer:
        raise JsonError(f"not an integer kind: {kind!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise JsonError(f"not an integer: {value!r}")

    bits = kind.bits
    if kind.signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            if kind is not JsonType.S64:
                log.log_error(f"PET_JSON_{kind.name}: Bounds Error")
            raise JsonError(f"value {value} out of range for {kind.name}")
        return value

    if value > (1 << bits) - 1 or value < _INT64_MIN:
        if kind is not JsonType.U64:
            log.log_error(f"PET_JSON_{kind.name}: Bounds Error")
        raise JsonError(f"value {value} out of range for {kind.name}")
    return value & ((1 << bits) - 1)