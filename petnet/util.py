"""General helpers: atomic counters, integer parsing, strings and hex dumps."""

from __future__ import annotations

import secrets
import string
import threading
import traceback
from typing import Iterable, Iterator, Optional

from petnet import log

_VALID_BITS = (8, 16, 32, 64)
_ULONG_MAX = (1 << 64) - 1
_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)


class AtomicCounter:
    """An integer that is incremented and decremented under a lock."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        """Subtract one and return the new value."""
        with self._lock:
            self._value -= 1
            return self._value


def _digit_value(ch: str) -> int:
    if ch in string.digits:
        return ord(ch) - ord("0")
    lowered = ch.lower()
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a") + 10
    return 99


def _scan(text: str, base: int) -> Optional[int]:
    """Parse a leading integer the way the C ``strto*`` family does.

    Leading whitespace, an optional sign and (for base 0 or 16) an optional
    ``0x`` prefix are accepted; trailing characters are ignored. Returns
    ``None`` when no digits could be consumed.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in " \t\n\v\f\r":
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    def has_hex_prefix(at: int) -> bool:
        return (
            at + 2 < length + 0
            and text[at] == "0"
            and text[at + 1] in "xX"
            and _digit_value(text[at + 2]) < 16
        )

    if base == 0:
        if has_hex_prefix(pos):
            base = 16
            pos += 2
        elif pos < length and text[pos] == "0":
            base = 8
        else:
            base = 10
    elif base == 16 and has_hex_prefix(pos):
        pos += 2

    start = pos
    value = 0
    while pos < length and _digit_value(text[pos]) < base:
        value = value * base + _digit_value(text[pos])
        pos += 1
    if pos == start:
        return None
    return -value if negative else value


def _check_text(text: str) -> None:
    if not text:
        log.log_error("Invalid string")
        raise ValueError("empty string")


def _check_bits(bits: int) -> None:
    if bits not in _VALID_BITS:
        raise ValueError(f"unsupported integer width: {bits}")


def _auto_base(text: str) -> int:
    if len(text) > 2 and text[1] in "xX":
        return 16
    return 0


def _to_unsigned(text: str, bits: int, base: int) -> int:
    _check_bits(bits)
    _check_text(text)
    parsed = _scan(text, base)
    if parsed is None:
        raise ValueError(f"not a number: {text!r}")
    if abs(parsed) > _ULONG_MAX:
        value = _ULONG_MAX
    else:
        value = parsed & _ULONG_MAX
    if bits in (8, 16):
        if value > (1 << bits) - 1:
            raise ValueError(f"value out of range for u{bits}: {text!r}")
        return value
    return value & ((1 << bits) - 1)


def _to_signed(text: str, bits: int, base: int) -> int:
    _check_bits(bits)
    _check_text(text)
    parsed = _scan(text, base)
    if parsed is None:
        raise ValueError(f"not a number: {text!r}")
    value = min(max(parsed, _LONG_MIN), _LONG_MAX)
    if bits in (8, 16):
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            raise ValueError(f"value out of range for s{bits}: {text!r}")
        return value
    masked = value & ((1 << bits) - 1)
    if masked >= 1 << (bits - 1):
        masked -= 1 << bits
    return masked


def parse_unsigned(text: str, bits: int) -> int:
    """Parse an unsigned integer (decimal, octal or ``0x`` hex)."""
    return _to_unsigned(text, bits, _auto_base(text))


def parse_signed(text: str, bits: int) -> int:
    """Parse a signed integer (decimal, octal or ``0x`` hex)."""
    return _to_signed(text, bits, _auto_base(text))


def parse_unsigned_hex(text: str, bits: int) -> int:
    """Parse an unsigned hexadecimal integer."""
    return _to_unsigned(text, bits, 16)


def parse_signed_hex(text: str, bits: int) -> int:
    """Parse a signed hexadecimal integer."""
    return _to_signed(text, bits, 16)


def random_bytes(count: int) -> bytes:
    """Return ``count`` cryptographically random bytes."""
    if count < 0:
        raise ValueError("byte count must not be negative")
    return secrets.token_bytes(count)


def str_append(dst: Optional[str], text: str) -> str:
    """Return ``dst`` with ``text`` appended; ``None`` counts as empty."""
    log.log_debug(f"appending ({text}) to ({dst})")
    return (dst or "") + text


def str_join(joint: str, strings: Iterable[str]) -> str:
    """Join ``strings`` with ``joint`` between them."""
    return joint.join(strings)


def hexdump_lines(data: bytes) -> Iterator[str]:
    """Yield hex dump lines of 16 bytes each: offset, hex and ASCII."""
    view = bytes(data)
    for offset in range(0, len(view), 16):
        chunk = view[offset:offset + 16]
        hex_part = "".join(f"{byte:02x} " for byte in chunk)
        hex_part += "   " * (16 - len(chunk))
        ascii_part = "".join(
            chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in chunk
        )
        ascii_part += "." * (16 - len(chunk))
        yield f"{offset:08x}  {hex_part} |{ascii_part}|"


def hexdump(data: bytes) -> None:
    """Print a hex dump of ``data`` through the logger."""
    for line in hexdump_lines(data):
        log.printf("%s\n", line)


def print_backtrace() -> None:
    """Print the current call stack, innermost frame first."""
    log.printf("Backtrace:\n")
    frames = traceback.extract_stack()[:-1]
    for frame in reversed(frames):
        log.printf("\t%s:%d\n", frame.name, frame.lineno or 0)