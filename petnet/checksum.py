"""Internet (one's complement) checksums and byte-order helpers.

Checksums work on 16-bit words read in network (big-endian) order; the
returned value is to be packed big-endian into a header. Data must hold a
whole number of words: pad an odd-length buffer with one zero byte.
"""

from __future__ import annotations

from typing import Optional


def _sum_words(start: int, data: Optional[bytes]) -> int:
    scratch = start & 0xFFFF
    if not data:
        return scratch
    view = bytes(data)
    if len(view) % 2:
        raise ValueError("checksum data must be a whole number of 16-bit words")
    for high, low in zip(view[0::2], view[1::2]):
        scratch += (high << 8) | low
        if scratch & 0xFFFF0000:
            scratch = (scratch & 0xFFFF) + 1
    return scratch


def calculate_checksum(data: bytes) -> int:
    """Return the checksum of ``data`` ready to store in a header."""
    return ~_sum_words(0, data) & 0xFFFF


def verify_checksum(data: bytes) -> int:
    """Checksum data that already holds its checksum; zero means valid."""
    return calculate_checksum(data)


def checksum_begin(data: bytes) -> int:
    """Start a multi-buffer checksum; returns an intermediate value."""
    return _sum_words(0, data) & 0xFFFF


def checksum_continue(checksum: int, data: bytes) -> int:
    """Fold another buffer into an intermediate checksum."""
    return _sum_words(checksum, data) & 0xFFFF


def checksum_finalize(checksum: int, data: Optional[bytes] = None) -> int:
    """Fold a last (possibly absent) buffer in and return the final checksum."""
    return ~_sum_words(checksum, data) & 0xFFFF


def _swap16(value: int) -> int:
    value &= 0xFFFF
    return ((value & 0x00FF) << 8) | ((value & 0xFF00) >> 8)


def _swap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return int.from_bytes(value.to_bytes(4, "little"), "big")


def htons(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    return _swap16(value)


def ntohs(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    return _swap16(value)


def htonl(value: int) -> int:
    """Reverse the four bytes of a 32-bit value."""
    return _swap32(value)


def ntohl(value: int) -> int:
    """Reverse the four bytes of a 32-bit value."""
    return _swap32(value)