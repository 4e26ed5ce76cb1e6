"""Ethernet MAC addresses and their text, byte and JSON forms."""

from __future__ import annotations

from dataclasses import dataclass

from petnet import log, util
from petnet.json_obj import JsonObject
from petnet.json_types import JsonError

_MAX_TEXT = len("xx:xx:xx:xx:xx:xx")
_BROADCAST = b"\xff" * 6


@dataclass(frozen=True)
class MacAddress:
    """A MAC address stored as six bytes in host order.

    ``addr[5]`` is the first group of the colon notation, ``addr[0]`` the last.
    """

    addr: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.addr, (bytes, bytearray)) or len(self.addr) != 6:
            raise ValueError("a MAC address needs exactly 6 bytes")
        object.__setattr__(self, "addr", bytes(self.addr))

    @classmethod
    def from_bytes(cls, data: bytes) -> "MacAddress":
        """Build from six bytes in host order."""
        return cls(bytes(data))

    @classmethod
    def from_octets(cls, octets: bytes) -> "MacAddress":
        """Build from six bytes in network order."""
        octets = bytes(octets)
        if len(octets) != 6:
            raise ValueError("a MAC address needs exactly 6 octets")
        return cls(octets[::-1])

    @classmethod
    def from_str(cls, text: str) -> "MacAddress":
        """Parse colon separated hex notation; raise ``ValueError`` if invalid."""
        remaining = text[:_MAX_TEXT]
        raw = bytearray(6)
        for i in range(5):
            part, sep, rest = remaining.partition(":")
            if not sep:
                log.log_error("Invalid MAC address")
                raise ValueError(f"invalid MAC address: {text!r}")
            try:
                raw[5 - i] = util.parse_unsigned_hex(part, 8)
            except ValueError:
                log.log_error(f"Invalid MAC address byte ({6 - i})")
                raise ValueError(f"invalid MAC address: {text!r}") from None
            remaining = rest
        try:
            raw[0] = util.parse_unsigned_hex(remaining, 8)
        except ValueError:
            log.log_error("Invalid MAC address byte (0)")
            raise ValueError(f"invalid MAC address: {text!r}") from None
        return cls(bytes(raw))

    @classmethod
    def from_json(cls, obj: JsonObject, key: str) -> "MacAddress":
        """Read a colon notation string member of ``obj``."""
        try:
            text = obj.get_string(key)
        except JsonError:
            log.log_error(f"Could not find JSON field ({key})")
            raise
        log.log_debug(f"mac_addr_str={text}")
        return cls.from_str(text)

    @classmethod
    def broadcast(cls) -> "MacAddress":
        """Return ff:ff:ff:ff:ff:ff."""
        return cls(_BROADCAST)

    def __str__(self) -> str:
        return ":".join(f"{byte:x}" for byte in reversed(self.addr))

    def to_json(self, obj: JsonObject, key: str) -> None:
        """Add this address to ``obj`` as a colon notation string."""
        obj.add(key, str(self))

    def to_bytes(self) -> bytes:
        """Return the six bytes in host order."""
        return self.addr

    def to_octets(self) -> bytes:
        """Return the six bytes in network order."""
        return self.addr[::-1]

    def is_broadcast(self) -> bool:
        """Whether this is ff:ff:ff:ff:ff:ff."""
        return self.addr == _BROADCAST

    def compare(self, other: "MacAddress") -> int:
        """Compare the host order bytes: -1, 0 or 1."""
        if self.addr < other.addr:
            return -1
        if self.addr > other.addr:
            return 1
        return 0