"""IPv4 addresses and their text, byte and JSON forms."""

from __future__ import annotations

from dataclasses import dataclass

from petnet import log, util
from petnet.json_obj import JsonObject
from petnet.json_types import JsonError

_MAX_TEXT = len("xxx.xxx.xxx.xxx")


@dataclass(frozen=True)
class Ipv4Address:
    """An IPv4 address stored as four bytes in host order.

    ``addr[3]`` is the first number of the dotted quad, ``addr[0]`` the last.
    """

    addr: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.addr, (bytes, bytearray)) or len(self.addr) != 4:
            raise ValueError("an IPv4 address needs exactly 4 bytes")
        object.__setattr__(self, "addr", bytes(self.addr))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ipv4Address":
        """Build from four bytes in host order."""
        return cls(bytes(data))

    @classmethod
    def from_octets(cls, octets: bytes) -> "Ipv4Address":
        """Build from four bytes in network order."""
        octets = bytes(octets)
        if len(octets) != 4:
            raise ValueError("an IPv4 address needs exactly 4 octets")
        return cls(octets[::-1])

    @classmethod
    def from_str(cls, text: str) -> "Ipv4Address":
        """Parse dotted quad notation; raise ``ValueError`` if it is invalid."""
        remaining = text[:_MAX_TEXT]
        raw = bytearray(4)
        for i in range(3):
            part, sep, rest = remaining.partition(".")
            if not sep:
                log.log_error("Invalid IPV4 address")
                raise ValueError(f"invalid IPv4 address: {text!r}")
            try:
                raw[3 - i] = util.parse_unsigned(part, 8)
            except ValueError:
                log.log_error(f"Invalid IPV4 address byte ({4 - i})")
                raise ValueError(f"invalid IPv4 address: {text!r}") from None
            remaining = rest
        try:
            raw[0] = util.parse_unsigned(remaining, 8)
        except ValueError:
            log.log_error("Invalid IPV4 address byte (0)")
            raise ValueError(f"invalid IPv4 address: {text!r}") from None
        return cls(bytes(raw))

    @classmethod
    def from_json(cls, obj: JsonObject, key: str) -> "Ipv4Address":
        """Read a dotted quad string member of ``obj``."""
        try:
            text = obj.get_string(key)
        except JsonError:
            log.log_error(f"Could not find JSON field ({key})")
            raise
        return cls.from_str(text)

    @classmethod
    def broadcast(cls) -> "Ipv4Address":
        """Return 255.255.255.255."""
        return cls(b"\xff\xff\xff\xff")

    def __str__(self) -> str:
        a = self.addr
        return f"{a[3]}.{a[2]}.{a[1]}.{a[0]}"

    def to_json(self, obj: JsonObject, key: str) -> None:
        """Add this address to ``obj`` as a dotted quad string."""
        obj.add(key, str(self))

    def to_bytes(self) -> bytes:
        """Return the four bytes in host order."""
        return self.addr

    def to_octets(self) -> bytes:
        """Return the four bytes in network order."""
        return self.addr[::-1]

    def is_nil(self) -> bool:
        """Whether this is 0.0.0.0."""
        return self.addr == bytes(4)

    def compare(self, other: "Ipv4Address") -> int:
        """Compare the host order bytes: -1, 0 or 1."""
        if self.addr < other.addr:
            return -1
        if self.addr > other.addr:
            return 1
        return 0