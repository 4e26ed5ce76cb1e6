"""Allocation of 16-bit port numbers."""

from __future__ import annotations

import threading

from petnet import log, util

_PORT_COUNT = 1 << 16
_RESERVED_MAX = 1024


class PortMapError(Exception):
    """Raised when a port cannot be allocated or released."""


def _check_port(port: int) -> None:
    if not 0 <= port < _PORT_COUNT:
        raise ValueError(f"port out of range: {port}")


class PortMap:
    """Tracks which ports are in use. Port 0 is never handed out."""

    def __init__(self) -> None:
        self._allocated = {0}
        self._lock = threading.Lock()

    def is_allocated(self, port: int) -> bool:
        _check_port(port)
        with self._lock:
            return port in self._allocated

    def _find_free_port(self) -> int:
        start = int.from_bytes(util.random_bytes(2), "little")
        for offset in range(_PORT_COUNT - 1):
            port = (start + offset) & 0xFFFF
            if port <= _RESERVED_MAX:
                continue
            if port not in self._allocated:
                return port
        return 0

    def allocate(self, port: int = 0) -> int:
        """Reserve ``port``, or a random free port above 1024 if it is 0.

        Returns the port reserved; raises ``PortMapError`` if none is free
        or the requested one is taken.
        """
        _check_port(port)
        with self._lock:
            if port == 0:
                port = self._find_free_port()
            if port == 0:
                log.log_error("Port Space Exhausted. No Available Ports")
                raise PortMapError("no free ports available")
            if port in self._allocated:
                log.log_error("Port is already in use")
                raise PortMapError(f"port {port} is already in use")
            self._allocated.add(port)
            return port

    def release(self, port: int) -> None:
        """Make ``port`` available again."""
        _check_port(port)
        if port == 0:
            log.log_error("Tried to release invalid port")
            raise PortMapError("port 0 cannot be released")
        with self._lock:
            self._allocated.discard(port)