"""A fixed-capacity byte FIFO backed by a circular buffer."""

from __future__ import annotations

from petnet import log


class RingBuffer:
    """A circular byte buffer holding at most ``capacity`` bytes.

    One slot of the underlying storage is kept empty so that a full buffer
    can be told apart from an empty one.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._size = capacity + 1
        self._buf = bytearray(self._size)
        self._head = 0
        self._tail = 0

    def __len__(self) -> int:
        return self.used_space()

    def capacity(self) -> int:
        """Return the largest number of bytes the buffer can hold."""
        return self._size - 1

    def free_space(self) -> int:
        """Return how many more bytes can be written."""
        if self._head >= self._tail:
            return self.capacity() - (self._head - self._tail)
        return self._tail - self._head - 1

    def used_space(self) -> int:
        """Return how many bytes are waiting to be read."""
        return self.capacity() - self.free_space()

    def is_full(self) -> bool:
        return self.free_space() == 0

    def is_empty(self) -> bool:
        return self.free_space() == self.capacity()

    def reset(self) -> None:
        """Drop all buffered data."""
        self._head = 0
        self._tail = 0

    def write(self, data: bytes) -> int:
        """Append as much of ``data`` as fits; return the number of bytes written."""
        view = memoryview(bytes(data))
        count = min(len(view), self.free_space())
        written = 0
        while written < count:
            n = min(self._size - self._head, count - written)
            self._buf[self._head:self._head + n] = view[written:written + n]
            self._head = (self._head + n) % self._size
            written += n
        return written

    def _consume(self, count: int, keep: bool) -> bytes:
        if count < 0:
            raise ValueError("count must not be negative")
        count = min(count, self.used_space())
        out = bytearray()
        taken = 0
        while taken < count:
            n = min(self._size - self._tail, count - taken)
            if keep:
                out += self._buf[self._tail:self._tail + n]
            self._tail = (self._tail + n) % self._size
            taken += n
        return bytes(out) if keep else bytes(taken)

    def read(self, count: int) -> bytes:
        """Remove and return up to ``count`` bytes from the front."""
        return self._consume(count, keep=True)

    def discard(self, count: int) -> int:
        """Drop up to ``count`` bytes from the front; return how many were dropped."""
        return len(self._consume(count, keep=False))

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, keeping the buffered data.

        Raises ``ValueError`` if the buffered data would not fit.
        """
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        if self.used_space() > new_capacity:
            log.log_error("Ring buffer holds more data than the new capacity")
            raise ValueError("buffered data exceeds the new capacity")
        pending = self.read(self.used_space())
        self._size = new_capacity + 1
        self._buf = bytearray(self._size)
        self.reset()
        self.write(pending)