"""Support pieces for a user-space network stack: addresses, checksums, ports, ring buffers, JSON access and logging."""

__version__ = "0.1.0"