"""Reading network interface details from sysfs."""

from __future__ import annotations

import os

from petnet import log, util
from petnet.mac_address import MacAddress

SYSFS_NET_DIR = "/sys/class/net/"


def read_sysfs_file(path: str) -> bytes:
    """Return the contents of a sysfs file.

    The reported file size is used as an upper bound; an empty size yields
    empty data. Raises ``OSError`` if the file cannot be read.
    """
    try:
        size = os.stat(path).st_size
    except OSError:
        log.log_error(f"Could not stat file ({path})")
        raise
    if size <= 0:
        return b""
    try:
        with open(path, "rb") as handle:
            return handle.read(size)
    except OSError:
        log.log_error(f"Could not open file ({path})")
        raise


def _read_iface_text(iface_name: str, attribute: str, sysfs_dir: str) -> str:
    path = os.path.join(sysfs_dir, iface_name, attribute)
    try:
        data = read_sysfs_file(path)
    except OSError:
        log.log_error(f"Could not read sysfs file ({path})")
        raise
    return data.decode("ascii", errors="replace")


def get_iface_mac_addr(iface_name: str, sysfs_dir: str = SYSFS_NET_DIR) -> MacAddress:
    """Return the MAC address of a network interface."""
    text = _read_iface_text(iface_name, "address", sysfs_dir)
    try:
        return MacAddress.from_str(text)
    except ValueError:
        log.log_error("Invalid MAC address string from sysfs")
        raise


def get_iface_mtu(iface_name: str, sysfs_dir: str = SYSFS_NET_DIR) -> int:
    """Return the MTU of a network interface."""
    text = _read_iface_text(iface_name, "mtu", sysfs_dir)
    try:
        return util.parse_unsigned(text, 32)
    except ValueError:
        log.log_error("Invalid MTU string from sysfs")
        raise