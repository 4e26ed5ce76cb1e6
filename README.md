# petnet

Building blocks for a user-space TCP/IP network stack, in plain Python with
no third-party dependencies.

## What it provides

- `petnet.ip_address.Ipv4Address`: an immutable IPv4 address held as four
  bytes in host order. Parse dotted-quad text with `from_str`, convert with
  `from_bytes`/`to_bytes` (host order) and `from_octets`/`to_octets`
  (network order), get `broadcast()`, test `is_nil()`, `compare()` two
  addresses (-1, 0 or 1), and read or write the address as a string member
  of a `JsonObject` (`from_json`, `to_json`). Invalid text raises
  `ValueError`.
- `petnet.mac_address.MacAddress`: the same for six-byte Ethernet addresses
  in colon-separated hex, with `is_broadcast()`. `str()` writes each group
  without zero padding, so `02:00:00:00:00:01` prints as `2:0:0:0:0:1`.
- `petnet.checksum`: the Internet one's-complement checksum over 16-bit
  big-endian words, either in one call (`calculate_checksum`,
  `verify_checksum`, where a result of zero means valid) or over several
  buffers (`checksum_begin`, `checksum_continue`, `checksum_finalize`).
  Data must have an even length; pad odd buffers with one zero byte.
  Also `htons`, `ntohs`, `htonl` and `ntohl` byte swaps.
- `petnet.port_map.PortMap`: allocation of 16-bit port numbers. Asking for
  port 0 picks a random free port above 1024; a taken port or an exhausted
  port space raises `PortMapError`, as does releasing port 0.
- `petnet.ringbuffer.RingBuffer`: a fixed-capacity byte FIFO with `write`
  (writes as much as fits and returns the count), `read`, `discard`,
  `reset`, `resize` (raises `ValueError` if the buffered data would not
  fit), and `capacity`, `free_space`, `used_space`, `is_full`, `is_empty`
  and `len()`.
- `petnet.json_obj.JsonObject` and `JsonArray`: typed access to parsed JSON
  (`get_string`, `get_bool`, `get_int`, `get_double`, `get_integer` with a
  `petnet.json_types.JsonType` range check), adding, setting and deleting
  members and items, nested objects and arrays that share storage with
  their parent, and batch lookups through `JsonParam` with `get_params`.
  Missing keys, wrong types and out-of-range values raise
  `petnet.json_types.JsonError`, a subclass of `ValueError`.
- `petnet.sysfs`: `get_iface_mac_addr` and `get_iface_mtu` read an
  interface's address and MTU from the sysfs network directory
  (`/sys/class/net/` by default, or any directory passed as `sysfs_dir`);
  `read_sysfs_file` reads one such file.
- `petnet.log`: timestamped `PETNET[thread] seconds.micros> ` lines on
  standard output (`logf`, `printf`, `log_str`, `print_str`, and
  `log_error`/`log_debug`, which tag the caller's file and line).
- `petnet.util`: `parse_unsigned`, `parse_signed`, `parse_unsigned_hex` and
  `parse_signed_hex` for 8, 16, 32 and 64-bit integers (leading number is
  parsed, trailing text ignored; 8 and 16-bit values out of range raise
  `ValueError`), `AtomicCounter`, `random_bytes`, `str_append`, `str_join`,
  `hexdump_lines`/`hexdump` and `print_backtrace`.

## Install

```
pip install .
```

## Example

```python
from petnet.checksum import calculate_checksum
from petnet.ip_address import Ipv4Address
from petnet.json_obj import JsonObject
from petnet.port_map import PortMap
from petnet.ringbuffer import RingBuffer

config = JsonObject.parse('{"ipv4_address": "192.168.1.10", "net_device": "tap0"}')
addr = Ipv4Address.from_json(config, "ipv4_address")
print(addr, addr.to_octets(), config.get_string("net_device"))

header = bytes(20)
print(hex(calculate_checksum(header)))   # 0xffff

ports = PortMap()
port = ports.allocate(0)      # random free port above 1024
ports.release(port)

rb = RingBuffer(8)
rb.write(b"hello")
print(rb.read(3), len(rb))    # b'hel' 2
```

## What it does not do

This package holds the supporting pieces only. It does not send or receive
packets, talk to a network device, implement Ethernet, ARP, IP, ICMP, TCP or
UDP, or offer a socket interface, and it has no command-line program.

## Tests

```
pip install .[test]
pytest
```