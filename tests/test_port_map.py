import pytest

from petnet.port_map import PortMap, PortMapError


def test_port_zero_is_reserved_from_start():
    pm = PortMap()
    assert pm.is_allocated(0)
    assert not pm.is_allocated(80)


def test_allocate_specific_port():
    pm = PortMap()
    assert pm.allocate(8080) == 8080
    assert pm.is_allocated(8080)


def test_allocate_taken_port_raises():
    pm = PortMap()
    pm.allocate(5000)
    with pytest.raises(PortMapError):
        pm.allocate(5000)


def test_release_makes_port_available():
    pm = PortMap()
    pm.allocate(6000)
    pm.release(6000)
    assert not pm.is_allocated(6000)
    assert pm.allocate(6000) == 6000


def test_release_zero_raises():
    pm = PortMap()
    with pytest.raises(PortMapError):
        pm.release(0)
    assert pm.is_allocated(0)


def test_random_allocation_skips_reserved_and_is_unique():
    pm = PortMap()
    ports = {pm.allocate(0) for _ in range(200)}
    assert len(ports) == 200
    assert all(1024 < p <= 65535 for p in ports)
    assert all(pm.is_allocated(p) for p in ports)


def test_random_allocation_when_exhausted_raises():
    pm = PortMap()
    for port in range(1025, 65536):
        pm.allocate(port)
    with pytest.raises(PortMapError):
        pm.allocate(0)


def test_random_allocation_finds_last_free_port():
    pm = PortMap()
    for port in range(1025, 65536):
        if port != 40000:
            pm.allocate(port)
    assert pm.allocate(0) == 40000


def test_out_of_range_port_rejected():
    pm = PortMap()
    with pytest.raises(ValueError):
        pm.allocate(70000)
    with pytest.raises(ValueError):
        pm.is_allocated(-1)