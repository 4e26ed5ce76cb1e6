import pytest

from petnet.json_obj import JsonObject
from petnet.json_types import JsonError
from petnet.mac_address import MacAddress

SAMPLE = "02:00:00:00:00:01"


def test_broadcast_text():
    assert str(MacAddress.broadcast()) == "ff:ff:ff:ff:ff:ff"


def test_broadcast_is_broadcast():
    assert MacAddress.broadcast().is_broadcast() is True
    assert MacAddress.from_str(SAMPLE).is_broadcast() is False


def test_from_str_octets_follow_text_order():
    mac = MacAddress.from_str(SAMPLE)
    assert mac.to_octets() == bytes([0x02, 0, 0, 0, 0, 0x01])
    assert mac.to_bytes() == bytes([0x01, 0, 0, 0, 0, 0x02])


def test_text_round_trip():
    mac = MacAddress.from_str("0a:1b:2c:3d:4e:5f")
    assert MacAddress.from_str(str(mac)) == mac


def test_str_is_lowercase_hex():
    text = str(MacAddress.from_str("0A:1B:2C:3D:4E:5F"))
    assert text == text.lower()
    assert MacAddress.from_str(text) == MacAddress.from_str("0a:1b:2c:3d:4e:5f")


def test_octets_round_trip():
    octets = bytes([2, 0x10, 0x20, 0x30, 0x40, 0x50])
    assert MacAddress.from_octets(octets).to_octets() == octets


def test_bytes_round_trip():
    data = bytes([9, 8, 7, 6, 5, 4])
    assert MacAddress.from_bytes(data).to_bytes() == data


def test_trailing_newline_is_ignored():
    assert MacAddress.from_str(SAMPLE + "\n") == MacAddress.from_str(SAMPLE)


@pytest.mark.parametrize(
    "text",
    ["02:00:00", "zz:00:00:00:00:01", "02:00:00:00:00:zz", "100:00:00:00:00:01", ""],
)
def test_invalid_strings(text):
    with pytest.raises(ValueError):
        MacAddress.from_str(text)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        MacAddress.from_bytes(b"\x00\x01")
    with pytest.raises(ValueError):
        MacAddress.from_octets(b"\x00" * 7)


def test_json_round_trip():
    obj = JsonObject()
    mac = MacAddress.from_str(SAMPLE)
    mac.to_json(obj, "mac")
    assert MacAddress.from_json(obj, "mac") == mac
    assert obj.get_string("mac") == str(mac)


def test_from_json_missing_key():
    with pytest.raises(JsonError):
        MacAddress.from_json(JsonObject(), "mac")


def test_compare():
    low = MacAddress.from_bytes(bytes(6))
    high = MacAddress.broadcast()
    assert low.compare(high) == -1
    assert high.compare(low) == 1
    assert low.compare(MacAddress.from_bytes(bytes(6))) == 0