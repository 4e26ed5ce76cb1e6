import pytest

from petnet.json_types import JsonError, JsonParam, JsonType, check_integer


@pytest.mark.parametrize(
    "kind, low, high",
    [
        (JsonType.S8, -128, 127),
        (JsonType.S16, -32768, 32767),
        (JsonType.S32, -2147483648, 2147483647),
        (JsonType.S64, -(1 << 63), (1 << 63) - 1),
    ],
)
def test_signed_bounds(kind, low, high):
    assert check_integer(low, kind) == low
    assert check_integer(high, kind) == high
    with pytest.raises(JsonError):
        check_integer(low - 1, kind)
    with pytest.raises(JsonError):
        check_integer(high + 1, kind)


@pytest.mark.parametrize(
    "kind, high",
    [
        (JsonType.U8, 255),
        (JsonType.U16, 65535),
        (JsonType.U32, 4294967295),
        (JsonType.U64, (1 << 64) - 1),
    ],
)
def test_unsigned_upper_bound(kind, high):
    assert check_integer(high, kind) == high
    assert check_integer(0, kind) == 0
    with pytest.raises(JsonError):
        check_integer(high + 1, kind)


def test_unsigned_negative_wraps_to_width():
    assert check_integer(-1, JsonType.U8) == 255
    assert check_integer(-1, JsonType.U16) == 65535
    assert check_integer(-1, JsonType.U64) == (1 << 64) - 1


@pytest.mark.parametrize("kind", [JsonType.STRING, JsonType.OBJECT])
def test_non_integer_kind_rejected(kind):
    with pytest.raises(JsonError):
        check_integer(1, kind)


@pytest.mark.parametrize("value", [True, 1.5, "7", None])
def test_non_integer_value_rejected(value):
    with pytest.raises(JsonError):
        check_integer(value, JsonType.S32)


def test_json_error_is_value_error():
    with pytest.raises(ValueError):
        check_integer(300, JsonType.U8)


def test_kind_widths_and_signedness():
    assert [k.bits for k in (JsonType.U8, JsonType.S16, JsonType.U32, JsonType.S64)] == [
        8,
        16,
        32,
        64,
    ]
    assert JsonType.S8.signed is True
    assert check_integer(-1, JsonType.S8) == -1
    assert JsonType.U64.signed is False
    assert check_integer(-1, JsonType.U64) == (1 << 64) - 1
    assert JsonType.STRING.is_integer is False
    with pytest.raises(JsonError):
        check_integer(0, JsonType.STRING)
    with pytest.raises(JsonError):
        JsonType.OBJECT.bits


def test_kind_order_matches_declaration():
    assert [k.name for k in JsonType] == [
        "U8",
        "S8",
        "U16",
        "S16",
        "U32",
        "S32",
        "U64",
        "S64",
        "STRING",
        "OBJECT",
    ]
    accepted = []
    for kind in JsonType:
        try:
            accepted.append(check_integer(0, kind) == 0)
        except JsonError:
            accepted.append(False)
    assert accepted == [True] * 8 + [False, False]


def test_param_holds_value():
    param = JsonParam("mtu", JsonType.U32)
    assert param.value is None
    param.value = check_integer(1500, param.kind)
    assert param.value == 1500
    assert param == JsonParam("mtu", JsonType.U32, 1500)