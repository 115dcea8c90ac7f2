import pytest

from flowtx.rlp import RLPError, decode, decode_uint, encode


def test_pinned_empty_values():
    assert encode(b"") == b"\x80"
    assert encode([]) == b"\xc0"
    assert encode(0) == b"\x80"


def test_single_low_byte_encodes_to_itself():
    assert encode(b"\x7f") == b"\x7f"
    assert decode(b"\x7f") == b"\x7f"


def test_integer_matches_its_big_endian_bytes():
    assert encode(1) == encode(b"\x01")
    assert encode(0x0102) == encode(b"\x01\x02")


@pytest.mark.parametrize(
    "item",
    [
        b"",
        b"dog",
        b"\x80",
        bytes(55),
        bytes(56),
        bytes(1000),
        [],
        [b"cat", b"dog"],
        [[], [[]], [[], [[]]]],
        [b"a" * 60, [b"b" * 70, b""], b"\x00"],
    ],
)
def test_round_trip(item):
    assert decode(encode(item)) == item


def test_tuple_decodes_as_list():
    assert decode(encode((b"x", b"y"))) == [b"x", b"y"]


@pytest.mark.parametrize("value", [0, 1, 127, 128, 255, 256, 9999, 2**63, 2**64 - 1])
def test_uint_round_trip(value):
    assert decode_uint(decode(encode(value))) == value


def test_long_list_round_trip():
    items = [bytes([i % 256]) * (i % 7) for i in range(200)]
    assert decode(encode(items)) == items


def test_decode_empty_input():
    with pytest.raises(RLPError):
        decode(b"")


def test_decode_truncated():
    with pytest.raises(RLPError):
        decode(encode(b"abcdef")[:-1])


def test_decode_trailing_data():
    with pytest.raises(RLPError):
        decode(encode(b"abc") + b"\x00")


def test_decode_non_canonical_single_byte():
    with pytest.raises(RLPError):
        decode(b"\x81\x05")


def test_decode_non_canonical_long_size():
    with pytest.raises(RLPError):
        decode(b"\xb8\x05hello")


def test_decode_uint_rejects_leading_zero():
    with pytest.raises(RLPError):
        decode_uint(b"\x00\x01")


def test_decode_uint_rejects_overflow():
    with pytest.raises(RLPError):
        decode_uint(b"\x01" + bytes(8))


def test_decode_uint_rejects_list():
    with pytest.raises(RLPError):
        decode_uint([])


def test_encode_rejects_negative():
    with pytest.raises(RLPError):
        encode(-1)


def test_encode_rejects_unsupported_type():
    with pytest.raises(RLPError):
        encode("text")


def test_rlp_error_is_value_error():
    with pytest.raises(ValueError):
        decode(b"\xc3\x01")