"""Recursive Length Prefix (RLP) encoding of byte strings, unsigned integers and lists."""

from __future__ import annotations

from typing import Union

Item = Union[bytes, list]

_MAX_UINT_BYTES = 8
_SHORT_LIMIT = 56


class RLPError(ValueError):
    """Raised when a value cannot be encoded or input is not valid RLP."""


def _int_to_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _header(offset: int, length: int) -> bytes:
    if length < _SHORT_LIMIT:
        return bytes([offset + length])
    size = _int_to_bytes(length)
    return bytes([offset + _SHORT_LIMIT - 1 + len(size)]) + size


def encode(item) -> bytes:
    """Encode bytes, a non-negative integer, or a (nested) list of those."""
    if isinstance(item, int):
        if item < 0:
            raise RLPError("cannot encode a negative integer")
        return encode(_int_to_bytes(item))
    if isinstance(item, (bytes, bytearray, memoryview)):
        data = bytes(item)
        if len(data) == 1 and data[0] < 0x80:
            return data
        return _header(0x80, len(data)) + data
    if isinstance(item, (list, tuple)):
        body = b"".join(encode(element) for element in item)
        return _header(0xC0, len(body)) + body
    raise RLPError(f"cannot encode value of type {type(item).__name__}")


def _long_header(data: bytes, pos: int, limit: int, size_len: int) -> tuple[int, int]:
    start = pos + 1 + size_len
    if start > limit:
        raise RLPError("unexpected end of input")
    size_bytes = data[pos + 1 : start]
    if size_bytes[0] == 0:
        raise RLPError("non-canonical size information")
    length = int.from_bytes(size_bytes, "big")
    if length < _SHORT_LIMIT:
        raise RLPError("non-canonical size information")
    return start, start + length


def _read_header(data: bytes, pos: int, limit: int) -> tuple[bool, int, int]:
    if pos >= limit:
        raise RLPError("unexpected end of input")
    prefix = data[pos]
    if prefix < 0x80:
        return False, pos, pos + 1
    if prefix <= 0xB7:
        is_list = False
        start = pos + 1
        end = start + prefix - 0x80
        if prefix == 0x81:
            if start >= limit:
                raise RLPError("unexpected end of input")
            if data[start] < 0x80:
                raise RLPError("non-canonical size information")
    elif prefix <= 0xBF:
        is_list = False
        start, end = _long_header(data, pos, limit, prefix - 0xB7)
    elif prefix <= 0xF7:
        is_list = True
        start = pos + 1
        end = start + prefix - 0xC0
    else:
        is_list = True
        start, end = _long_header(data, pos, limit, prefix - 0xF7)
    if end > limit:
        raise RLPError("value size exceeds available input length")
    return is_list, start, end


def _decode_item(data: bytes, pos: int, limit: int) -> tuple[Item, int]:
    is_list, start, end = _read_header(data, pos, limit)
    if not is_list:
        return data[start:end], end
    items: list = []
    cursor = start
    while cursor < end:
        item, cursor = _decode_item(data, cursor, end)
        items.append(item)
    return items, end


def decode(data) -> Item:
    """Decode a single RLP item; byte strings come back as bytes, lists as lists."""
    data = bytes(data)
    item, end = _decode_item(data, 0, len(data))
    if end != len(data):
        raise RLPError("trailing data after RLP item")
    return item


def decode_uint(data) -> int:
    """Interpret a decoded RLP string as a canonical unsigned 64-bit integer."""
    if not isinstance(data, (bytes, bytearray)):
        raise RLPError("expected a string, got a list")
    if len(data) > _MAX_UINT_BYTES:
        raise RLPError("integer overflows 64 bits")
    if data and data[0] == 0:
        raise RLPError("non-canonical integer (leading zero bytes)")
    return int.from_bytes(data, "big")