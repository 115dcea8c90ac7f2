# flowtx

`flowtx` provides a Recursive Length Prefix (RLP) codec: the compact binary
format used to serialise transactions canonically before they are hashed and
signed. It has no runtime dependencies.

## Installation

```
pip install flowtx
```

## Encoding

`flowtx.rlp.encode(item)` accepts:

- `bytes`, `bytearray` or `memoryview`: encoded as a byte string. A single
  byte below `0x80` is its own encoding.
- a non-negative `int`: encoded as its minimal big-endian bytes, so `0`
  becomes the empty string.
- a `list` or `tuple` of any of these, nested to any depth.

```python
from flowtx import rlp

rlp.encode(b"dog")          # b"\x83dog"
rlp.encode(0)               # b"\x80"
rlp.encode(1024)            # b"\x82\x04\x00"
rlp.encode([])              # b"\xc0"
rlp.encode([b"cat", [1]])   # b"\xc5\x83cat\xc1\x01"
```

A negative integer, or a value of any other type, raises `rlp.RLPError`.

## Decoding

`flowtx.rlp.decode(data)` decodes exactly one item. Byte strings come back as
`bytes` and lists as Python `list`s, nested as they were encoded. Integers are
not told apart from byte strings in RLP, so read them with
`rlp.decode_uint`:

```python
item = rlp.decode(b"\xc5\x83cat\xc1\x01")   # [b"cat", [b"\x01"]]
rlp.decode_uint(item[1][0])                  # 1
```

Decoding is strict and raises `rlp.RLPError` for:

- input that ends before the item it announces;
- data left over after the item;
- non-canonical sizes (a single byte below `0x80` wrapped in a length
  prefix, a long-form length that would fit the short form, or a length
  with leading zero bytes).

`decode_uint(data)` reads an unsigned integer of at most 64 bits from a
decoded byte string. Empty bytes read as `0`. It raises `RLPError` for a
list, for more than eight bytes, and for leading zero bytes.

`RLPError` is a subclass of `ValueError`.

## What this package does not do

`flowtx` currently offers only the RLP layer. It does not build transactions,
collect or order signatures, compute transaction IDs, or decode encoded
transactions into objects; those have to be assembled on top of `encode`
and `decode` by the caller.