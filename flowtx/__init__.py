"""Recursive Length Prefix (RLP) encoding and decoding."""

__version__ = "0.1.0"
__all__ = ["rlp"]