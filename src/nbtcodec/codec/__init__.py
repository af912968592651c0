"""Byte-level primitives for nbtcodec.

This module provides the big-endian stream reader and writer and the modified
UTF-8 string codec the node types are built on.
"""

from __future__ import annotations

from .mutf8 import decode_mutf8, encode_mutf8, encoded_length
from .stream import MAX_UTF_LENGTH, DataReader, DataWriter

__all__ = [
    "DataReader",
    "DataWriter",
    "MAX_UTF_LENGTH",
    "encode_mutf8",
    "decode_mutf8",
    "encoded_length",
]
