"""Whole-document decoding.

This module provides the decode() and load() functions that turn bytes or a
binary file into a node tree under a Limiter.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Union

from .codec.stream import DataReader
from .exceptions import MalformedInputError, NbtError
from .framing import Framing, read_named, read_plain, read_unnamed
from .limiter import Limiter
from .nodes import Node

logger = logging.getLogger(__name__)

Decoded = Union[tuple[str, Node], Node, None]


def decode(
    data: bytes | bytearray | memoryview,
    limiter: Limiter | None = None,
    framing: Framing | str = Framing.NAMED,
    *,
    strict: bool = False,
) -> Decoded:
    """Decode one framed node from a byte buffer.

    Args:
        data: Encoded document
        limiter: Limiter for this decode; a fresh reference-protocol limiter
            (2 MiB, depth 512) if omitted
        framing: Framing of the top-level node
        strict: If True, fail when bytes remain after the node

    Returns:
        (name, node) for named framing, the node for unnamed and plain framing,
        or None if the document holds only the end tag

    Raises:
        DecodeError: If the data is malformed, truncated or exceeds the limiter
        NullNodeError: If a list element decodes to nothing

    Examples:
        ```python
        from nbtcodec import IntNode, MapNode, Limiter, decode, encode

        root = MapNode({"a": IntNode(5)})
        data = encode(root, name="root")

        # Named (default): name and node
        name, node = decode(data)

        # Untrusted input with a tighter budget
        name, node = decode(data, Limiter(max_length=1024, max_depth=16))
        ```
    """
    reader = DataReader.from_bytes(bytes(data))
    return _decode(reader, limiter, framing, strict)


def load(
    fp: BinaryIO,
    limiter: Limiter | None = None,
    framing: Framing | str = Framing.NAMED,
    *,
    strict: bool = False,
) -> Decoded:
    """Decode one framed node from a binary file object.

    The strict trailing-data check only applies to seekable files.
    """
    return _decode(DataReader(fp), limiter, framing, strict)


def _decode(
    reader: DataReader, limiter: Limiter | None, framing: Framing | str, strict: bool
) -> Decoded:
    framing = Framing(framing)
    if limiter is None:
        limiter = Limiter.reference_protocol()

    try:
        if framing is Framing.NAMED:
            result: Decoded = read_named(reader, limiter)
        elif framing is Framing.UNNAMED:
            result = read_unnamed(reader, limiter)
        else:
            result = read_plain(reader, limiter)

        if strict and not reader.at_eof():
            raise MalformedInputError("Trailing bytes after NBT document")
    except NbtError as e:
        logger.debug("NBT decode failed (%s framing, %r): %s", framing.value, limiter, e)
        raise

    logger.debug("Decoded %s NBT document (%r)", framing.value, limiter)
    return result
