"""Whole-document encoding.

This module provides the encode() and dump() functions that turn a node tree
into its framed binary form.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from .codec.stream import DataWriter
from .framing import Framing, write_named, write_plain, write_unnamed
from .nodes import Node

logger = logging.getLogger(__name__)


def encode(node: Node | None, name: str = "", framing: Framing | str = Framing.NAMED) -> bytes:
    """Encode a node as a framed document.

    Args:
        node: Root node; None encodes a lone end tag
        name: Root name (named framing only, conventionally empty)
        framing: Framing of the top-level node

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a string is too long or a name is not a string
        UnknownTypeError: If the tree contains an unregistered node class

    Examples:
        ```python
        from nbtcodec import MapNode, encode

        root = MapNode()
        root.put_int("a", 5)
        root.put_string("b", "x")

        data = encode(root)                     # tag, empty name, payload
        data = encode(root, framing="plain")    # tag, payload
        ```
    """
    writer = DataWriter()
    _encode(writer, node, name, framing)
    data = writer.getvalue()
    logger.debug("Encoded %s NBT document: %d bytes", Framing(framing).value, len(data))
    return data


def dump(
    node: Node | None,
    fp: BinaryIO,
    name: str = "",
    framing: Framing | str = Framing.NAMED,
) -> None:
    """Encode a node as a framed document into a binary file object."""
    _encode(DataWriter(fp), node, name, framing)


def _encode(writer: DataWriter, node: Node | None, name: str, framing: Framing | str) -> None:
    framing = Framing(framing)
    if framing is Framing.NAMED:
        write_named(writer, name, node)
    elif framing is Framing.UNNAMED:
        write_unnamed(writer, node)
    else:
        write_plain(writer, node)
