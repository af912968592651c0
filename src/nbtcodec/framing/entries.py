"""Named, unnamed and plain node framing.

The three framings differ only in what sits between the type tag and the
payload:

- Named: ``[tag][name][payload]``, the canonical document format and the
  format of map entries
- Unnamed: ``[tag][name length][skipped name bytes][payload]``, for reading
  named documents while ignoring the name
- Plain: ``[tag][payload]``

All readers return None when they read the end tag, which is how an absent
top-level value is told apart from an empty container.
"""

from __future__ import annotations

import enum

from ..codec.stream import DataReader, DataWriter
from ..exceptions import EncodeError, MalformedInputError, NullNodeError
from ..limiter import Limiter
from ..nodes import Node, Tag, read_limited_utf, reader_for, type_tag


class Framing(str, enum.Enum):
    """Top-level wire framing."""

    NAMED = "named"
    UNNAMED = "unnamed"
    PLAIN = "plain"


def _read_payload(reader: DataReader, limiter: Limiter, tag: int) -> Node:
    node = reader_for(tag, limiter)(reader, limiter)
    if node is None:
        raise NullNodeError("NBT of non-zero type is null")
    return node


def read_named(reader: DataReader, limiter: Limiter) -> tuple[str, Node] | None:
    """Read a tag, a name and a payload.

    Args:
        reader: Source of bytes
        limiter: Limiter charged for every byte read

    Returns:
        (name, node), or None if the end tag was read

    Raises:
        UnknownTypeError: If the tag is unknown
        LimitError: If the limiter budget is exceeded
        TruncatedInputError: If the data ends early
    """
    limiter.read_unsigned(1)
    tag = reader.read_byte()
    if tag == Tag.END:
        return None
    name = read_limited_utf(reader, limiter)
    return name, _read_payload(reader, limiter, tag)


def read_unnamed(reader: DataReader, limiter: Limiter) -> Node | None:
    """Read a tag, skip a name and read a payload.

    The name bytes are charged to the limiter and skipped without decoding.

    Returns:
        Node, or None if the end tag was read

    Raises:
        MalformedInputError: If the name is not empty and the limiter enforces
            strict empty names
    """
    limiter.read_unsigned(1)
    tag = reader.read_byte()
    if tag == Tag.END:
        return None
    limiter.read_unsigned(2)
    skip = reader.read_unsigned_short()
    if skip != 0 and limiter.strict_empty_names:
        limiter.fail(MalformedInputError, f"Non-empty NBT name. ({skip} bytes)")
    limiter.read_unsigned(skip)
    reader.skip(skip)
    return _read_payload(reader, limiter, tag)


def read_plain(reader: DataReader, limiter: Limiter) -> Node | None:
    """Read a tag and a payload.

    Returns:
        Node, or None if the end tag was read
    """
    limiter.read_unsigned(1)
    tag = reader.read_byte()
    if tag == Tag.END:
        return None
    return _read_payload(reader, limiter, tag)


def write_named(writer: DataWriter, name: str, node: Node | None) -> None:
    """Write a tag, a name and a payload; None writes only the end tag."""
    if node is not None and not isinstance(name, str):
        raise EncodeError(f"NBT name must be str, got {type(name).__name__}")
    writer.write_byte(type_tag(node))
    if node is None:
        return
    writer.write_utf(name)
    node.write(writer)


def write_unnamed(writer: DataWriter, node: Node | None) -> None:
    """Write a tag, an empty name and a payload; None writes only the end tag."""
    writer.write_byte(type_tag(node))
    if node is None:
        return
    writer.write_unsigned_short(0)
    node.write(writer)


def write_plain(writer: DataWriter, node: Node | None) -> None:
    """Write a tag and a payload; None writes only the end tag."""
    writer.write_byte(type_tag(node))
    if node is None:
        return
    node.write(writer)
