"""Tag tree node types.

Importing this package registers every node class in the type registry.
"""

from __future__ import annotations

from .arrays import (
    EMPTY_BYTES,
    EMPTY_INTS,
    EMPTY_LONGS,
    ByteArrayNode,
    IntArrayNode,
    LongArrayNode,
    StringNode,
    read_limited_utf,
)
from .base import Node, Tag, node_class_for, reader_for, type_tag
from .containers import ListNode, MapNode
from .numeric import (
    ByteNode,
    DoubleNode,
    FloatingNode,
    FloatNode,
    IntegralNode,
    IntNode,
    LongNode,
    NumericNode,
    ShortNode,
)

__all__ = [
    # Base and registry
    "Node",
    "Tag",
    "type_tag",
    "reader_for",
    "node_class_for",
    # Scalars
    "NumericNode",
    "IntegralNode",
    "FloatingNode",
    "ByteNode",
    "ShortNode",
    "IntNode",
    "LongNode",
    "FloatNode",
    "DoubleNode",
    # Arrays and strings
    "ByteArrayNode",
    "IntArrayNode",
    "LongArrayNode",
    "StringNode",
    "read_limited_utf",
    "EMPTY_BYTES",
    "EMPTY_INTS",
    "EMPTY_LONGS",
    # Containers
    "ListNode",
    "MapNode",
]
