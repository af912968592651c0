"""Conversion between node trees and plain Python values.

This module maps node trees to built-in Python types (for inspection, JSON
export and tests) and builds node trees from built-in values.

Mapping:
    ByteNode/ShortNode/IntNode/LongNode -> int
    FloatNode/DoubleNode                -> float
    ByteArrayNode                       -> bytes
    IntArrayNode/LongArrayNode          -> tuple of int
    StringNode                          -> str
    ListNode                            -> list
    MapNode                             -> dict

The reverse mapping picks the narrowest faithful node for each value: bool
becomes a ByteNode, int an IntNode or a LongNode depending on its range,
float a DoubleNode. Tuples are ambiguous and are rejected.
"""

from __future__ import annotations

import base64
from typing import Any

from .exceptions import EncodeError, ListTypeError
from .nodes import (
    ByteArrayNode,
    ByteNode,
    DoubleNode,
    IntArrayNode,
    IntNode,
    ListNode,
    LongArrayNode,
    LongNode,
    MapNode,
    Node,
    NumericNode,
    StringNode,
)

_INT_MIN, _INT_MAX = -(1 << 31), (1 << 31) - 1
_LONG_MIN, _LONG_MAX = -(1 << 63), (1 << 63) - 1


def to_python(node: Node | None) -> Any:
    """Convert a node tree to plain Python values.

    Args:
        node: Root node (None converts to None)

    Returns:
        Built-in value mirroring the tree

    Example:
        >>> to_python(MapNode({"a": IntNode(5), "b": ListNode([StringNode("x")])}))
        {'a': 5, 'b': ['x']}
    """
    if node is None:
        return None
    if isinstance(node, NumericNode):
        return node.value
    if isinstance(node, (ByteArrayNode, IntArrayNode, LongArrayNode, StringNode)):
        return node.value
    if isinstance(node, ListNode):
        return [to_python(item) for item in node]
    if isinstance(node, MapNode):
        return {key: to_python(value) for key, value in node.items()}
    raise EncodeError(f"Cannot convert NBT class: {type(node).__name__}")


def from_python(value: Any) -> Node:
    """Build a node tree from plain Python values.

    Args:
        value: bool, int, float, str, bytes, list or dict (nested freely);
            existing nodes are used as they are

    Returns:
        Root node

    Raises:
        EncodeError: If a value has no node equivalent, an int is outside the
            64-bit range, or a list mixes element types

    Example:
        >>> from_python({"a": 5, "b": ["x"]})
        MapNode({'a': IntNode(5), 'b': ListNode([StringNode('x')])})
    """
    if isinstance(value, Node):
        return value
    if isinstance(value, bool):
        return ByteNode(value)
    if isinstance(value, int):
        if _INT_MIN <= value <= _INT_MAX:
            return IntNode(value)
        if _LONG_MIN <= value <= _LONG_MAX:
            return LongNode(value)
        raise EncodeError(f"Integer {value} does not fit in 64 bits")
    if isinstance(value, float):
        return DoubleNode(value)
    if isinstance(value, str):
        return StringNode(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ByteArrayNode(bytes(value))
    if isinstance(value, list):
        try:
            return ListNode([from_python(item) for item in value])
        except ListTypeError as e:
            raise EncodeError(f"List elements must share one type: {e}") from e
    if isinstance(value, dict):
        result = MapNode()
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodeError(f"Map keys must be str, got {type(key).__name__}")
            result[key] = from_python(item)
        return result
    raise EncodeError(f"Cannot convert {type(value).__name__} to NBT")


def to_json_compatible(node: Node | None) -> Any:
    """Convert a node tree to values the json module can serialize.

    Byte arrays become base64 strings and int/long arrays become lists.
    """
    value = to_python(node)
    return _jsonable(value)


def _jsonable(value: Any) -> Any:
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value
