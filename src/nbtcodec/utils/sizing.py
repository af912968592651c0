"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of node trees
without actually encoding them.
"""

from __future__ import annotations

from ..codec.mutf8 import encoded_length
from ..exceptions import UnknownTypeError
from ..framing import Framing
from ..nodes import (
    ByteArrayNode,
    IntArrayNode,
    ListNode,
    LongArrayNode,
    MapNode,
    Node,
    NumericNode,
    StringNode,
    Tag,
)


def payload_size(node: Node) -> int:
    """Calculate the size of a node's payload in bytes (no tag, no name).

    Args:
        node: Node to measure

    Returns:
        Payload size in bytes

    Raises:
        UnknownTypeError: If the node class is not a known variant

    Example:
        >>> payload_size(IntNode(5))
        4
        >>> payload_size(IntArrayNode([1, 2, 3]))
        16
    """
    if isinstance(node, NumericNode):
        return node.WIDTH
    if isinstance(node, ByteArrayNode):
        return 4 + len(node.value)
    if isinstance(node, IntArrayNode):
        return 4 + 4 * len(node.value)
    if isinstance(node, LongArrayNode):
        return 4 + 8 * len(node.value)
    if isinstance(node, StringNode):
        return 2 + encoded_length(node.value)
    if isinstance(node, ListNode):
        total = 1 + 4
        for item in node:
            total += payload_size(item)
        return total
    if isinstance(node, MapNode):
        # tag + name per entry, then the end tag
        total = 1
        for name, item in node.items():
            total += 1 + 2 + encoded_length(name) + payload_size(item)
        return total
    raise UnknownTypeError(f"Unknown NBT class: {type(node).__name__}")


def encoded_size(node: Node | None, name: str = "", framing: Framing | str = Framing.NAMED) -> int:
    """Calculate the size of a framed document in bytes.

    Args:
        node: Root node, or None for a lone end tag
        name: Root name (named framing only)
        framing: Framing of the top-level node

    Returns:
        Size in bytes, equal to ``len(encode(node, name, framing))``

    Example:
        >>> root = MapNode({"a": IntNode(5)})
        >>> encoded_size(root)
        12
    """
    if node is None:
        return 1
    framing = Framing(framing)
    header = 1
    if framing is Framing.NAMED:
        header += 2 + encoded_length(name)
    elif framing is Framing.UNNAMED:
        header += 2
    return header + payload_size(node)


def tag_counts(node: Node) -> dict[Tag, int]:
    """Count the nodes of each type in a tree, the root included."""
    counts: dict[Tag, int] = {}
    stack = [node]
    while stack:
        current = stack.pop()
        counts[current.TAG] = counts.get(current.TAG, 0) + 1
        if isinstance(current, ListNode):
            stack.extend(current)
        elif isinstance(current, MapNode):
            stack.extend(current.values())
    return counts


def max_depth(node: Node) -> int:
    """Return the container nesting depth of a tree.

    This is the depth a limiter reaches while decoding the tree: 0 for a
    scalar, 1 for a flat list or map.
    """
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, (ListNode, MapNode)):
            depth += 1
            children = current if isinstance(current, ListNode) else current.values()
            stack.extend((child, depth) for child in children)
        deepest = max(deepest, depth)
    return deepest
