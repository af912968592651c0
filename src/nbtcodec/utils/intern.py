"""String interning for node trees."""

from __future__ import annotations

import sys
from typing import Callable, TypeVar

from ..nodes import ListNode, MapNode, Node, StringNode

N = TypeVar("N", bound=Node)


def intern_strings(node: N, interner: Callable[[str], str] = sys.intern) -> N:
    """Intern string payloads and map keys in a tree, in place.

    Args:
        node: Root of the tree (None is returned unchanged)
        interner: Function returning the canonical instance of a string

    Returns:
        The same node
    """
    if isinstance(node, StringNode):
        node.value = interner(node.value)
    elif isinstance(node, MapNode):
        entries = node.value
        # Rebuilt in place so the dict holds the interned key objects in order
        interned = {
            interner(key): intern_strings(value, interner) for key, value in entries.items()
        }
        entries.clear()
        entries.update(interned)
    elif isinstance(node, ListNode):
        for item in node:
            intern_strings(item, interner)
    return node
