"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from nbtcodec import IntNode, Limiter, ListNode, MapNode, StringNode


@pytest.fixture
def sample_map() -> MapNode:
    """Small two-entry map used across tests."""
    return MapNode({"a": IntNode(5), "b": StringNode("x")})


@pytest.fixture
def sample_map_bytes() -> bytes:
    """Named encoding of sample_map with an empty root name."""
    return bytes(
        [
            0x0A, 0x00, 0x00,                          # MAP, name ""
            0x03, 0x00, 0x01, 0x61, 0, 0, 0, 5,        # INT "a" = 5
            0x08, 0x00, 0x01, 0x62, 0x00, 0x01, 0x78,  # STRING "b" = "x"
            0x00,                                      # END
        ]
    )


@pytest.fixture
def nested_tree() -> MapNode:
    """Tree mixing every container and array type."""
    root = MapNode()
    root.put_byte("byte", -3)
    root.put_short("short", 1234)
    root.put_long("long", -(1 << 40))
    root.put_float("float", 1.5)
    root.put_double("double", -0.25)
    root.put_byte_array("bytes", b"\x00\x01\xff")
    root.put_int_array("ints", [1, -2, 3])
    root.put_long_array("longs", [1 << 50, -1])
    root.put_list("names", [StringNode("alpha"), StringNode("beta")])
    root.put_list("empty", [])
    child = MapNode()
    child.put_string("inner", "value")
    child.put_list("matrix", [ListNode([IntNode(1)]), ListNode([IntNode(2), IntNode(3)])])
    root.put_map("child", child.value)
    return root


@pytest.fixture
def reference_limiter() -> Limiter:
    """Fresh limiter with the reference protocol budget."""
    return Limiter.reference_protocol()
