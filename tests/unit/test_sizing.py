"""Tests for size calculation and tree statistics."""

from __future__ import annotations

import pytest

from nbtcodec import (
    ByteArrayNode,
    ByteNode,
    IntArrayNode,
    IntNode,
    ListNode,
    LongArrayNode,
    MapNode,
    StringNode,
    Tag,
    encode,
)
from nbtcodec.exceptions import UnknownTypeError
from nbtcodec.framing import Framing
from nbtcodec.utils import encoded_size, max_depth, payload_size, tag_counts


class TestPayloadSize:
    """Test payload size calculation."""

    @pytest.mark.parametrize(
        ("node", "size"),
        [
            (ByteNode(1), 1),
            (IntNode(1), 4),
            (ByteArrayNode(b"abc"), 7),
            (IntArrayNode([1, 2, 3]), 16),
            (LongArrayNode([1, 2]), 20),
            (StringNode("é"), 4),
            (ListNode(), 5),
            (ListNode([IntNode(1), IntNode(2)]), 13),
            (MapNode(), 1),
            (MapNode({"a": IntNode(5)}), 9),
        ],
    )
    def test_sizes(self, node: object, size: int) -> None:
        """Test the payload size of each node type."""
        assert payload_size(node) == size  # type: ignore[arg-type]

    def test_unknown_class(self) -> None:
        """Test objects that are not nodes are rejected."""
        with pytest.raises(UnknownTypeError):
            payload_size(object())  # type: ignore[arg-type]


class TestEncodedSize:
    """Test framed size calculation."""

    def test_scenario(self, sample_map: MapNode, sample_map_bytes: bytes) -> None:
        """Test the two-entry map."""
        assert encoded_size(sample_map) == len(sample_map_bytes) == 19

    @pytest.mark.parametrize("framing", list(Framing))
    def test_matches_encode(self, nested_tree: MapNode, framing: Framing) -> None:
        """Test the computed size equals the encoded length for every framing."""
        assert encoded_size(nested_tree, "root", framing) == len(
            encode(nested_tree, "root", framing)
        )

    def test_none(self) -> None:
        """Test a missing root is one end tag byte."""
        assert encoded_size(None) == 1


class TestStatistics:
    """Test tree statistics."""

    def test_tag_counts(self, sample_map: MapNode) -> None:
        """Test counting nodes per type, root included."""
        assert tag_counts(sample_map) == {Tag.MAP: 1, Tag.INT: 1, Tag.STRING: 1}

    def test_tag_counts_nested(self) -> None:
        """Test containers inside containers are counted."""
        root = ListNode([ListNode([IntNode(1), IntNode(2)]), ListNode()])
        assert tag_counts(root) == {Tag.LIST: 3, Tag.INT: 2}

    def test_max_depth(self, nested_tree: MapNode) -> None:
        """Test the container nesting depth."""
        assert max_depth(IntNode(1)) == 0
        assert max_depth(MapNode()) == 1
        # root map -> child map -> matrix list -> inner list
        assert max_depth(nested_tree) == 4

    def test_max_depth_is_iterative(self) -> None:
        """Test very deep trees do not exhaust the call stack."""
        root = ListNode()
        current = root
        for _ in range(5000):
            child = ListNode()
            current.append(child)
            current = child
        assert max_depth(root) == 5001
