"""Tests for list nodes."""

from __future__ import annotations

import pytest

from nbtcodec import (
    ByteNode,
    DoubleNode,
    IntNode,
    Limiter,
    ListNode,
    LongNode,
    MapNode,
    StringNode,
    decode,
    encode,
)
from nbtcodec.codec import DataReader, DataWriter
from nbtcodec.exceptions import (
    DepthLimitError,
    InvalidLengthError,
    ListTypeError,
    NullNodeError,
    TruncatedInputError,
    UnknownTypeError,
)
from nbtcodec.utils import max_depth


def _nested_lists(levels: int) -> bytes:
    """Plain document of `levels` lists, each holding the next one."""
    return b"\x09" + b"\x09\x00\x00\x00\x01" * (levels - 1) + b"\x00\x00\x00\x00\x00"


class TestHomogeneity:
    """Test the single element type rule."""

    def test_first_element_fixes_type(self) -> None:
        """Test the first element decides the element type."""
        values = ListNode()
        assert values.element_type is None
        values.add_int(1)
        assert values.element_type is IntNode

    def test_mismatch_rejected(self) -> None:
        """Test inserting another class raises ListTypeError."""
        values = ListNode([IntNode(1)])
        with pytest.raises(ListTypeError, match="Using StringNode in the NBT list of IntNode"):
            values.append(StringNode("x"))
        assert len(values) == 1

    def test_no_implicit_widening(self) -> None:
        """Test numeric classes are not interchangeable."""
        values = ListNode([IntNode(1)])
        with pytest.raises(ListTypeError):
            values.append(LongNode(2))

    def test_constructor_validates(self) -> None:
        """Test a mixed initial list is rejected."""
        with pytest.raises(ListTypeError):
            ListNode([IntNode(1), ByteNode(1)])

    def test_none_rejected(self) -> None:
        """Test None cannot be stored."""
        values = ListNode()
        with pytest.raises(NullNodeError):
            values.append(None)  # type: ignore[arg-type]
        with pytest.raises(NullNodeError):
            ListNode([IntNode(1), None])  # type: ignore[list-item]

    def test_non_node_rejected(self) -> None:
        """Test plain values are not nodes."""
        with pytest.raises(TypeError):
            ListNode().append(5)  # type: ignore[arg-type]

    def test_setitem_and_insert(self) -> None:
        """Test replacement and insertion are validated."""
        values = ListNode([IntNode(1), IntNode(2)])
        values[0] = IntNode(10)
        values.insert(1, IntNode(11))
        assert [item.value for item in values] == [10, 11, 2]  # type: ignore[attr-defined]
        with pytest.raises(ListTypeError):
            values[1] = StringNode("x")
        with pytest.raises(ListTypeError):
            values[0:1] = [StringNode("x")]

    def test_extend_is_all_or_nothing(self) -> None:
        """Test extend() validates every node before adding any."""
        values = ListNode([IntNode(1)])
        with pytest.raises(ListTypeError):
            values.extend([IntNode(2), StringNode("x")])
        assert len(values) == 1

    def test_empty_list_accepts_any_type_again(self) -> None:
        """Test clearing a list releases the element type."""
        values = ListNode([IntNode(1)])
        del values[0]
        values.add_string("now strings")
        assert values.element_type is StringNode

    def test_add_helpers(self) -> None:
        """Test the typed add helpers."""
        values = ListNode()
        values.add_double(0.1)
        assert values[0] == DoubleNode(0.1)

        booleans = ListNode()
        booleans.add_boolean(True)
        booleans.add_byte(-1)
        assert booleans.element_type is ByteNode

        nested = ListNode()
        nested.add_map({"k": IntNode(1)})
        nested.add_map({})
        assert nested.element_type is MapNode

    def test_moves_list_in(self) -> None:
        """Test the backing list is taken over without copying."""
        backing = [IntNode(1)]
        values = ListNode(backing)
        assert values.value is backing
        assert ListNode(values).value is backing


class TestEquality:
    """Test list equality."""

    def test_order_sensitive(self) -> None:
        """Test lists compare element by element, in order."""
        assert ListNode([IntNode(1), IntNode(2)]) == ListNode([IntNode(1), IntNode(2)])
        assert ListNode([IntNode(1), IntNode(2)]) != ListNode([IntNode(2), IntNode(1)])

    def test_empty_lists_equal(self) -> None:
        """Test empty lists are equal regardless of history."""
        used = ListNode([StringNode("x")])
        used.clear()
        assert used == ListNode()


class TestWire:
    """Test list encoding and decoding."""

    def test_payload(self) -> None:
        """Test element tag, count and payloads."""
        writer = DataWriter()
        ListNode([IntNode(1), IntNode(2)]).write(writer)
        assert writer.getvalue() == b"\x03\x00\x00\x00\x02\x00\x00\x00\x01\x00\x00\x00\x02"

    def test_empty_payload_uses_end_tag(self) -> None:
        """Test an empty list is written with the end tag as element type."""
        writer = DataWriter()
        ListNode().write(writer)
        assert writer.getvalue() == b"\x00\x00\x00\x00\x00"

    def test_read(self) -> None:
        """Test reading charges tag, count and elements and balances depth."""
        limiter = Limiter(100, 4)
        data = b"\x01\x00\x00\x00\x03\x01\x02\x03"
        node = ListNode.read(DataReader.from_bytes(data), limiter)
        assert node == ListNode([ByteNode(1), ByteNode(2), ByteNode(3)])
        assert limiter.length == len(data)
        assert limiter.depth == 0

    def test_zero_count_with_element_type(self) -> None:
        """Test a zero count yields an empty list whatever the element type."""
        limiter = Limiter(100, 4)
        node = ListNode.read(DataReader.from_bytes(b"\x08\x00\x00\x00\x00"), limiter)
        assert len(node) == 0
        assert node.element_type is None
        assert limiter.depth == 0

    def test_end_tag_with_zero_count(self) -> None:
        """Test the end tag with count 0 is the canonical empty list."""
        limiter = Limiter(100, 4)
        node = ListNode.read(DataReader.from_bytes(b"\x00\x00\x00\x00\x00"), limiter)
        assert node == ListNode()
        assert limiter.depth == 0

    def test_end_tag_with_nonzero_count(self) -> None:
        """Test the end tag cannot carry elements."""
        with pytest.raises(InvalidLengthError, match="type: 0; length: 3"):
            ListNode.read(DataReader.from_bytes(b"\x00\x00\x00\x00\x03"), Limiter(100, 4))

    def test_negative_count(self) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(InvalidLengthError):
            ListNode.read(DataReader.from_bytes(b"\x03\xff\xff\xff\xff"), Limiter(100, 4))

    def test_unknown_element_type(self) -> None:
        """Test an unknown element tag is rejected."""
        with pytest.raises(UnknownTypeError, match=r"\(99\)"):
            ListNode.read(DataReader.from_bytes(b"\x63\x00\x00\x00\x01"), Limiter(100, 4))

    def test_truncated_elements(self) -> None:
        """Test a list shorter than its count runs out of data."""
        with pytest.raises(TruncatedInputError):
            ListNode.read(DataReader.from_bytes(b"\x01\x00\x00\x00\x03\x01"), Limiter(100, 4))

    def test_roundtrip_nested(self) -> None:
        """Test lists of lists survive a round trip."""
        root = ListNode([ListNode([IntNode(1)]), ListNode()])
        assert decode(encode(root, framing="plain"), framing="plain") == root


class TestDepth:
    """Test nesting limits."""

    def test_reference_depth_accepted(self) -> None:
        """Test 512 nested lists decode under the reference limiter."""
        node = decode(_nested_lists(512), Limiter.reference_protocol(), framing="plain")
        assert isinstance(node, ListNode)
        assert max_depth(node) == 512

    def test_600_levels_rejected(self) -> None:
        """Test the 513th nested list fails the depth check."""
        with pytest.raises(DepthLimitError, match=r"\(513\)"):
            decode(_nested_lists(600), Limiter.reference_protocol(), framing="plain")

    def test_custom_depth(self) -> None:
        """Test a small depth budget."""
        limiter = Limiter(1000, 2)
        with pytest.raises(DepthLimitError):
            decode(_nested_lists(3), limiter, framing="plain")
        assert decode(_nested_lists(2), Limiter(1000, 2), framing="plain") is not None
