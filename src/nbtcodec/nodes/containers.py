"""Container nodes: homogeneous lists and keyed maps.

Both containers recurse into their children on read and write. Every read
pushes the limiter depth before touching children and pops it afterwards, so
the depth budget bounds the Python call stack. Readers call child readers
directly (one frame per nesting level).

Constructing a container from a ``list`` or ``dict`` moves that collection
into the node without copying it; passing another container of the same kind
shares its backing collection. Do not keep mutating a collection after handing
it to a node.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping, MutableSequence
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ..exceptions import InvalidLengthError, ListTypeError, NullNodeError
from .arrays import (
    ByteArrayNode,
    IntArrayNode,
    LongArrayNode,
    StringNode,
    read_limited_utf,
)
from .base import Node, Tag, reader_for, type_tag
from .numeric import (
    ByteNode,
    DoubleNode,
    FloatNode,
    IntNode,
    LongNode,
    NumericNode,
    ShortNode,
)

if TYPE_CHECKING:
    from ..codec.stream import DataReader, DataWriter
    from ..limiter import Limiter

N = TypeVar("N", bound=Node)


def _require_node(node: Any, where: str) -> Node:
    if node is None:
        raise NullNodeError(f"Null NBT {where}")
    if not isinstance(node, Node):
        raise TypeError(f"Expected an NBT node {where}, got {type(node).__name__}")
    return node


class ListNode(Node, MutableSequence[Node]):
    """Ordered, homogeneous sequence of nodes.

    The class of the first element fixes the element type; inserting a node of
    any other class raises ListTypeError. An empty list accepts any node.

    Example:
        >>> values = ListNode()
        >>> values.add_int(1)
        >>> values.add_int(2)
        >>> values.element_type is IntNode
        True
        >>> values.add_string("three")
        Traceback (most recent call last):
        ...
        nbtcodec.exceptions.ListTypeError: Using StringNode in the NBT list of IntNode
    """

    __slots__ = ("_value",)

    TAG = Tag.LIST

    def __init__(self, value: Iterable[Node] | None = None) -> None:
        self.value = value  # type: ignore[assignment]

    @property
    def value(self) -> list[Node]:
        return self._value

    @value.setter
    def value(self, value: Iterable[Node] | None) -> None:
        if value is None:
            items: list[Node] = []
        elif isinstance(value, ListNode):
            items = value._value
        elif isinstance(value, list):
            items = value
        else:
            items = list(value)
        if items:
            first = type(_require_node(items[0], "in list"))
            for index, item in enumerate(items):
                _require_node(item, f"at: {index}")
                if type(item) is not first:
                    raise ListTypeError(
                        f"Using {type(item).__name__} in the NBT list of {first.__name__}"
                    )
        self._value = items

    @property
    def element_type(self) -> type[Node] | None:
        """Class of the elements, or None while the list is empty."""
        return type(self._value[0]) if self._value else None

    def _validate(self, node: Any) -> Node:
        node = _require_node(node, "in list")
        this_type = self.element_type
        if this_type is not None and type(node) is not this_type:
            raise ListTypeError(
                f"Using {type(node).__name__} in the NBT list of {this_type.__name__}"
            )
        return node

    # MutableSequence protocol

    @overload
    def __getitem__(self, index: int) -> Node: ...

    @overload
    def __getitem__(self, index: slice) -> list[Node]: ...

    def __getitem__(self, index: int | slice) -> Node | list[Node]:
        return self._value[index]

    def __setitem__(self, index: Any, node: Any) -> None:
        if isinstance(index, slice):
            nodes = [self._validate(item) for item in node]
            self._value[index] = nodes
        else:
            self._value[index] = self._validate(node)

    def __delitem__(self, index: int | slice) -> None:
        del self._value[index]

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._value)

    def __contains__(self, node: object) -> bool:
        return node in self._value

    def insert(self, index: int, node: Node) -> None:
        self._value.insert(index, self._validate(node))

    def extend(self, nodes: Iterable[Node]) -> None:
        """Append all nodes, validating every one before any is added."""
        nodes = list(nodes)
        if not nodes:
            return
        expected = self.element_type or type(_require_node(nodes[0], "in list"))
        for node in nodes:
            _require_node(node, "in list")
            if type(node) is not expected:
                raise ListTypeError(
                    f"Using {type(node).__name__} in the NBT list of {expected.__name__}"
                )
        self._value.extend(nodes)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ListNode):
            return NotImplemented
        return self._value == other._value

    # Convenience adders

    def add_boolean(self, value: bool) -> None:
        self.append(ByteNode(value))

    def add_byte(self, value: int) -> None:
        self.append(ByteNode(value))

    def add_short(self, value: int) -> None:
        self.append(ShortNode(value))

    def add_int(self, value: int) -> None:
        self.append(IntNode(value))

    def add_long(self, value: int) -> None:
        self.append(LongNode(value))

    def add_float(self, value: float) -> None:
        self.append(FloatNode(value))

    def add_double(self, value: float) -> None:
        self.append(DoubleNode(value))

    def add_byte_array(self, value: bytes) -> None:
        self.append(ByteArrayNode(value))

    def add_string(self, value: str) -> None:
        self.append(StringNode(value))

    def add_list(self, value: Iterable[Node]) -> None:
        self.append(ListNode(value))

    def add_map(self, value: dict[str, Node]) -> None:
        self.append(MapNode(value))

    def add_int_array(self, value: Iterable[int]) -> None:
        self.append(IntArrayNode(value))

    def add_long_array(self, value: Iterable[int]) -> None:
        self.append(LongArrayNode(value))

    # Wire format

    def write(self, writer: DataWriter) -> None:
        writer.write_byte(type_tag(self._value[0]) if self._value else Tag.END)
        writer.write_int(len(self._value))
        for node in self._value:
            node.write(writer)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> ListNode:
        """Read a list payload.

        Raises:
            InvalidLengthError: If the count is negative, or nonzero with the end tag
            UnknownTypeError: If the element tag is unknown
            NullNodeError: If an element reader produced no node
        """
        limiter.push()
        limiter.read_unsigned(1)
        tag = reader.read_byte()
        limiter.read_unsigned(4)
        length = reader.read_int()
        if tag == Tag.END:
            if length != 0:
                limiter.fail(
                    InvalidLengthError,
                    f"Invalid NBT length. (type: {tag}; length: {length})",
                )
            limiter.pop()
            return cls()
        if length == 0:
            limiter.pop()
            return cls()
        if length < 0:
            limiter.fail(InvalidLengthError, f"Invalid NBT length. ({length})")
        read = reader_for(tag, limiter)
        items: list[Node] = []
        for index in range(length):
            node = read(reader, limiter)
            if node is None:
                raise NullNodeError(f"Null NBT at: {index}")
            items.append(node)
        limiter.pop()
        list_node = cls.__new__(cls)
        list_node._value = items
        return list_node


class MapNode(Node, MutableMapping[str, Node]):
    """Insertion-ordered mapping of names to nodes.

    Keys are strings and values are nodes; None is never stored. Equality
    ignores entry order.

    Example:
        >>> compound = MapNode()
        >>> compound.put_int("a", 5)
        >>> compound.put_string("b", "x")
        >>> compound.get_int("a")
        5
        >>> compound.get_string("missing") is None
        True
    """

    __slots__ = ("_value",)

    TAG = Tag.MAP

    def __init__(self, value: dict[str, Node] | None = None) -> None:
        self.value = value  # type: ignore[assignment]

    @property
    def value(self) -> dict[str, Node]:
        return self._value

    @value.setter
    def value(self, value: dict[str, Node] | None) -> None:
        if value is None:
            entries: dict[str, Node] = {}
        elif isinstance(value, MapNode):
            entries = value._value
        elif isinstance(value, dict):
            entries = value
        else:
            entries = dict(value)
        for key, node in entries.items():
            self._check_key(key)
            _require_node(node, f"for key {key!r}")
        self._value = entries

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"NBT map keys must be str, got {type(key).__name__}")

    # MutableMapping protocol

    def __getitem__(self, key: str) -> Node:
        return self._value[key]

    def __setitem__(self, key: str, node: Node) -> None:
        self._check_key(key)
        self._value[key] = _require_node(node, f"for key {key!r}")

    def __delitem__(self, key: str) -> None:
        del self._value[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __contains__(self, key: object) -> bool:
        return key in self._value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MapNode):
            return NotImplemented
        return self._value == other._value

    # Typed getters

    def _get_numeric(
        self,
        key: str,
        strict_type: type[NumericNode],
        method: str,
        default: Any,
        strict: bool,
    ) -> Any:
        node = self._value.get(key)
        if isinstance(node, strict_type if strict else NumericNode):
            return getattr(node, method)()
        return default

    def get_boolean(self, key: str, default: bool | None = None, strict: bool = False) -> bool | None:
        """Get a boolean; strict mode only accepts byte nodes."""
        return self._get_numeric(key, ByteNode, "as_bool", default, strict)

    def get_byte(self, key: str, default: int | None = None, strict: bool = False) -> int | None:
        return self._get_numeric(key, ByteNode, "as_byte", default, strict)

    def get_short(self, key: str, default: int | None = None, strict: bool = False) -> int | None:
        return self._get_numeric(key, ShortNode, "as_short", default, strict)

    def get_int(self, key: str, default: int | None = None, strict: bool = False) -> int | None:
        return self._get_numeric(key, IntNode, "as_int", default, strict)

    def get_long(self, key: str, default: int | None = None, strict: bool = False) -> int | None:
        return self._get_numeric(key, LongNode, "as_long", default, strict)

    def get_float(
        self, key: str, default: float | None = None, strict: bool = False
    ) -> float | None:
        return self._get_numeric(key, FloatNode, "as_float", default, strict)

    def get_double(
        self, key: str, default: float | None = None, strict: bool = False
    ) -> float | None:
        return self._get_numeric(key, DoubleNode, "as_double", default, strict)

    def _get_typed(self, key: str, node_type: type[N]) -> N | None:
        node = self._value.get(key)
        return node if isinstance(node, node_type) else None

    def get_byte_array(self, key: str) -> bytes | None:
        node = self._get_typed(key, ByteArrayNode)
        return None if node is None else node.value

    def get_string(self, key: str) -> str | None:
        node = self._get_typed(key, StringNode)
        return None if node is None else node.value

    def get_int_array(self, key: str) -> tuple[int, ...] | None:
        node = self._get_typed(key, IntArrayNode)
        return None if node is None else node.value

    def get_long_array(self, key: str) -> tuple[int, ...] | None:
        node = self._get_typed(key, LongArrayNode)
        return None if node is None else node.value

    def get_map(self, key: str) -> MapNode | None:
        return self._get_typed(key, MapNode)

    def get_list(
        self,
        key: str,
        node_type: type[Node] | None = None,
        empty_as_none: bool = False,
    ) -> ListNode | None:
        """Get a list, optionally requiring an element type.

        Args:
            key: Target key
            node_type: Required element class, or None for any
            empty_as_none: Return None instead of an empty list (only when
                node_type is given)
        """
        node = self._get_typed(key, ListNode)
        if node is None or node_type is None:
            return node
        element_type = node.element_type
        if element_type is None:
            return None if empty_as_none else node
        return node if element_type is node_type else None

    # Typed putters

    def _put(self, key: str, node: Node) -> Node | None:
        previous = self._value.get(key)
        self[key] = node
        return previous

    def put_boolean(self, key: str, value: bool) -> Node | None:
        return self._put(key, ByteNode(value))

    def put_byte(self, key: str, value: int) -> Node | None:
        return self._put(key, ByteNode(value))

    def put_short(self, key: str, value: int) -> Node | None:
        return self._put(key, ShortNode(value))

    def put_int(self, key: str, value: int) -> Node | None:
        return self._put(key, IntNode(value))

    def put_long(self, key: str, value: int) -> Node | None:
        return self._put(key, LongNode(value))

    def put_float(self, key: str, value: float) -> Node | None:
        return self._put(key, FloatNode(value))

    def put_double(self, key: str, value: float) -> Node | None:
        return self._put(key, DoubleNode(value))

    def put_byte_array(self, key: str, value: bytes) -> Node | None:
        return self._put(key, ByteArrayNode(value))

    def put_string(self, key: str, value: str) -> Node | None:
        return self._put(key, StringNode(value))

    def put_list(self, key: str, value: Iterable[Node]) -> Node | None:
        return self._put(key, ListNode(value))

    def put_map(self, key: str, value: dict[str, Node]) -> Node | None:
        return self._put(key, MapNode(value))

    def put_int_array(self, key: str, value: Iterable[int]) -> Node | None:
        return self._put(key, IntArrayNode(value))

    def put_long_array(self, key: str, value: Iterable[int]) -> Node | None:
        return self._put(key, LongArrayNode(value))

    # Wire format

    def write(self, writer: DataWriter) -> None:
        """Write every entry as tag, name and payload, then the end tag."""
        for name, node in self._value.items():
            writer.write_byte(type_tag(node))
            writer.write_utf(name)
            node.write(writer)
        writer.write_byte(Tag.END)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> MapNode:
        """Read named entries until the end tag.

        A stream that never reaches the end tag runs out of data
        (TruncatedInputError) or out of budget (LimitError).
        """
        limiter.push()
        entries: dict[str, Node] = {}
        while True:
            limiter.read_unsigned(1)
            tag = reader.read_byte()
            if tag == Tag.END:
                break
            name = read_limited_utf(reader, limiter)
            node = reader_for(tag, limiter)(reader, limiter)
            if node is None:
                raise NullNodeError(f"NBT of non-zero type is null: {name!r}")
            entries[name] = node
        limiter.pop()
        map_node = cls.__new__(cls)
        map_node._value = entries
        return map_node
