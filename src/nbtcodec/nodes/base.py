"""Node base class and type registry.

Every concrete node class declares its wire tag as the ``TAG`` class variable
and is registered when the class is created. The registry maps tags to
readers for decoding and node classes to tags for encoding.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Optional

from ..exceptions import UnknownTypeError

if TYPE_CHECKING:
    from ..codec.stream import DataReader, DataWriter
    from ..limiter import Limiter


class Tag(enum.IntEnum):
    """One-byte wire discriminators."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    MAP = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


NodeReader = Callable[["DataReader", "Limiter"], Optional["Node"]]

_NODE_CLASSES: dict[int, type[Node]] = {}


class Node(ABC):
    """Base class for all tag tree nodes.

    Subclasses must define ``TAG`` and implement ``write`` and ``read``.
    Nodes are mutable and compare by value, so they are not hashable.
    """

    __slots__ = ()

    TAG: ClassVar[Tag]

    __hash__ = None  # type: ignore[assignment]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register concrete subclasses under their tag."""
        super().__init_subclass__(**kwargs)
        tag = cls.__dict__.get("TAG")
        if tag is None:
            return
        if tag == Tag.END:
            raise TypeError("The end tag cannot be bound to a node class")
        existing = _NODE_CLASSES.get(tag)
        if existing is not None and existing is not cls:
            raise TypeError(
                f"Tag {tag!r} is already registered to {existing.__name__}"
            )
        _NODE_CLASSES[tag] = cls

    @property
    def tag(self) -> Tag:
        return self.TAG

    @abstractmethod
    def write(self, writer: DataWriter) -> None:
        """Write the payload (without tag or name)."""

    @classmethod
    @abstractmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> Node:
        """Read a payload, charging every byte to the limiter."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repr_value()})"

    def _repr_value(self) -> str:
        return repr(getattr(self, "value", ""))


def _read_null(reader: DataReader, limiter: Limiter) -> None:
    return None


def type_tag(node: Node | None) -> int:
    """Return the wire tag for a node, or the end tag for None.

    Raises:
        UnknownTypeError: If the node's class is not registered
    """
    if node is None:
        return Tag.END
    tag = getattr(type(node), "TAG", None)
    if tag is None or _NODE_CLASSES.get(tag) is not type(node):
        raise UnknownTypeError(f"Unknown NBT class: {type(node).__name__}")
    return tag


def reader_for(tag: int, limiter: Limiter | None = None) -> NodeReader:
    """Return the reader for a wire tag.

    Args:
        tag: Tag read from the stream
        limiter: Limiter of the current decode, used for quick exceptions

    Raises:
        UnknownTypeError: If the tag is not registered
    """
    if tag == Tag.END:
        return _read_null
    node_class = _NODE_CLASSES.get(tag)
    if node_class is None:
        if limiter is not None:
            limiter.fail(UnknownTypeError, f"Unknown NBT type. ({tag})")
        raise UnknownTypeError(f"Unknown NBT type. ({tag})")
    return node_class.read


def node_class_for(tag: int) -> type[Node]:
    """Return the node class registered for a tag.

    Raises:
        UnknownTypeError: If the tag is not registered
    """
    try:
        return _NODE_CLASSES[tag]
    except KeyError:
        raise UnknownTypeError(f"Unknown NBT type. ({tag})") from None
