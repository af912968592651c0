"""Length-prefixed array and string nodes.

Every reader charges the declared length to the limiter before reading the
elements, so an attacker-supplied length is checked against the budget before
any memory is reserved for it. A zero length short-circuits to a shared empty
value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..codec.mutf8 import decode_mutf8
from ..exceptions import NegativeLengthError, UnknownTypeError
from .base import Node, Tag

if TYPE_CHECKING:
    from ..codec.stream import DataReader, DataWriter
    from ..limiter import Limiter

EMPTY_BYTES = b""
EMPTY_INTS: tuple[int, ...] = ()
EMPTY_LONGS: tuple[int, ...] = ()

_INT_RANGE = (-(1 << 31), (1 << 31) - 1)
_LONG_RANGE = (-(1 << 63), (1 << 63) - 1)


def read_limited_utf(reader: DataReader, limiter: Limiter) -> str:
    """Read a length-prefixed modified UTF-8 string under a limiter.

    Both the length prefix and the payload are charged before they are read.

    Raises:
        MalformedInputError: If the payload is not valid modified UTF-8
    """
    limiter.read_unsigned(2)
    length = reader.read_unsigned_short()
    limiter.read_unsigned(length)
    if length == 0:
        return ""
    return decode_mutf8(reader.read_fully(length))


def _read_length(reader: DataReader, limiter: Limiter) -> int:
    limiter.read_unsigned(4)
    length = reader.read_int()
    if length < 0:
        limiter.fail(NegativeLengthError, f"Negative array length. ({length})")
    return length


def _checked_tuple(values: Iterable[int], bounds: tuple[int, int], kind: str) -> tuple[int, ...]:
    result = tuple(values)
    low, high = bounds
    for item in result:
        if not low <= item <= high:
            raise ValueError(f"{kind} element {item} out of range [{low}, {high}]")
    return result


class ByteArrayNode(Node):
    """Array of bytes, held as ``bytes``."""

    __slots__ = ("_value",)

    TAG = Tag.BYTE_ARRAY

    def __init__(self, value: bytes | bytearray = EMPTY_BYTES) -> None:
        self.value = value

    @property
    def value(self) -> bytes:
        return self._value

    @value.setter
    def value(self, value: bytes | bytearray) -> None:
        self._value = value if isinstance(value, bytes) else bytes(value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ByteArrayNode):
            return NotImplemented
        return self._value == other._value

    def write(self, writer: DataWriter) -> None:
        writer.write_int(len(self._value))
        writer.write(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> ByteArrayNode:
        length = _read_length(reader, limiter)
        if length == 0:
            return cls(EMPTY_BYTES)
        limiter.read_signed(length)
        return cls(reader.read_fully(length))


class IntArrayNode(Node):
    """Array of signed 32-bit integers, held as a tuple."""

    __slots__ = ("_value",)

    TAG = Tag.INT_ARRAY

    def __init__(self, value: Iterable[int] = EMPTY_INTS) -> None:
        self.value = value  # type: ignore[assignment]

    @property
    def value(self) -> tuple[int, ...]:
        return self._value

    @value.setter
    def value(self, value: Iterable[int]) -> None:
        self._value = _checked_tuple(value, _INT_RANGE, "Int array")

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, IntArrayNode):
            return NotImplemented
        return self._value == other._value

    def write(self, writer: DataWriter) -> None:
        writer.write_int(len(self._value))
        writer.write_ints(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> IntArrayNode:
        length = _read_length(reader, limiter)
        if length == 0:
            return cls(EMPTY_INTS)
        limiter.read_signed(length * 4)
        return cls(reader.read_ints(length))


class LongArrayNode(Node):
    """Array of signed 64-bit integers, held as a tuple.

    Readers reject this type entirely when the limiter disallows long arrays,
    exactly as if the tag were unknown.
    """

    __slots__ = ("_value",)

    TAG = Tag.LONG_ARRAY

    def __init__(self, value: Iterable[int] = EMPTY_LONGS) -> None:
        self.value = value  # type: ignore[assignment]

    @property
    def value(self) -> tuple[int, ...]:
        return self._value

    @value.setter
    def value(self, value: Iterable[int]) -> None:
        self._value = _checked_tuple(value, _LONG_RANGE, "Long array")

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LongArrayNode):
            return NotImplemented
        return self._value == other._value

    def write(self, writer: DataWriter) -> None:
        writer.write_int(len(self._value))
        writer.write_longs(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> LongArrayNode:
        if not limiter.allow_long_arrays:
            limiter.fail(UnknownTypeError, f"Unknown NBT type. ({int(Tag.LONG_ARRAY)})")
        length = _read_length(reader, limiter)
        if length == 0:
            return cls(EMPTY_LONGS)
        limiter.read_signed(length * 8)
        return cls(reader.read_longs(length))


class StringNode(Node):
    """Text node, written as modified UTF-8 with a uint16 length prefix."""

    __slots__ = ("_value",)

    TAG = Tag.STRING

    def __init__(self, value: str = "") -> None:
        self.value = value

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"StringNode value must be str, got {type(value).__name__}")
        self._value = value

    def __str__(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, StringNode):
            return NotImplemented
        return self._value == other._value

    def write(self, writer: DataWriter) -> None:
        writer.write_utf(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> StringNode:
        return cls(read_limited_utf(reader, limiter))
