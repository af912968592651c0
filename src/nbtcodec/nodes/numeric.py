"""Fixed-width numeric nodes.

Integral nodes hold a Python int range-checked against their wire width.
Floating point nodes hold a Python float; FloatNode values are rounded to
IEEE-754 binary32 on assignment.

All numeric nodes convert to every other numeric width using two's complement
wrapping for integer narrowing and truncate-and-saturate semantics for
floating point to integer conversion (NaN converts to 0).
"""

from __future__ import annotations

import math
import operator
import struct
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from .base import Node, Tag

if TYPE_CHECKING:
    from ..codec.stream import DataReader, DataWriter
    from ..limiter import Limiter

_F32 = struct.Struct(">f")


def wrap_signed(value: int, bits: int) -> int:
    """Narrow an int to a signed two's complement width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def float_to_integral(value: float, bits: int) -> int:
    """Convert a float to a signed integer width, truncating and saturating."""
    if math.isnan(value):
        return 0
    high = (1 << (bits - 1)) - 1
    low = -(1 << (bits - 1))
    if value >= high:
        return high
    if value <= low:
        return low
    return int(value)


def to_float32(value: float) -> float:
    """Round a float to the nearest binary32 value."""
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def int_to_float32(value: int) -> float:
    """Round an integer to the nearest binary32 value in one step.

    Rounds half to even on the integer itself, so no intermediate double
    rounding takes place.

    Example:
        >>> int_to_float32(2**60 + 2**36 + 1) == 2.0**60 + 2.0**37
        True
    """
    magnitude = abs(value)
    shift = magnitude.bit_length() - 24
    if shift > 0:
        quotient, remainder = divmod(magnitude, 1 << shift)
        half = 1 << (shift - 1)
        if remainder > half or (remainder == half and quotient & 1):
            quotient += 1
        magnitude = quotient << shift
    return float(-magnitude if value < 0 else magnitude)


def _same_float(a: float, b: float) -> bool:
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


class NumericNode(Node):
    """Base class for fixed-width scalar nodes."""

    __slots__ = ("_value",)

    WIDTH: ClassVar[int]

    @abstractmethod
    def as_int(self) -> int: ...

    @abstractmethod
    def as_long(self) -> int: ...

    @abstractmethod
    def as_float(self) -> float: ...

    @abstractmethod
    def as_double(self) -> float: ...

    def as_bool(self) -> bool:
        return self._value != 0

    def as_byte(self) -> int:
        return wrap_signed(self.as_int(), 8)

    def as_short(self) -> int:
        return wrap_signed(self.as_int(), 16)

    def __int__(self) -> int:
        return self.as_long()

    def __float__(self) -> float:
        return self.as_double()


class IntegralNode(NumericNode):
    """Signed integer node of a fixed bit width."""

    __slots__ = ()

    BITS: ClassVar[int]

    def __init__(self, value: int = 0) -> None:
        self.value = value

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        value = operator.index(value)
        low = -(1 << (self.BITS - 1))
        high = (1 << (self.BITS - 1)) - 1
        if not low <= value <= high:
            raise ValueError(
                f"{type(self).__name__} value {value} out of range [{low}, {high}]"
            )
        self._value = value

    def as_int(self) -> int:
        return wrap_signed(self._value, 32)

    def as_long(self) -> int:
        return self._value

    def as_float(self) -> float:
        return int_to_float32(self._value)

    def as_double(self) -> float:
        return float(self._value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]


class ByteNode(IntegralNode):
    """Signed 8-bit integer. Also used for booleans."""

    __slots__ = ()

    TAG = Tag.BYTE
    WIDTH = 1
    BITS = 8

    def __init__(self, value: int | bool = 0) -> None:
        super().__init__(int(value) if isinstance(value, bool) else value)

    def write(self, writer: DataWriter) -> None:
        writer.write_byte(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> ByteNode:
        limiter.read_unsigned(1)
        return cls(reader.read_byte())


class ShortNode(IntegralNode):
    """Signed 16-bit integer."""

    __slots__ = ()

    TAG = Tag.SHORT
    WIDTH = 2
    BITS = 16

    def write(self, writer: DataWriter) -> None:
        writer.write_short(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> ShortNode:
        limiter.read_unsigned(2)
        return cls(reader.read_short())


class IntNode(IntegralNode):
    """Signed 32-bit integer."""

    __slots__ = ()

    TAG = Tag.INT
    WIDTH = 4
    BITS = 32

    def write(self, writer: DataWriter) -> None:
        writer.write_int(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> IntNode:
        limiter.read_unsigned(4)
        return cls(reader.read_int())


class LongNode(IntegralNode):
    """Signed 64-bit integer."""

    __slots__ = ()

    TAG = Tag.LONG
    WIDTH = 8
    BITS = 64

    def write(self, writer: DataWriter) -> None:
        writer.write_long(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> LongNode:
        limiter.read_unsigned(8)
        return cls(reader.read_long())


class FloatingNode(NumericNode):
    """IEEE-754 floating point node."""

    __slots__ = ()

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = self._coerce(float(value))

    @staticmethod
    def _coerce(value: float) -> float:
        return value

    def as_int(self) -> int:
        return float_to_integral(self._value, 32)

    def as_long(self) -> int:
        return float_to_integral(self._value, 64)

    def as_float(self) -> float:
        return to_float32(self._value)

    def as_double(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return _same_float(self._value, other._value)  # type: ignore[attr-defined]


class FloatNode(FloatingNode):
    """32-bit IEEE-754 float."""

    __slots__ = ()

    TAG = Tag.FLOAT
    WIDTH = 4

    _coerce = staticmethod(to_float32)

    def write(self, writer: DataWriter) -> None:
        writer.write_float(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> FloatNode:
        limiter.read_unsigned(4)
        return cls(reader.read_float())


class DoubleNode(FloatingNode):
    """64-bit IEEE-754 double."""

    __slots__ = ()

    TAG = Tag.DOUBLE
    WIDTH = 8

    def write(self, writer: DataWriter) -> None:
        writer.write_double(self._value)

    @classmethod
    def read(cls, reader: DataReader, limiter: Limiter) -> DoubleNode:
        limiter.read_unsigned(8)
        return cls(reader.read_double())
