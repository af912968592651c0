"""Exception hierarchy for nbtcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NbtError for easy catching of any nbtcodec-specific error.

Limiter violations share the LimitError base so callers can reject every
budget failure with one ``except`` clause. Each class also exposes ``quick()``,
which returns a shared, preallocated instance used by limiters running in
quick-exceptions mode.
"""

from __future__ import annotations

from typing import TypeVar

E = TypeVar("E", bound="NbtError")


class NbtError(Exception):
    """Base exception for all nbtcodec errors."""

    quick_message = "NBT error. (Quick)"

    @classmethod
    def quick(cls: type[E]) -> E:
        """Return the shared stackless instance of this exception class.

        The instance is created once per class and carries a fixed message.
        Its traceback is cleared every time it is handed out.
        """
        instance = cls.__dict__.get("_quick_instance")
        if instance is None:
            instance = cls(cls.quick_message)
            cls._quick_instance = instance
        instance.__traceback__ = None
        instance.__cause__ = None
        instance.__context__ = None
        return instance


class EncodeError(NbtError):
    """Raised when a node tree cannot be encoded.

    Examples:
        - Node class is not registered in the type registry
        - String payload longer than 65535 encoded bytes
        - Name is not a string
    """

    quick_message = "NBT encode error. (Quick)"


class DecodeError(NbtError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Unknown type tag
        - Negative or inconsistent lengths
        - Limiter budget exceeded
    """

    quick_message = "NBT decode error. (Quick)"


class NegativeLengthError(DecodeError, ValueError):
    """Raised when a negative amount of bytes is charged to a limiter."""

    quick_message = "Negative bytes read. (Quick)"


class InvalidLengthError(DecodeError, ValueError):
    """Raised when a list declares an impossible element count.

    Examples:
        - Negative count
        - Nonzero count paired with the end tag
    """

    quick_message = "Invalid NBT length. (Quick)"


class UnknownTypeError(DecodeError, ValueError):
    """Raised for a type tag outside the registered set, or a disabled one."""

    quick_message = "Unknown NBT type. (Quick)"


class MalformedInputError(DecodeError, ValueError):
    """Raised when the stream is structurally well-formed but invalid.

    Examples:
        - Invalid modified UTF-8 or leftover bytes in a string payload
        - Non-empty name while strict empty names are enforced
        - Trailing bytes after a strictly decoded document
    """

    quick_message = "Malformed NBT input. (Quick)"


class TruncatedInputError(DecodeError, EOFError):
    """Raised when the byte source ends before a value is complete."""

    quick_message = "Unexpected end of NBT data. (Quick)"


class LimitError(DecodeError):
    """Base exception for limiter budget violations."""

    quick_message = "NBT limit reached. (Quick)"


class LengthLimitError(LimitError):
    """Raised when the total amount of read bytes exceeds the maximum length."""

    quick_message = "Max NBT length reached. (Quick)"


class DepthLimitError(LimitError):
    """Raised when nesting exceeds the maximum depth."""

    quick_message = "Max NBT depth reached. (Quick)"


class DepthUnderflowError(LimitError):
    """Raised when depth is popped below zero."""

    quick_message = "Min NBT depth reached. (Quick)"


class ArithmeticOverflowError(LimitError, OverflowError):
    """Raised when the read byte counter would leave the signed 64-bit range."""

    quick_message = "NBT length counter overflow. (Quick)"


class NullNodeError(NbtError, TypeError):
    """Raised when None is stored where a node is required.

    Examples:
        - End tag decoded where a list element was expected
        - None appended to a list or stored as a map value
    """

    quick_message = "Null NBT. (Quick)"


class ListTypeError(NbtError, TypeError):
    """Raised when a node of another class is inserted into a homogeneous list."""

    quick_message = "Mismatched NBT list element. (Quick)"
