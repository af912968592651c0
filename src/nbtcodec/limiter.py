"""Depth and length limiting for NBT decoding.

A Limiter is charged with every byte a decode pass consumes and with every
level of container nesting, and rejects the input as soon as a budget is
exceeded. Charges happen before the corresponding allocation or recursion, so
a hostile stream claiming a huge array length is rejected without reserving
memory for it.

Limiters are not reusable: create a new one for each decode (or call
``reset()``). The shared ``Limiter.unlimited()`` instance is the exception,
since it keeps no state.

Nesting depth is the Python call stack depth: container readers call their
children's readers directly, one interpreter frame per level. Keep
``max_depth`` comfortably below ``sys.getrecursionlimit()``; the reference
depth of 512 fits the default limit of 1000.
"""

from __future__ import annotations

from typing import NoReturn

from .exceptions import (
    ArithmeticOverflowError,
    DepthLimitError,
    DepthUnderflowError,
    LengthLimitError,
    LimitError,
    NbtError,
    NegativeLengthError,
)

MAX_LONG = (1 << 63) - 1
MAX_INT = (1 << 31) - 1

REFERENCE_MAX_LENGTH = 0x200000
REFERENCE_MAX_DEPTH = 512


class Limiter:
    """Tracks bytes read and nesting depth during one decode pass.

    Example:
        >>> limiter = Limiter(max_length=16, max_depth=2)
        >>> limiter.read_unsigned(10)
        >>> limiter.length
        10
        >>> limiter.read_unsigned(10)
        Traceback (most recent call last):
        ...
        nbtcodec.exceptions.LengthLimitError: Max NBT length reached. (20 > 16)

    Attributes:
        max_length: Maximum number of bytes a decode may consume
        max_depth: Maximum container nesting depth
        strict_empty_names: Reject non-empty names in unnamed reads
        allow_long_arrays: Accept the long array type
        quick_exceptions: Raise shared preallocated exceptions on failure
    """

    __slots__ = (
        "_max_length",
        "_max_depth",
        "_strict_empty_names",
        "_allow_long_arrays",
        "_quick_exceptions",
        "_length",
        "_depth",
    )

    def __init__(
        self,
        max_length: int,
        max_depth: int,
        *,
        strict_empty_names: bool = False,
        allow_long_arrays: bool = True,
        quick_exceptions: bool = False,
    ) -> None:
        self._max_length = max_length
        self._max_depth = max_depth
        self._strict_empty_names = strict_empty_names
        self._allow_long_arrays = allow_long_arrays
        self._quick_exceptions = quick_exceptions
        self._length = 0
        self._depth = 0

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def strict_empty_names(self) -> bool:
        return self._strict_empty_names

    @property
    def allow_long_arrays(self) -> bool:
        return self._allow_long_arrays

    @property
    def quick_exceptions(self) -> bool:
        return self._quick_exceptions

    @property
    def length(self) -> int:
        """Bytes charged so far."""
        return self._length

    @property
    def depth(self) -> int:
        """Current nesting depth."""
        return self._depth

    def fail(self, error_class: type[NbtError], message: str) -> NoReturn:
        """Raise error_class, using its shared instance in quick mode."""
        if self._quick_exceptions:
            raise error_class.quick()
        raise error_class(message)

    def read_signed(self, num_bytes: int) -> None:
        """Charge bytes, rejecting negative amounts.

        Raises:
            NegativeLengthError: If num_bytes is negative
            ArithmeticOverflowError: If the counter would overflow
            LengthLimitError: If the maximum length is exceeded
        """
        if num_bytes < 0:
            self.fail(NegativeLengthError, f"Negative bytes read. ({num_bytes})")
        self.read_unsigned(num_bytes)

    def read_unsigned(self, num_bytes: int) -> None:
        """Charge bytes without checking the sign.

        The counter is only updated when the new total is within bounds; on
        failure the limiter state is left unchanged.

        Raises:
            ArithmeticOverflowError: If the counter would overflow
            LengthLimitError: If the maximum length is exceeded
        """
        length = self._length + num_bytes
        if length > MAX_LONG or length < -MAX_LONG - 1:
            self.fail(
                ArithmeticOverflowError,
                f"NBT length counter overflow. ({self._length} + {num_bytes})",
            )
        if length > self._max_length:
            self.fail(
                LengthLimitError, f"Max NBT length reached. ({length} > {self._max_length})"
            )
        self._length = length

    def push(self) -> None:
        """Enter a container.

        Raises:
            DepthLimitError: If the maximum depth has already been reached
        """
        if self._depth >= self._max_depth:
            self.fail(DepthLimitError, f"Max NBT depth reached. ({self._depth + 1})")
        self._depth += 1

    def pop(self) -> None:
        """Leave a container.

        Raises:
            DepthUnderflowError: If the depth is already zero
        """
        if self._depth <= 0:
            self.fail(DepthUnderflowError, f"Min NBT depth reached. ({self._depth - 1})")
        self._depth -= 1

    def reset(self) -> None:
        """Reset the counters so the limiter can be reused."""
        self._length = 0
        self._depth = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self._length}/{self._max_length}, "
            f"depth={self._depth}/{self._max_depth})"
        )

    @staticmethod
    def unlimited() -> Limiter:
        """Return the shared limiter without limits."""
        return UNLIMITED

    @classmethod
    def reference_protocol(cls, **flags: bool) -> Limiter:
        """Create a limiter matching the reference network protocol limits.

        Args:
            **flags: Policy flags (strict_empty_names, allow_long_arrays,
                quick_exceptions)
        """
        return cls(REFERENCE_MAX_LENGTH, REFERENCE_MAX_DEPTH, **flags)


class _Unlimiter(Limiter):
    """Limiter without limits. Every mutating operation does nothing."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(MAX_LONG, MAX_INT)

    def read_signed(self, num_bytes: int) -> None:
        pass

    def read_unsigned(self, num_bytes: int) -> None:
        pass

    def push(self) -> None:
        pass

    def pop(self) -> None:
        pass

    def reset(self) -> None:
        pass


UNLIMITED: Limiter = _Unlimiter()

__all__ = [
    "Limiter",
    "LimitError",
    "UNLIMITED",
    "REFERENCE_MAX_LENGTH",
    "REFERENCE_MAX_DEPTH",
]
