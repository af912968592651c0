"""Big-endian binary stream reading and writing.

This module provides the sequential byte-level reader and writer the node
codecs are written against. All multi-byte values are big-endian.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO

from ..exceptions import EncodeError, TruncatedInputError
from .mutf8 import decode_mutf8, encode_mutf8

_BYTE = struct.Struct(">b")
_SHORT = struct.Struct(">h")
_USHORT = struct.Struct(">H")
_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")
_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")

MAX_UTF_LENGTH = 0xFFFF


class DataReader:
    """Reads big-endian primitives from a binary stream.

    Example:
        >>> reader = DataReader.from_bytes(b"\\x00\\x2a\\xff")
        >>> reader.read_short()
        42
        >>> reader.read_byte()
        -1
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Initialize a reader over the given binary stream.

        Args:
            stream: Readable binary file object
        """
        self._stream = stream

    @classmethod
    def from_bytes(cls, data: bytes) -> DataReader:
        """Create a reader over an in-memory buffer."""
        return cls(io.BytesIO(data))

    def read_fully(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the stream

        Raises:
            TruncatedInputError: If the stream ends first
        """
        if num_bytes <= 0:
            return b""
        data = self._stream.read(num_bytes)
        if data is None or len(data) < num_bytes:
            got = 0 if data is None else len(data)
            # Some raw streams return short reads before EOF
            chunks = [data or b""]
            while got < num_bytes:
                more = self._stream.read(num_bytes - got)
                if not more:
                    raise TruncatedInputError(
                        f"Unexpected end of data: need {num_bytes} bytes, got {got}"
                    )
                chunks.append(more)
                got += len(more)
            data = b"".join(chunks)
        return data

    def skip(self, num_bytes: int) -> None:
        """Skip num_bytes bytes, failing if the stream ends first."""
        self.read_fully(num_bytes)

    def read_byte(self) -> int:
        return _BYTE.unpack(self.read_fully(1))[0]

    def read_unsigned_byte(self) -> int:
        return self.read_fully(1)[0]

    def read_short(self) -> int:
        return _SHORT.unpack(self.read_fully(2))[0]

    def read_unsigned_short(self) -> int:
        return _USHORT.unpack(self.read_fully(2))[0]

    def read_int(self) -> int:
        return _INT.unpack(self.read_fully(4))[0]

    def read_long(self) -> int:
        return _LONG.unpack(self.read_fully(8))[0]

    def read_float(self) -> float:
        return _FLOAT.unpack(self.read_fully(4))[0]

    def read_double(self) -> float:
        return _DOUBLE.unpack(self.read_fully(8))[0]

    def read_ints(self, count: int) -> tuple[int, ...]:
        """Read count big-endian int32 values."""
        return struct.unpack(f">{count}i", self.read_fully(count * 4))

    def read_longs(self, count: int) -> tuple[int, ...]:
        """Read count big-endian int64 values."""
        return struct.unpack(f">{count}q", self.read_fully(count * 8))

    def read_utf(self) -> str:
        """Read a uint16-length-prefixed modified UTF-8 string."""
        length = self.read_unsigned_short()
        return decode_mutf8(self.read_fully(length))

    def at_eof(self) -> bool:
        """Return True if no more bytes can be read.

        Only meaningful for seekable streams; a non-seekable stream reports False.
        """
        if not self._stream.seekable():
            return False
        position = self._stream.tell()
        at_end = not self._stream.read(1)
        self._stream.seek(position)
        return at_end


class DataWriter:
    """Writes big-endian primitives to a binary stream.

    Example:
        >>> writer = DataWriter()
        >>> writer.write_short(42)
        >>> writer.write_byte(-1)
        >>> writer.getvalue()
        b'\\x00*\\xff'
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        """Initialize a writer.

        Args:
            stream: Writable binary file object; an in-memory buffer if omitted
        """
        self._stream = stream if stream is not None else io.BytesIO()

    def getvalue(self) -> bytes:
        """Return everything written so far (in-memory writers only)."""
        if not isinstance(self._stream, io.BytesIO):
            raise TypeError("getvalue() requires an in-memory writer")
        return self._stream.getvalue()

    def write(self, data: bytes) -> None:
        self._stream.write(data)

    def write_byte(self, value: int) -> None:
        """Write one byte; accepts both signed and unsigned byte values."""
        self._stream.write(bytes((value & 0xFF,)))

    def write_short(self, value: int) -> None:
        self._stream.write(_SHORT.pack(value))

    def write_unsigned_short(self, value: int) -> None:
        self._stream.write(_USHORT.pack(value))

    def write_int(self, value: int) -> None:
        self._stream.write(_INT.pack(value))

    def write_long(self, value: int) -> None:
        self._stream.write(_LONG.pack(value))

    def write_float(self, value: float) -> None:
        self._stream.write(_FLOAT.pack(value))

    def write_double(self, value: float) -> None:
        self._stream.write(_DOUBLE.pack(value))

    def write_ints(self, values: tuple[int, ...]) -> None:
        self._stream.write(struct.pack(f">{len(values)}i", *values))

    def write_longs(self, values: tuple[int, ...]) -> None:
        self._stream.write(struct.pack(f">{len(values)}q", *values))

    def write_utf(self, value: str) -> None:
        """Write a uint16-length-prefixed modified UTF-8 string.

        Raises:
            EncodeError: If the encoded string is longer than 65535 bytes
        """
        encoded = encode_mutf8(value)
        if len(encoded) > MAX_UTF_LENGTH:
            raise EncodeError(f"Encoded string too long: {len(encoded)} bytes")
        self._stream.write(_USHORT.pack(len(encoded)))
        self._stream.write(encoded)
