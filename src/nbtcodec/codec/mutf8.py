"""Modified UTF-8 encoding.

Strings on the wire use the Java DataOutput flavour of UTF-8:
- U+0000 is written as the two bytes C0 80, so payloads never contain a zero byte
- Characters outside the BMP are written as a UTF-16 surrogate pair, each
  surrogate encoded separately as a three byte sequence
"""

from __future__ import annotations

from ..exceptions import MalformedInputError


def _utf16_units(value: str) -> list[int]:
    """Split a string into UTF-16 code units."""
    units: list[int] = []
    for char in value:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            units.append(0xD800 | (code >> 10))
            units.append(0xDC00 | (code & 0x3FF))
        else:
            units.append(code)
    return units


def encoded_length(value: str) -> int:
    """Return the number of bytes encode_mutf8(value) produces."""
    length = 0
    for unit in _utf16_units(value):
        if 0x0001 <= unit <= 0x007F:
            length += 1
        elif unit <= 0x07FF:
            length += 2
        else:
            length += 3
    return length


def encode_mutf8(value: str) -> bytes:
    """Encode a string as modified UTF-8 (without the length prefix)."""
    if value.isascii() and "\x00" not in value:
        return value.encode("ascii")

    out = bytearray()
    for unit in _utf16_units(value):
        if 0x0001 <= unit <= 0x007F:
            out.append(unit)
        elif unit <= 0x07FF:
            out.append(0xC0 | ((unit >> 6) & 0x1F))
            out.append(0x80 | (unit & 0x3F))
        else:
            out.append(0xE0 | ((unit >> 12) & 0x0F))
            out.append(0x80 | ((unit >> 6) & 0x3F))
            out.append(0x80 | (unit & 0x3F))
    return bytes(out)


def decode_mutf8(data: bytes) -> str:
    """Decode a modified UTF-8 payload.

    Args:
        data: Exactly the payload bytes (without the length prefix)

    Returns:
        Decoded string; surrogate pairs are joined, lone surrogates are kept

    Raises:
        MalformedInputError: On an invalid byte or a partial trailing character
    """
    if data.isascii():
        return data.decode("ascii")

    units = bytearray()
    position = 0
    length = len(data)
    while position < length:
        first = data[position]
        if first < 0x80:
            # Raw zero bytes are tolerated on read
            code = first
            position += 1
        elif first >> 5 == 0b110:
            if position + 2 > length:
                raise MalformedInputError(
                    f"Leftover bytes: partial character at end ({length - position})"
                )
            second = data[position + 1]
            if second & 0xC0 != 0x80:
                raise MalformedInputError(f"Malformed input around byte {position + 1}")
            code = ((first & 0x1F) << 6) | (second & 0x3F)
            position += 2
        elif first >> 4 == 0b1110:
            if position + 3 > length:
                raise MalformedInputError(
                    f"Leftover bytes: partial character at end ({length - position})"
                )
            second = data[position + 1]
            third = data[position + 2]
            if second & 0xC0 != 0x80 or third & 0xC0 != 0x80:
                raise MalformedInputError(f"Malformed input around byte {position + 1}")
            code = ((first & 0x0F) << 12) | ((second & 0x3F) << 6) | (third & 0x3F)
            position += 3
        else:
            raise MalformedInputError(f"Malformed input around byte {position}")
        units.append(code >> 8)
        units.append(code & 0xFF)

    return units.decode("utf-16-be", "surrogatepass")
