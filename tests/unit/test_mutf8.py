"""Tests for modified UTF-8 encoding."""

from __future__ import annotations

import pytest

from nbtcodec.codec import decode_mutf8, encode_mutf8, encoded_length
from nbtcodec.exceptions import DecodeError, MalformedInputError


class TestEncode:
    """Test modified UTF-8 encoding."""

    def test_ascii(self) -> None:
        """Test ASCII text is unchanged."""
        assert encode_mutf8("hello") == b"hello"

    def test_nul_is_two_bytes(self) -> None:
        """Test U+0000 never produces a zero byte."""
        assert encode_mutf8("a\x00b") == b"a\xc0\x80b"

    def test_two_and_three_byte_forms(self) -> None:
        """Test BMP characters use the standard multi-byte forms."""
        assert encode_mutf8("é") == "é".encode("utf-8")
        assert encode_mutf8("€") == "€".encode("utf-8")

    def test_supplementary_as_surrogate_pair(self) -> None:
        """Test characters outside the BMP become two 3-byte surrogates."""
        encoded = encode_mutf8("\U0001F600")
        assert encoded == b"\xed\xa0\xbd\xed\xb8\x80"
        assert len(encoded) == 6

    @pytest.mark.parametrize("text", ["", "abc", "a\x00", "é€", "\U0001F600x"])
    def test_encoded_length_matches(self, text: str) -> None:
        """Test encoded_length() agrees with the encoder."""
        assert encoded_length(text) == len(encode_mutf8(text))


class TestDecode:
    """Test modified UTF-8 decoding."""

    @pytest.mark.parametrize("text", ["", "plain", "nul\x00inside", "ümlaut", "€uro", "\U0001F600"])
    def test_roundtrip(self, text: str) -> None:
        """Test decode(encode(s)) == s."""
        assert decode_mutf8(encode_mutf8(text)) == text

    def test_raw_zero_byte_tolerated(self) -> None:
        """Test a raw zero byte decodes to U+0000."""
        assert decode_mutf8(b"a\x00b") == "a\x00b"

    def test_lone_surrogate_kept(self) -> None:
        """Test an unpaired surrogate survives decoding."""
        assert decode_mutf8(b"\xed\xa0\x80") == "\ud800"

    def test_partial_trailing_character(self) -> None:
        """Test a truncated multi-byte sequence is reported as leftover bytes."""
        with pytest.raises(MalformedInputError, match="Leftover bytes"):
            decode_mutf8(b"ab\xe2\x82")

    def test_bad_continuation(self) -> None:
        """Test an invalid continuation byte is rejected."""
        with pytest.raises(MalformedInputError, match="Malformed input"):
            decode_mutf8(b"\xc3\x41")

    def test_bad_lead_byte(self) -> None:
        """Test a stray continuation or 4-byte lead byte is rejected."""
        with pytest.raises(MalformedInputError):
            decode_mutf8(b"\x80")
        with pytest.raises(MalformedInputError):
            decode_mutf8(b"\xf0\x9f\x98\x80")

    def test_malformed_is_decode_error(self) -> None:
        """Test malformed input is catchable as DecodeError and ValueError."""
        with pytest.raises(DecodeError):
            decode_mutf8(b"\xff")
        with pytest.raises(ValueError):
            decode_mutf8(b"\xff")
