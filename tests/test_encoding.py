# file: tests/test_encoding.py

"""
Tests for the base64 wrappers.
"""

import pytest

from aes256cbc import (
    base64_encrypt,
    base64_decrypt,
    encode_base64,
    decode_base64,
    BadPadError,
    BadBlockError,
    EncodingError,
)


# printf hello | openssl enc -e -aes-256-cbc -md md5 -a -k 123
OPENSSL_HELLO_B64 = b"U2FsdGVkX1+sERyae2G0OPGx39S6RcPsa33MAZy+QcQ=\n"

# Wrapped at 64 columns by `openssl enc -a -k 'correct horse'`
OPENSSL_FOX_B64 = (
    b"U2FsdGVkX18VHkJu8/ma0ne+3jmTstlIXY2ZAh72vn59seZhimRRxLJGNBGtSYL3\n"
    b"PAS+h7Z5SxTyA1HzSKmiIi6DOL2/FTyAHmdOd++u1yqHiPGy7aHF1fdjrxV+vwU1\n"
    b"vOQ3q5LPX6/WunqQJtzWFw==\n"
)
FOX = (
    b"The quick brown fox jumps over the lazy dog. "
    b"The quick brown fox jumps over the lazy dog."
)

LONG_TEXT = b"\n".join(
    f"{i}/5 ".encode() + b"abcdefghijklmnopqrstuvwzy" * 4
    for i in range(1, 6)
)


class TestBase64Codec:

    def test_encode_unwrapped(self):
        assert encode_base64(b"hello") == b"aGVsbG8="

    def test_encode_wrapped(self):
        encoded = encode_base64(b"\x00" * 100, line_length=64)
        lines = encoded.split(b"\n")
        assert len(lines[0]) == 64
        assert encoded.endswith(b"\n")
        assert lines[-1] == b""

    def test_encode_empty_wrapped(self):
        assert encode_base64(b"", line_length=64) == b""

    def test_decode_ignores_whitespace(self):
        assert decode_base64(b"aGVs\nbG8=\r\n ") == b"hello"

    def test_decode_str(self):
        assert decode_base64("aGVsbG8=") == b"hello"

    def test_decode_invalid(self):
        with pytest.raises(EncodingError):
            decode_base64(b"aGVsbG8*")

    def test_decode_bad_length(self):
        with pytest.raises(EncodingError):
            decode_base64(b"aGVsbG8")

    def test_decode_non_ascii_str(self):
        with pytest.raises(EncodingError):
            decode_base64("aGVsbG8é")


class TestBase64Encryption:

    def test_roundtrip_long_text(self):
        encoded = base64_encrypt(LONG_TEXT, b"123")
        assert base64_decrypt(encoded, b"123") == LONG_TEXT

    def test_roundtrip_without_newlines(self):
        """Wrapped output still decrypts once newlines are stripped."""
        encoded = base64_encrypt(LONG_TEXT, b"123", line_length=64)
        assert b"\n" in encoded
        assert base64_decrypt(encoded.replace(b"\n", b""), b"123") == LONG_TEXT

    def test_openssl_hello(self):
        assert base64_decrypt(OPENSSL_HELLO_B64, b"123") == b"hello"

    def test_openssl_wrapped(self):
        assert base64_decrypt(OPENSSL_FOX_B64, "correct horse") == FOX

    def test_matches_openssl_output(self):
        encoded = base64_encrypt(b"hello", b"123", salt=bytes.fromhex("ac111c9a7b61b438"), line_length=64)
        assert encoded == OPENSSL_HELLO_B64

    def test_wrong_password(self):
        with pytest.raises((BadPadError, BadBlockError)):
            base64_decrypt(OPENSSL_HELLO_B64, b"124")

    def test_invalid_base64_before_decrypt(self):
        with pytest.raises(EncodingError):
            base64_decrypt(b"not base64!", b"123")
