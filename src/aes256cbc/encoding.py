# file: aes256cbc/encoding.py
"""
Base64 convenience wrappers, matching `openssl enc -a`.
"""

import base64
import binascii
import re
from typing import Optional, Union

from .crypto_errors import EncodingError
from .openssl_cbc import decrypt, encrypt


OPENSSL_LINE_LENGTH = 64

_WHITESPACE = re.compile(rb"\s+")


def encode_base64(data: bytes, line_length: int = 0) -> bytes:
    """
    Standard base64 with padding.

    Args:
        data: Raw bytes
        line_length: Wrap width; 0 disables wrapping. With wrapping every
                     line, including the last, ends in a newline as
                     OpenSSL writes it.

    Returns:
        ASCII base64 bytes
    """
    encoded = base64.b64encode(data)
    if line_length <= 0 or not encoded:
        return encoded

    lines = [
        encoded[i:i + line_length]
        for i in range(0, len(encoded), line_length)
    ]
    return b"\n".join(lines) + b"\n"


def decode_base64(data: Union[bytes, str]) -> bytes:
    """
    Decode base64, ignoring any whitespace (wrapped lines included).

    Raises:
        EncodingError: If the input is not valid base64
    """
    if isinstance(data, str):
        try:
            data = data.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Non-ASCII base64 input: {e}") from e

    compact = _WHITESPACE.sub(b"", bytes(data))
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as e:
        raise EncodingError(f"Invalid base64 input: {e}") from e


def base64_encrypt(
    data: bytes,
    password: Union[bytes, str],
    salt: Optional[bytes] = None,
    line_length: int = 0
) -> bytes:
    """Encrypt, then base64 encode the frame."""
    return encode_base64(encrypt(data, password, salt), line_length=line_length)


def base64_decrypt(data: Union[bytes, str], password: Union[bytes, str]) -> bytes:
    """Base64 decode, then decrypt the frame."""
    return decrypt(decode_base64(data), password)
