# file: aes256cbc/framing.py
"""
Frame assembly and parsing for OpenSSL "Salted__" ciphertext.
"""

from typing import Tuple
from .crypto_errors import BadBlockError, BadSaltError


MAGIC = b"Salted__"
SALT_SIZE = 8
HEADER_SIZE = len(MAGIC) + SALT_SIZE


def build_header(salt: bytes) -> bytes:
    """
    Build the 16-byte frame header.

    Args:
        salt: Exactly 8 salt bytes

    Returns:
        b"Salted__" followed by the salt

    Raises:
        ValueError: If salt is not exactly 8 bytes
    """
    if len(salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes, got {len(salt)}")

    return MAGIC + salt


def assemble_frame(salt: bytes, ciphertext: bytes) -> bytes:
    """
    Assemble an encrypted frame from its components.

    Frame structure (16 + N*16 bytes):
        [magic:8 "Salted__"][salt:8][ciphertext:N*16]

    Args:
        salt: 8-byte salt
        ciphertext: AES-256-CBC output (block aligned)

    Returns:
        Complete frame as produced by `openssl enc -e`
    """
    return build_header(salt) + ciphertext


def parse_frame(data: bytes) -> Tuple[bytes, bytes]:
    """
    Split a frame into salt and ciphertext region.

    The ciphertext region is returned untouched; its length is checked by
    the caller.

    Args:
        data: Complete frame

    Returns:
        Tuple of (salt, ciphertext)

    Raises:
        BadBlockError: If data is shorter than the 16-byte header
        BadSaltError: If the first 8 bytes are not b"Salted__"
    """
    if len(data) < HEADER_SIZE:
        raise BadBlockError(
            f"Frame too short: {len(data)} bytes (minimum {HEADER_SIZE})"
        )

    if data[:len(MAGIC)] != MAGIC:
        raise BadSaltError("Missing 'Salted__' header")

    salt = data[len(MAGIC):HEADER_SIZE]
    ciphertext = data[HEADER_SIZE:]

    return salt, ciphertext
