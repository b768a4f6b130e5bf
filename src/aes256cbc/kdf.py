# file: aes256cbc/kdf.py
"""
Key derivation compatible with OpenSSL's EVP_BytesToKey (MD5, count=1).

This is what `openssl enc -md md5 -k PASSWORD` uses to turn a password and
an 8-byte salt into the AES key and CBC IV. It is intentionally weak and
exists only for interoperability.
"""

import hashlib
from typing import NamedTuple


KEY_SIZE = 32
IV_SIZE = 16


class KeyMaterial(NamedTuple):
    """AES-256 key and CBC initialization vector."""
    key: bytes
    iv: bytes


def bytes_to_key(password: bytes, salt: bytes, key_len: int, iv_len: int) -> KeyMaterial:
    """
    Stretch password and salt into key_len + iv_len bytes.

    Each round digests the previous round's digest followed by the password
    and the salt:

        D_1 = MD5(password || salt)
        D_i = MD5(D_{i-1} || password || salt)

    The digests are concatenated until enough bytes exist.

    Args:
        password: Raw password bytes (any length, may be empty)
        salt: Salt bytes (8 for the OpenSSL frame format)
        key_len: Number of key bytes to produce
        iv_len: Number of IV bytes to produce

    Returns:
        KeyMaterial(key, iv)
    """
    total = key_len + iv_len
    out = b""
    prev = b""

    while len(out) < total:
        prev = hashlib.md5(prev + password + salt).digest()
        out += prev

    return KeyMaterial(key=out[:key_len], iv=out[key_len:total])


def derive_key_iv(password: bytes, salt: bytes) -> KeyMaterial:
    """
    Derive the 32-byte AES-256 key and 16-byte IV for a frame.

    Args:
        password: Raw password bytes
        salt: 8-byte salt taken from (or written to) the frame header

    Returns:
        KeyMaterial with a 32-byte key and 16-byte IV
    """
    return bytes_to_key(password, salt, KEY_SIZE, IV_SIZE)
