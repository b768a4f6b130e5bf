# file: aes256cbc/salt.py
"""
Salt generation and length normalization.
"""

import os
from .crypto_errors import RandomSourceError
from .framing import SALT_SIZE


def generate_salt(size: int = SALT_SIZE) -> bytes:
    """
    Draw a fresh salt from the operating system's CSPRNG.

    Args:
        size: Number of bytes (8 for the frame format)

    Returns:
        Random salt bytes

    Raises:
        RandomSourceError: If the entropy source fails or returns short
    """
    try:
        salt = os.urandom(size)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Random source unavailable: {e}") from e

    if len(salt) != size:
        raise RandomSourceError(
            f"Random source returned {len(salt)} of {size} bytes"
        )

    return salt


def normalize_salt(salt: bytes) -> bytes:
    """
    Force a caller-supplied salt to exactly 8 bytes.

    Short salts are right-padded with zero bytes, long salts are truncated.
    """
    return (bytes(salt) + b"\x00" * SALT_SIZE)[:SALT_SIZE]
