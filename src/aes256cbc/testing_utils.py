# file: aes256cbc/testing_utils.py
"""
Testing utilities for the AES-256-CBC frame format.

Provides deterministic tampering helpers for robustness tests.
Used only in test/evaluation contexts.
"""

import random
from typing import Optional

from .framing import HEADER_SIZE


def flip_bit(data: bytes, bit_index: int) -> bytes:
    """
    Return a copy of data with a single bit inverted.

    Example:
        >>> flip_bit(b'\\x00', 0)
        b'\\x80'
    """
    if not 0 <= bit_index < len(data) * 8:
        raise ValueError(f"bit_index {bit_index} out of range for {len(data)} bytes")

    corrupted = bytearray(data)
    corrupted[bit_index // 8] ^= 0x80 >> (bit_index % 8)
    return bytes(corrupted)


def corrupt_ciphertext(frame: bytes, seed: Optional[int] = None) -> bytes:
    """
    Flip one random bit in the last ciphertext block of a frame.

    Damaging the last block scrambles the decrypted padding, which is what
    a tampered or truncated transfer looks like to decrypt().

    Args:
        frame: Complete frame (header + at least one block)
        seed: Random seed for reproducibility (optional)

    Returns:
        Frame with the header intact and one body bit flipped
    """
    if len(frame) < HEADER_SIZE + 16:
        raise ValueError("Frame has no ciphertext block to corrupt")

    rng = random.Random(seed)
    first_bit = (len(frame) - 16) * 8
    return flip_bit(frame, rng.randrange(first_bit, len(frame) * 8))


def replace_magic(frame: bytes, magic: bytes = b"Unsalted") -> bytes:
    """Return the frame with its 8-byte magic replaced."""
    if len(magic) != 8:
        raise ValueError("Replacement magic must be 8 bytes")
    return magic + frame[8:]
