# file: aes256cbc/padding.py
"""
PKCS#7 padding with block size 16.

Unpadding validates before stripping and distinguishes three failures:
a region of the wrong size (BadDataError), an impossible pad length
(BadBlockError) and incoherent pad bytes (BadPadError).
"""

from .crypto_errors import BadBlockError, BadDataError, BadPadError


BLOCK_SIZE = 16


def pad(data: bytes) -> bytes:
    """
    Append 1..16 bytes, each equal to the pad length.

    Block aligned input still receives a full block of padding.
    """
    pad_len = BLOCK_SIZE - (len(data) % BLOCK_SIZE)
    return data + bytes([pad_len]) * pad_len


def unpad(data: bytes) -> bytes:
    """
    Validate and strip PKCS#7 padding.

    Args:
        data: Decrypted, block aligned data

    Returns:
        Data without its padding

    Raises:
        BadDataError: If data is empty or not a multiple of 16 bytes
        BadBlockError: If the last byte is 0 or greater than 16
        BadPadError: If any of the last pad bytes differs from the pad length
    """
    data_len = len(data)
    if data_len == 0 or data_len % BLOCK_SIZE != 0:
        raise BadDataError(f"Cannot unpad {data_len} bytes")

    pad_len = data[-1]
    if pad_len == 0 or pad_len > BLOCK_SIZE:
        raise BadBlockError(f"Invalid pad length: {pad_len}")

    if data[-pad_len:] != bytes([pad_len]) * pad_len:
        raise BadPadError("Inconsistent padding bytes")

    return data[:-pad_len]
