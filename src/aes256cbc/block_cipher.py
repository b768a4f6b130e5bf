# file: aes256cbc/block_cipher.py
"""
AES-256 in CBC mode using the `cryptography` library.

No padding is applied here; callers pass block aligned data.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from .crypto_errors import CipherKeyError


def _new_cipher(key: bytes, iv: bytes) -> Cipher:
    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    except ValueError as e:
        raise CipherKeyError(f"Cipher rejected key material: {e}") from e


def cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """
    Encrypt block aligned data with AES-CBC.

    Args:
        key: 32-byte AES-256 key
        iv: 16-byte initialization vector
        data: Padded plaintext (multiple of 16 bytes)

    Returns:
        Ciphertext (same length as data)

    Raises:
        CipherKeyError: If the key or IV has an unexpected size
    """
    encryptor = _new_cipher(key, iv).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def cbc_decrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """
    Decrypt block aligned data with AES-CBC.

    Args:
        key: 32-byte AES-256 key
        iv: 16-byte initialization vector (same as encryption)
        data: Ciphertext (multiple of 16 bytes)

    Returns:
        Padded plaintext

    Raises:
        CipherKeyError: If the key or IV has an unexpected size
    """
    decryptor = _new_cipher(key, iv).decryptor()
    return decryptor.update(data) + decryptor.finalize()
