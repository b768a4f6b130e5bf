# file: aes256cbc/openssl_cbc.py
"""
OpenSSL-compatible AES-256-CBC encryption and decryption.

Output of encrypt() decrypts with

    openssl enc -d -aes-256-cbc -md md5 -k PASSWORD

and output of `openssl enc -e -aes-256-cbc -md md5 -k PASSWORD` decrypts
with decrypt().
"""

import logging
from typing import Optional, Union

from .block_cipher import cbc_decrypt, cbc_encrypt
from .crypto_errors import BadBlockError
from .framing import HEADER_SIZE, assemble_frame, parse_frame
from .kdf import derive_key_iv
from .padding import BLOCK_SIZE, pad, unpad
from .salt import generate_salt, normalize_salt


logger = logging.getLogger(__name__)


def _password_bytes(password: Union[bytes, str]) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def encrypt(
    data: bytes,
    password: Union[bytes, str],
    salt: Optional[bytes] = None
) -> bytes:
    """
    Encrypt data into a "Salted__" frame.

    Args:
        data: Plaintext (any length, may be empty)
        password: Password bytes; str is encoded as UTF-8
        salt: Optional salt. None or empty draws 8 random bytes; other
              values are zero-padded or truncated to 8 bytes.

    Returns:
        Frame of 16 + N*16 bytes: b"Salted__" || salt || ciphertext

    Raises:
        RandomSourceError: If a random salt cannot be generated
        CipherKeyError: If the cipher rejects the derived key
    """
    # Salt: random when absent, always exactly 8 bytes
    if not salt:
        salt = generate_salt()
    salt = normalize_salt(salt)

    key, iv = derive_key_iv(_password_bytes(password), salt)

    # Header stays in the clear; only the padded body is encrypted
    ciphertext = cbc_encrypt(key, iv, pad(bytes(data)))
    frame = assemble_frame(salt, ciphertext)

    logger.debug(
        "Encrypted %d bytes into %d-byte frame", len(data), len(frame)
    )
    return frame


def decrypt(data: bytes, password: Union[bytes, str]) -> bytes:
    """
    Decrypt a "Salted__" frame.

    Args:
        data: Complete frame (e.g. output of encrypt or `openssl enc -e`)
        password: Password used for encryption; str is encoded as UTF-8

    Returns:
        Recovered plaintext

    Raises:
        BadBlockError: If the frame or its ciphertext has an invalid length,
                       or the pad length byte is out of range
        BadSaltError: If the frame does not start with b"Salted__"
        BadDataError: If the decrypted region cannot be unpadded
        BadPadError: If the padding is inconsistent (wrong password or
                     tampered data)
        CipherKeyError: If the cipher rejects the derived key
    """
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise BadBlockError(
            f"Input too short: {len(data)} bytes (minimum {HEADER_SIZE})"
        )

    salt, ciphertext = parse_frame(data)
    key, iv = derive_key_iv(_password_bytes(password), salt)

    if len(ciphertext) == 0 or len(ciphertext) % BLOCK_SIZE != 0:
        raise BadBlockError(
            f"Ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )

    plaintext = unpad(cbc_decrypt(key, iv, ciphertext))

    logger.debug(
        "Decrypted %d-byte frame into %d bytes", len(data), len(plaintext)
    )
    return plaintext
