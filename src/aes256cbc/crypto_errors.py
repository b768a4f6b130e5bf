# file: aes256cbc/crypto_errors.py
"""
Cryptographic error types for the OpenSSL-compatible AES-256-CBC pipeline.

All exceptions inherit from CryptoError for unified handling. Each class
carries a ``kind`` tag from the closed ErrorKind enum so callers can switch
on a value instead of on the class.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds."""
    BAD_BLOCK = "bad block"
    BAD_SALT = "bad salt"
    BAD_DATA = "bad data"
    BAD_PAD = "bad pad"
    RANDOM_SOURCE = "random source"
    CIPHER_KEY = "cipher key"
    ENCODING = "encoding"


class CryptoError(Exception):
    """Base exception for all encryption/decryption failures."""

    kind: ErrorKind = None

    def __init__(self, message: str = None):
        if message is None:
            message = self.kind.value if self.kind is not None else ""
        super().__init__(message)


class BadBlockError(CryptoError):
    """Raised when input is shorter than a header or not block aligned."""
    kind = ErrorKind.BAD_BLOCK


class BadSaltError(CryptoError):
    """Raised when the frame does not start with the 'Salted__' magic."""
    kind = ErrorKind.BAD_SALT


class BadDataError(CryptoError):
    """Raised when the region to unpad is empty or not block aligned."""
    kind = ErrorKind.BAD_DATA


class BadPadError(CryptoError):
    """
    Raised when the PKCS#7 pad bytes are inconsistent.

    Almost always means a wrong password; tampered data looks the same.
    """
    kind = ErrorKind.BAD_PAD


class RandomSourceError(CryptoError):
    """Raised when the OS entropy source cannot supply a salt."""
    kind = ErrorKind.RANDOM_SOURCE


class CipherKeyError(CryptoError):
    """Raised when the block cipher rejects the derived key or IV."""
    kind = ErrorKind.CIPHER_KEY


class EncodingError(CryptoError):
    """Raised when base64 input cannot be decoded."""
    kind = ErrorKind.ENCODING
