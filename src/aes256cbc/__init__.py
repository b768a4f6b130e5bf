# file: aes256cbc/__init__.py
"""
aes256cbc: OpenSSL-compatible AES-256-CBC encryption

Encrypts and decrypts byte payloads in the "Salted__" frame format written by
`openssl enc -aes-256-cbc -md md5 -k PASSWORD`, with keys derived by
OpenSSL's legacy MD5 EVP_BytesToKey scheme.

Public API:
    - encrypt(data, password, salt=None) -> bytes
    - decrypt(data, password) -> bytes
    - base64_encrypt(data, password, salt=None, line_length=0) -> bytes
    - base64_decrypt(data, password) -> bytes
"""

from .openssl_cbc import encrypt, decrypt
from .encoding import (
    base64_encrypt,
    base64_decrypt,
    encode_base64,
    decode_base64,
)
from .kdf import KeyMaterial, bytes_to_key, derive_key_iv
from .framing import build_header, assemble_frame, parse_frame
from .padding import pad, unpad
from .salt import generate_salt, normalize_salt
from .config import load_config
from .crypto_errors import (
    ErrorKind,
    CryptoError,
    BadBlockError,
    BadSaltError,
    BadDataError,
    BadPadError,
    RandomSourceError,
    CipherKeyError,
    EncodingError,
)


__all__ = [
    'encrypt',
    'decrypt',
    'base64_encrypt',
    'base64_decrypt',
    'encode_base64',
    'decode_base64',
    'KeyMaterial',
    'bytes_to_key',
    'derive_key_iv',
    'build_header',
    'assemble_frame',
    'parse_frame',
    'pad',
    'unpad',
    'generate_salt',
    'normalize_salt',
    'load_config',
    'ErrorKind',
    'CryptoError',
    'BadBlockError',
    'BadSaltError',
    'BadDataError',
    'BadPadError',
    'RandomSourceError',
    'CipherKeyError',
    'EncodingError',
]


__version__ = '1.0.0'
