"""
Digest functions

Both hashes are SHA-256 truncated to the first 32 hex characters (128 bits):

- bhash: over the UTF-8 bytes of a key string (a private key is hashed to get
  its public code)
- shash: over a raw byte buffer (stable content hash)
"""

import hashlib

from muid.config import DIGEST_LENGTH
from muid.errors import InvalidArgumentError

HEX_DIGITS = frozenset("0123456789abcdef")


def is_hex(s) -> bool:
    """True for a non-empty string of lowercase hex digits."""
    return isinstance(s, str) and len(s) > 0 and set(s) <= HEX_DIGITS


def bhash(key: str) -> str:
    """
    Return the first 32 hex characters of the SHA-256 of a key.

    Args:
        key: The key to hash (normally lowercase hex)

    Returns:
        32-character lowercase hex digest
    """
    if not isinstance(key, str):
        raise InvalidArgumentError(
            f"Key must be a string, got {type(key).__name__}"
        )
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]


def shash(data: bytes) -> str:
    """Return the first 32 hex characters of the SHA-256 of a byte buffer."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"Data must be bytes-like, got {type(data).__name__}"
        )
    return hashlib.sha256(data).hexdigest()[:DIGEST_LENGTH]
