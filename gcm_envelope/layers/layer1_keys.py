"""
Layer 1 — KEYS: key and nonce generation
=========================================
Fresh material from the operating system's CSPRNG (os.urandom).

Key:    256 bits (32 bytes) — AES-256.
Nonce:   48 bits (6 bytes)  — six printable hex characters.

The nonce is built by hex-encoding random bytes and keeping the first
six characters, so it can travel as plain text next to other fields.
That leaves only 16^6 = 2^24 possible values: at a few thousand
messages per key, random collisions become likely. For real traffic
supply a fixed, externally sequenced nonce to encrypt() instead.

Dependencies: none (standard library)
"""

import os
import logging

from ..errors import RandomnessUnavailable

logger = logging.getLogger(__name__)

KEY_SIZE   = 32   # 256-bit key
NONCE_SIZE = 6    # 6 printable characters


def _random_bytes(n: int) -> bytes:
    try:
        return os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailable("OS entropy source unavailable.") from exc


def generate_key() -> bytes:
    """Return a fresh random 32-byte key. Store it securely."""
    key = _random_bytes(KEY_SIZE)
    logger.debug(f"Key generated: {len(key)}B")
    return key


def generate_nonce() -> bytes:
    """Return six random lowercase hex characters as ASCII bytes."""
    return _random_bytes(NONCE_SIZE).hex()[:NONCE_SIZE].encode("ascii")
