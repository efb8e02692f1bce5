"""
Layer 3 — BUFFER: single-blob envelope
=======================================
Packs everything decryption needs, except the key, into one blob.

Blob format: nonce(6) || tag(16) || ciphertext

Fixed-width header, no version byte, no length prefix. The
ciphertext length is whatever follows byte 22.

Dependencies: pycryptodome (via Layer 2)
"""

import logging
from typing import Optional

from ..errors import MalformedBlob
from .layer1_keys import NONCE_SIZE
from .layer2_core import TAG_SIZE, Data, Nonce, decrypt, encrypt

logger = logging.getLogger(__name__)

HEADER_SIZE = NONCE_SIZE + TAG_SIZE   # 22


def encode_to_buffer(plaintext: Data, key: bytes,
                     fixed_nonce: Optional[Nonce] = None) -> bytes:
    """Encrypt and return nonce || tag || ciphertext."""
    ciphertext, nonce, tag = encrypt(plaintext, key, fixed_nonce)
    return nonce + tag + ciphertext


def decode_from_buffer(blob: bytes, key: bytes) -> bytes:
    """
    Split a blob from encode_to_buffer() and decrypt it.
    Raises MalformedBlob if it cannot hold a nonce and a tag.
    """
    blob = memoryview(blob).tobytes()
    if len(blob) < HEADER_SIZE:
        raise MalformedBlob(
            f"Blob too short: {len(blob)} bytes, need at least {HEADER_SIZE}."
        )
    nonce      = blob[:NONCE_SIZE]
    tag        = blob[NONCE_SIZE:HEADER_SIZE]
    ciphertext = blob[HEADER_SIZE:]
    logger.debug(f"Blob split: nonce={len(nonce)}B tag={len(tag)}B ct={len(ciphertext)}B")
    return decrypt(ciphertext, key, nonce, tag)
