"""
Layer 2 — CORE: AES-256-GCM encrypt / decrypt
==============================================
AES-256 in Galois/Counter Mode with a 6-byte nonce.

GCM gives authenticated encryption: the ciphertext is the same length
as the plaintext, and a 128-bit tag binds it to the (key, nonce) pair.
Any change to the ciphertext, the tag, the nonce or the key makes
decryption fail as a whole. No partial plaintext ever comes back.

The 6-byte nonce is narrower than GCM's usual 96 bits. It is kept for
compatibility with blobs already in storage. A non-96-bit nonce is run
through GHASH to form the pre-counter block (NIST SP 800-38D), which is
what pycryptodome and OpenSSL both do, so blobs interoperate.

No associated data is authenticated.

Never reuse a (key, nonce) pair for two different plaintexts: GCM loses
both confidentiality and authenticity. Nothing here tracks nonce use.

Only byte counts are ever logged (DEBUG); keys, nonces, plaintext and
tags never are.

Dependencies: pycryptodome >= 3.10
(cryptography's AESGCM refuses nonces shorter than 8 bytes)
"""

import logging
from typing import NamedTuple, Optional, Union

from Crypto.Cipher import AES

from ..errors import AuthenticationFailed, InvalidKeyLength, InvalidNonceLength
from .layer1_keys import KEY_SIZE, NONCE_SIZE, generate_nonce

logger = logging.getLogger(__name__)

TAG_SIZE = 16   # 128-bit authentication tag

Data  = Union[str, bytes, bytearray, memoryview]
Nonce = Union[str, bytes, bytearray, memoryview]


class EncryptResult(NamedTuple):
    ciphertext: bytes
    nonce: bytes
    tag: bytes


def _to_bytes(value: Data) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return memoryview(value).tobytes()


def _check_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(
            f"Key must be {KEY_SIZE} bytes ({KEY_SIZE * 8} bits), got {len(key)}."
        )


def _check_nonce(nonce: Nonce) -> bytes:
    raw = _to_bytes(nonce)
    if len(raw) != NONCE_SIZE:
        raise InvalidNonceLength(f"Nonce must be exactly {NONCE_SIZE} bytes.")
    return raw


def encrypt(plaintext: Data, key: bytes,
            fixed_nonce: Optional[Nonce] = None) -> EncryptResult:
    """
    Encrypt and authenticate plaintext (str is UTF-8 encoded).
    A nonce is generated unless fixed_nonce is given.
    Returns: EncryptResult(ciphertext, nonce, tag)
    """
    _check_key(key)
    if fixed_nonce is None:
        nonce = generate_nonce()
    else:
        nonce = _check_nonce(fixed_nonce)

    data = _to_bytes(plaintext)
    cipher = AES.new(bytes(key), AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
    ciphertext, tag = cipher.encrypt_and_digest(data)
    logger.debug(f"Encrypt: pt={len(data)}B ct={len(ciphertext)}B tag={len(tag)}B")
    return EncryptResult(ciphertext, nonce, tag)


def decrypt(ciphertext: bytes, key: bytes, nonce: Nonce, tag: bytes) -> bytes:
    """
    Verify the tag, then decrypt.
    Raises AuthenticationFailed on any mismatch; the cause is not reported.
    """
    _check_key(key)
    nonce = _check_nonce(nonce)

    cipher = AES.new(bytes(key), AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
    try:
        plaintext = cipher.decrypt_and_verify(memoryview(ciphertext).tobytes(),
                                             memoryview(tag).tobytes())
    except ValueError:
        raise AuthenticationFailed(
            "Decryption failed: authentication failed or data corrupted."
        ) from None
    logger.debug(f"Decrypt: ct={len(ciphertext)}B pt={len(plaintext)}B")
    return plaintext
