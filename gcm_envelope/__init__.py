"""
gcm_envelope
============
Symmetric authenticated-encryption envelope on AES-256-GCM.

Layers:
    1  KEYS    — 32-byte key / 6-character nonce generation
    2  CORE    — encrypt / decrypt  ->  (ciphertext, nonce, tag)
    3  BUFFER  — nonce(6) || tag(16) || ciphertext
    4  TEXT    — base64 of the Layer 3 blob

Each layer depends only on the one below it. Every operation is a
pure function: no state, no I/O beyond the OS entropy source.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import (
    EnvelopeError,
    InvalidKeyLength,
    InvalidNonceLength,
    AuthenticationFailed,
    MalformedBlob,
    InvalidTextEncoding,
    RandomnessUnavailable,
)
from .layers.layer1_keys   import generate_key, generate_nonce
from .layers.layer2_core   import EncryptResult, encrypt, decrypt
from .layers.layer3_buffer import encode_to_buffer, decode_from_buffer
from .layers.layer4_text   import encode_to_text, decode_from_text
from .cipher               import EnvelopeCipher

__all__ = [
    "EnvelopeCipher",
    "EncryptResult",
    "generate_key",
    "generate_nonce",
    "encrypt",
    "decrypt",
    "encode_to_buffer",
    "decode_from_buffer",
    "encode_to_text",
    "decode_from_text",
    "EnvelopeError",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "AuthenticationFailed",
    "MalformedBlob",
    "InvalidTextEncoding",
    "RandomnessUnavailable",
]
