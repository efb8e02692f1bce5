"""
EnvelopeCipher — all four layers behind one object
===================================================
Holds no key and no state. Create one per call site or share a single
instance across threads; both are fine.

    env  = EnvelopeCipher()
    key  = env.generate_key()
    text = env.encode_to_text(b"secret", key)
    env.decode_from_text(text, key)  # -> b"secret"
"""

from typing import Optional, Union

from .layers import layer1_keys, layer2_core, layer3_buffer, layer4_text
from .layers.layer2_core import Data, EncryptResult, Nonce


class EnvelopeCipher:
    """AES-256-GCM envelope with a 6-byte nonce."""

    KEY_SIZE    = layer1_keys.KEY_SIZE        # 32
    NONCE_SIZE  = layer1_keys.NONCE_SIZE      # 6
    TAG_SIZE    = layer2_core.TAG_SIZE        # 16
    HEADER_SIZE = layer3_buffer.HEADER_SIZE   # 22

    @staticmethod
    def generate_key() -> bytes:
        return layer1_keys.generate_key()

    @staticmethod
    def generate_nonce() -> bytes:
        return layer1_keys.generate_nonce()

    def encrypt(self, plaintext: Data, key: bytes,
                fixed_nonce: Optional[Nonce] = None) -> EncryptResult:
        """Returns: (ciphertext, nonce, tag)"""
        return layer2_core.encrypt(plaintext, key, fixed_nonce)

    def decrypt(self, ciphertext: bytes, key: bytes,
                nonce: Nonce, tag: bytes) -> bytes:
        return layer2_core.decrypt(ciphertext, key, nonce, tag)

    def encode_to_buffer(self, plaintext: Data, key: bytes,
                         fixed_nonce: Optional[Nonce] = None) -> bytes:
        """Returns: nonce(6) || tag(16) || ciphertext"""
        return layer3_buffer.encode_to_buffer(plaintext, key, fixed_nonce)

    def decode_from_buffer(self, blob: bytes, key: bytes) -> bytes:
        return layer3_buffer.decode_from_buffer(blob, key)

    def encode_to_text(self, plaintext: Data, key: bytes,
                       fixed_nonce: Optional[Nonce] = None) -> str:
        """Returns: base64(nonce || tag || ciphertext)"""
        return layer4_text.encode_to_text(plaintext, key, fixed_nonce)

    def decode_from_text(self, text: Union[str, bytes], key: bytes) -> bytes:
        return layer4_text.decode_from_text(text, key)

    # Names used by existing callers of the buffer/string API
    encrypt_to_buffer   = encode_to_buffer
    decrypt_from_buffer = decode_from_buffer
    encrypt_to_string   = encode_to_text
    decrypt_from_string = decode_from_text

    def __repr__(self):
        return "EnvelopeCipher(AES-256-GCM, nonce=6B, tag=16B)"
