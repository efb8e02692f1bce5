"""
Layer 4 — TEXT: base64 envelope
================================
The Layer 3 blob as standard base64 (with padding), for JSON strings,
headers and other text-only transports. Not URL-safe as-is.

Dependencies: none beyond Layer 3
"""

import base64
from typing import Optional, Union

from ..errors import InvalidTextEncoding
from .layer2_core import Data, Nonce
from .layer3_buffer import decode_from_buffer, encode_to_buffer


def encode_to_text(plaintext: Data, key: bytes,
                   fixed_nonce: Optional[Nonce] = None) -> str:
    return base64.b64encode(encode_to_buffer(plaintext, key, fixed_nonce)).decode("ascii")


def decode_from_text(text: Union[str, bytes], key: bytes) -> bytes:
    """
    Decode base64 text from encode_to_text() and decrypt it.
    Raises InvalidTextEncoding before any decryption is attempted.
    """
    try:
        blob = base64.b64decode(text, validate=True)
    except (ValueError, TypeError) as exc:
        raise InvalidTextEncoding("Input is not valid base64.") from exc
    return decode_from_buffer(blob, key)
