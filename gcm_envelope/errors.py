"""
Error taxonomy
==============
Every failure the envelope can produce, as a distinct type.

Callers branch on the exception class, never on the message text.
Authentication failures are deliberately a single type: a tampered
ciphertext, a tampered tag, a wrong key and a wrong nonce all look
identical from the outside.
"""


class EnvelopeError(Exception):
    """Base class for all envelope failures."""


class InvalidKeyLength(EnvelopeError, ValueError):
    """Key is not exactly 32 bytes."""


class InvalidNonceLength(EnvelopeError, ValueError):
    """Nonce is not exactly 6 bytes."""


class AuthenticationFailed(EnvelopeError):
    """GCM tag verification rejected the (key, nonce, ciphertext, tag) set."""


class MalformedBlob(EnvelopeError, ValueError):
    """Blob is too short to hold a nonce and a tag."""


class InvalidTextEncoding(EnvelopeError, ValueError):
    """Text is not valid padded standard base64."""


class RandomnessUnavailable(EnvelopeError, RuntimeError):
    """The OS entropy source could not supply bytes."""
