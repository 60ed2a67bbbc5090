# tokencrypt/errors.py
"""
Exception hierarchy for tokencrypt.

Cryptographic failures are deliberately collapsed into one error kind per
direction. The low-level cause stays available on ``__cause__`` for
diagnostics, but the message never says why an operation failed.
"""


class TokenCryptError(Exception):
    """Base exception for tokencrypt errors."""


class KeyNotConfiguredError(TokenCryptError):
    """Raised when a default-key operation is called on an instance without a key."""


class UnsupportedTransformError(TokenCryptError):
    """Raised when a transform identifier is not in the registry."""


class EncryptionError(TokenCryptError):
    """Raised when encrypting data fails for any reason."""


class DecryptionError(TokenCryptError):
    """Raised when decrypting data fails for any reason."""
