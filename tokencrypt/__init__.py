# tokencrypt/__init__.py
"""
Base64-in, Base64-out symmetric encryption helpers.

Usage:
    from tokencrypt import Encrypter, Decrypter, SecretKey

    key = SecretKey(key_bytes, "AES")
    token = Encrypter(key).encrypt("hello world")
    assert Decrypter(key).decrypt(token) == "hello world"

Modules:
    Encrypter / Decrypter  - the public entry points
    SecretKey              - key material plus algorithm name
    transforms             - registry of supported cipher transforms
    util.key_providers     - LocalKeyProvider, EnvKeyProvider
    config                 - CipherSettings loaded from the environment
"""
from tokencrypt.SecretKey import SecretKey
from tokencrypt.Encrypter import Encrypter
from tokencrypt.Decrypter import Decrypter
from tokencrypt.config import CipherSettings
from tokencrypt.errors import (
    DecryptionError,
    EncryptionError,
    KeyNotConfiguredError,
    TokenCryptError,
    UnsupportedTransformError,
)
from tokencrypt.transforms import SUPPORTED_TRANSFORMS, get_transform
from tokencrypt.util.key_providers import (
    EnvKeyProvider,
    KeyNotFoundError,
    KeyProvider,
    KeyProviderError,
    KeyValidationError,
    LocalKeyProvider,
)

__all__ = [
    "SecretKey",
    "Encrypter",
    "Decrypter",
    "CipherSettings",
    # Errors
    "TokenCryptError",
    "KeyNotConfiguredError",
    "UnsupportedTransformError",
    "EncryptionError",
    "DecryptionError",
    # Transforms
    "SUPPORTED_TRANSFORMS",
    "get_transform",
    # Key providers
    "KeyProvider",
    "LocalKeyProvider",
    "EnvKeyProvider",
    "KeyProviderError",
    "KeyNotFoundError",
    "KeyValidationError",
]
