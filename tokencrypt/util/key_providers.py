# tokencrypt/util/key_providers.py
"""
Key providers for handing keys to Encrypter/Decrypter without wiring the
raw key bytes through application code.

Usage:
    provider = EnvKeyProvider("TOKENCRYPT_KEY")
    encrypter = Encrypter.from_provider(provider)
    decrypter = Decrypter.from_provider(provider)
"""
import base64
import binascii
import os
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union

from tokencrypt.SecretKey import SecretKey
from tokencrypt.util.logger import log


class KeyProviderError(Exception):
    """Base exception for key provider errors."""


class KeyNotFoundError(KeyProviderError):
    """Raised when a key cannot be retrieved."""


class KeyValidationError(KeyProviderError):
    """Raised when a key fails validation."""


class KeyProvider(ABC):
    """
    Abstract base for key providers.

    Implement this protocol to create custom key retrieval strategies.
    """

    @abstractmethod
    def get_key(self, key_id: Optional[str] = None) -> SecretKey:
        """
        Retrieve a key.

        Args:
            key_id: Optional identifier for the key (used by vaults, KMS, etc.)

        Returns:
            SecretKey carrying the raw key bytes and their algorithm

        Raises:
            KeyNotFoundError: If key cannot be retrieved
            KeyProviderError: For other provider-specific errors
        """
        ...

    def validate_key(
        self,
        key: SecretKey,
        expected_lengths: Union[int, Iterable[int]],
    ) -> None:
        """Validate key meets length requirements."""
        if isinstance(expected_lengths, int):
            expected_lengths = (expected_lengths,)
        allowed = tuple(expected_lengths)
        if len(key.material) not in allowed:
            sizes = ", ".join(str(size) for size in allowed)
            raise KeyValidationError(
                f"Expected {sizes}-byte key, got {len(key.material)} bytes"
            )


class LocalKeyProvider(KeyProvider):
    """
    Simple in-memory key provider.

    Best for: Testing, development, single-key scenarios.
    """

    def __init__(self, material: bytes, algorithm: str = "AES"):
        self._key = SecretKey(material, algorithm)

    def get_key(self, key_id: Optional[str] = None) -> SecretKey:
        return self._key


class EnvKeyProvider(KeyProvider):
    """
    Retrieve key from environment variable.

    Best for: Container deployments, CI/CD pipelines.
    """

    def __init__(self, env_var: str, algorithm: str = "AES", encoding: str = "utf-8"):
        self._env_var = env_var
        self._algorithm = algorithm
        self._encoding = encoding

    @property
    def env_var(self) -> str:
        return self._env_var

    def get_key(self, key_id: Optional[str] = None) -> SecretKey:
        value = os.environ.get(self._env_var)
        if value is None:
            raise KeyNotFoundError(f"Environment variable {self._env_var} not set")

        # Try base64 first (preferred for binary keys)
        try:
            material = base64.b64decode(value, validate=True)
        except binascii.Error:
            # Fall back to raw encoding (for simple ASCII keys)
            log(f"{self._env_var} is not base64; using raw {self._encoding} bytes")
            material = value.encode(self._encoding)

        return SecretKey(material, self._algorithm)
