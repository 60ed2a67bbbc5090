# tokencrypt/CipherTransform.py
from abc import ABC, abstractmethod
from typing import Tuple

from tokencrypt.SecretKey import SecretKey
from tokencrypt.util.key_providers import KeyValidationError


class CipherTransform(ABC):
    """
    Base class for all cipher transforms.

    A transform is one algorithm/mode/padding combination, registered under
    a fixed identifier such as ``"AES/CBC/PKCS5Padding"``. Subclasses must
    implement ``encrypt`` and ``decrypt`` over raw bytes; Base64 handling and
    error wrapping live in Encrypter/Decrypter.

    Transforms that need an IV or nonce generate it per call and prepend it
    to the ciphertext, so ``decrypt`` only ever needs the key and the bytes
    that ``encrypt`` produced.
    """

    name: str
    key_algorithm: str
    key_sizes: Tuple[int, ...]
    iv_size: int = 0

    def __init__(self, name: str) -> None:
        self.name = name

    def check_key(self, key: SecretKey) -> bytes:
        """Return the raw key bytes after checking algorithm and size."""
        if key.algorithm.upper() != self.key_algorithm.upper():
            raise KeyValidationError(
                f"{self.name} requires a {self.key_algorithm} key, "
                f"got a {key.algorithm} key"
            )
        if len(key.material) not in self.key_sizes:
            sizes = ", ".join(str(size) for size in self.key_sizes)
            raise KeyValidationError(
                f"Expected {sizes}-byte key for {self.name}, "
                f"got {len(key.material)} bytes"
            )
        return key.material

    def split_iv(self, data: bytes) -> Tuple[bytes, bytes]:
        """Split a ciphertext into its (iv, body) parts."""
        if len(data) < self.iv_size:
            raise ValueError(
                f"Ciphertext too short for {self.name}: "
                f"expected at least {self.iv_size} bytes, got {len(data)}"
            )
        return data[: self.iv_size], data[self.iv_size :]

    @abstractmethod
    def encrypt(self, key: SecretKey, data: bytes) -> bytes:
        """Encrypt ``data`` and return the raw ciphertext (IV first, if any)."""
        ...

    @abstractmethod
    def decrypt(self, key: SecretKey, data: bytes) -> bytes:
        """Decrypt raw ciphertext produced by ``encrypt``."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
