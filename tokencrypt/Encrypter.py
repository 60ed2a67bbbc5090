# tokencrypt/Encrypter.py
import base64
from typing import Optional, Union

from tokencrypt.SecretKey import SecretKey
from tokencrypt.errors import EncryptionError, KeyNotConfiguredError
from tokencrypt.transforms.registry import get_transform
from tokencrypt.util.key_providers import KeyProvider
from tokencrypt.util.logger import log


class Encrypter:
    """
    Encrypts plaintext into a Base64 ciphertext string.

    Usage:
        encrypter = Encrypter(SecretKey(key_bytes, "AES"))
        token = encrypter.encrypt("hello world")

        # Or per call, with an explicit transform:
        token = Encrypter().encrypt(b"raw", key, "AES/GCM/NoPadding")

    An instance built without a key only supports calls that pass one.
    Every call creates its own cipher context, so instances are safe to
    share between threads.
    """

    def __init__(
        self,
        key: Optional[SecretKey] = None,
        transform: Optional[str] = None,
    ) -> None:
        self._key = key
        self._transform = transform

    @classmethod
    def from_provider(
        cls,
        provider: KeyProvider,
        key_id: Optional[str] = None,
        transform: Optional[str] = None,
    ) -> "Encrypter":
        """Build an Encrypter whose default key comes from *provider*."""
        return cls(provider.get_key(key_id), transform)

    @property
    def key(self) -> Optional[SecretKey]:
        return self._key

    def encrypt(
        self,
        data: Union[str, bytes],
        key: Optional[SecretKey] = None,
        transform: Optional[str] = None,
    ) -> str:
        """
        Encrypt *data* and return the ciphertext as Base64 text.

        Args:
            data: Plaintext; ``str`` is encoded as UTF-8 first
            key: Key to use instead of the instance default
            transform: Transform identifier; defaults to the instance
                transform (default key only), then to ``key.algorithm``

        Raises:
            KeyNotConfiguredError: If no key is passed and none was configured
            EncryptionError: If the cipher rejects the key, transform or data
        """
        if key is None:
            key = self._require_key()
            transform = transform or self._transform
        return self._encrypt(data, key, transform or key.algorithm)

    def _require_key(self) -> SecretKey:
        if self._key is None:
            raise KeyNotConfiguredError("There is no key defined for this Encrypter")
        return self._key

    def _encrypt(self, data: Union[str, bytes], key: SecretKey, transform: str) -> str:
        if not isinstance(data, (str, bytes, bytearray, memoryview)):
            raise TypeError(f"Expected str or bytes, got {type(data).__name__}")

        try:
            if isinstance(data, str):
                data = data.encode("utf-8")
            cipher = get_transform(transform)
            ciphertext = cipher.encrypt(key, bytes(data))
            return base64.b64encode(ciphertext).decode("utf-8")
        except Exception as exc:
            log(f"Encryption with {transform} failed: {type(exc).__name__}")
            raise EncryptionError("Failed encrypting data") from exc
