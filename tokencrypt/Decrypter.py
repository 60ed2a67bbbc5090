# tokencrypt/Decrypter.py
import base64
from typing import Optional

from tokencrypt.SecretKey import SecretKey
from tokencrypt.errors import DecryptionError, KeyNotConfiguredError
from tokencrypt.transforms.registry import get_transform
from tokencrypt.util.key_providers import KeyProvider
from tokencrypt.util.logger import log


class Decrypter:
    """
    Decrypts Base64 ciphertext produced by an Encrypter.

    Mirror image of Encrypter: the same key and transform defaulting
    applies, ``decrypt`` returns UTF-8 text and ``decrypt_as_bytes`` the raw
    plaintext. All failures surface as a single DecryptionError.
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
    ) -> "Decrypter":
        """Build a Decrypter whose default key comes from *provider*."""
        return cls(provider.get_key(key_id), transform)

    @property
    def key(self) -> Optional[SecretKey]:
        return self._key

    def decrypt(
        self,
        data: str,
        key: Optional[SecretKey] = None,
        transform: Optional[str] = None,
    ) -> str:
        """Decrypt Base64 *data* and return the plaintext as UTF-8 text."""
        plaintext = self.decrypt_as_bytes(data, key, transform)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            log(f"Decrypted data is not UTF-8: {type(exc).__name__}")
            raise DecryptionError("Failed decrypting data") from exc

    def decrypt_as_bytes(
        self,
        data: str,
        key: Optional[SecretKey] = None,
        transform: Optional[str] = None,
    ) -> bytes:
        """
        Decrypt Base64 *data* and return the raw plaintext bytes.

        Raises:
            KeyNotConfiguredError: If no key is passed and none was configured
            DecryptionError: On malformed Base64, wrong key, tampered data
                or an unsupported transform
        """
        if key is None:
            key = self._require_key()
            transform = transform or self._transform
        return self._decrypt(data, key, transform or key.algorithm)

    def _require_key(self) -> SecretKey:
        if self._key is None:
            raise KeyNotConfiguredError("There is no key defined for this Decrypter")
        return self._key

    def _decrypt(self, data: str, key: SecretKey, transform: str) -> bytes:
        try:
            cipher = get_transform(transform)
            ciphertext = base64.b64decode(data, validate=True)
            # Reject encodings whose unused trailing bits are set
            if base64.b64encode(ciphertext).decode("ascii") != data:
                raise ValueError("Non-canonical Base64")
            return cipher.decrypt(key, ciphertext)
        except Exception as exc:
            log(f"Decryption with {transform} failed: {type(exc).__name__}")
            raise DecryptionError("Failed decrypting data") from exc
