# tokencrypt/transforms/AeadCipherTransform.py
"""
Authenticated transforms: AES-GCM and ChaCha20-Poly1305.

Wire layout of the raw ciphertext:
    nonce (12 bytes) || ciphertext || tag (16 bytes)

Any modification of the ciphertext makes decryption fail with
``cryptography.exceptions.InvalidTag``.
"""
import os
from typing import Tuple, Type, Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from tokencrypt.CipherTransform import CipherTransform
from tokencrypt.SecretKey import SecretKey


class AeadCipherTransform(CipherTransform):
    """AEAD transform backed by one of the ``cryptography`` AEAD primitives."""

    NONCE_SIZE: int = 12  # 96 bits, recommended for GCM and ChaCha20-Poly1305

    def __init__(
        self,
        name: str,
        aead: Type[Union[AESGCM, ChaCha20Poly1305]],
        key_algorithm: str,
        key_sizes: Tuple[int, ...],
    ) -> None:
        super().__init__(name)
        self._aead = aead
        self.key_algorithm = key_algorithm
        self.key_sizes = key_sizes
        self.iv_size = self.NONCE_SIZE

    def encrypt(self, key: SecretKey, data: bytes) -> bytes:
        aead = self._aead(self.check_key(key))
        nonce = os.urandom(self.NONCE_SIZE)
        return nonce + aead.encrypt(nonce, data, None)

    def decrypt(self, key: SecretKey, data: bytes) -> bytes:
        aead = self._aead(self.check_key(key))
        nonce, body = self.split_iv(data)
        return aead.decrypt(nonce, body, None)


def aes_gcm(name: str = "AES/GCM/NoPadding") -> AeadCipherTransform:
    return AeadCipherTransform(name, AESGCM, "AES", (16, 24, 32))


def chacha20_poly1305(name: str = "ChaCha20-Poly1305") -> AeadCipherTransform:
    return AeadCipherTransform(name, ChaCha20Poly1305, "ChaCha20", (32,))
