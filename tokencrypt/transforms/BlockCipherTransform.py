# tokencrypt/transforms/BlockCipherTransform.py
"""
AES block-mode transforms (ECB, CBC, CTR) with optional PKCS#7 padding.

Wire layout of the raw ciphertext:
    ECB:      body
    CBC/CTR:  iv (16 bytes) || body
"""
import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from tokencrypt.CipherTransform import CipherTransform
from tokencrypt.SecretKey import SecretKey

ECB = "ECB"
CBC = "CBC"
CTR = "CTR"


class BlockCipherTransform(CipherTransform):
    """
    AES in ECB, CBC or CTR mode.

    PKCS5Padding in transform identifiers maps to PKCS#7 over the 128-bit
    AES block. NoPadding ECB/CBC transforms reject input that is not a
    multiple of the block size.
    """

    key_algorithm = "AES"
    key_sizes = (16, 24, 32)  # AES-128/192/256
    BLOCK_SIZE: int = algorithms.AES.block_size  # bits

    def __init__(self, name: str, mode: str, padded: bool) -> None:
        super().__init__(name)
        if mode not in (ECB, CBC, CTR):
            raise ValueError(f"Unsupported block mode: {mode}")
        if padded and mode == CTR:
            raise ValueError("CTR is a stream mode and takes no padding")
        self.mode = mode
        self.padded = padded
        self.iv_size = 0 if mode == ECB else self.BLOCK_SIZE // 8

    def _cipher(self, key: bytes, iv: bytes) -> Cipher:
        if self.mode == ECB:
            mode = modes.ECB()
        elif self.mode == CBC:
            mode = modes.CBC(iv)
        else:
            mode = modes.CTR(iv)
        return Cipher(algorithms.AES(key), mode)

    def encrypt(self, key: SecretKey, data: bytes) -> bytes:
        raw_key = self.check_key(key)

        if self.padded:
            padder = padding.PKCS7(self.BLOCK_SIZE).padder()
            data = padder.update(data) + padder.finalize()

        iv = os.urandom(self.iv_size) if self.iv_size else b""
        encryptor = self._cipher(raw_key, iv).encryptor()
        body = encryptor.update(data) + encryptor.finalize()
        return iv + body

    def decrypt(self, key: SecretKey, data: bytes) -> bytes:
        raw_key = self.check_key(key)
        iv, body = self.split_iv(data)

        decryptor = self._cipher(raw_key, iv).decryptor()
        plaintext = decryptor.update(body) + decryptor.finalize()

        if self.padded:
            unpadder = padding.PKCS7(self.BLOCK_SIZE).unpadder()
            plaintext = unpadder.update(plaintext) + unpadder.finalize()
        return plaintext
