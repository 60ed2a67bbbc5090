# tokencrypt/transforms/__init__.py
"""
Cipher transform implementations and the registry that resolves
transform identifiers such as ``"AES/CBC/PKCS5Padding"``.
"""
from tokencrypt.transforms.AeadCipherTransform import AeadCipherTransform
from tokencrypt.transforms.BlockCipherTransform import BlockCipherTransform
from tokencrypt.transforms.registry import (
    AES_CBC_NOPADDING,
    AES_CBC_PKCS5,
    AES_CTR_NOPADDING,
    AES_ECB_NOPADDING,
    AES_ECB_PKCS5,
    AES_GCM_NOPADDING,
    CHACHA20_POLY1305,
    SUPPORTED_TRANSFORMS,
    get_transform,
    is_supported,
)

__all__ = [
    "AeadCipherTransform",
    "BlockCipherTransform",
    "AES_CBC_NOPADDING",
    "AES_CBC_PKCS5",
    "AES_CTR_NOPADDING",
    "AES_ECB_NOPADDING",
    "AES_ECB_PKCS5",
    "AES_GCM_NOPADDING",
    "CHACHA20_POLY1305",
    "SUPPORTED_TRANSFORMS",
    "get_transform",
    "is_supported",
]
