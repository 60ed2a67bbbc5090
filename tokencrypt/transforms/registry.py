# tokencrypt/transforms/registry.py
"""
Fixed registry of supported cipher transforms.

Transform identifiers are resolved against this table only; there is no
open-ended lookup by arbitrary provider strings. Lookups ignore case.
"""
from types import MappingProxyType
from typing import Dict, Mapping

from tokencrypt.CipherTransform import CipherTransform
from tokencrypt.errors import UnsupportedTransformError
from tokencrypt.transforms.AeadCipherTransform import aes_gcm, chacha20_poly1305
from tokencrypt.transforms.BlockCipherTransform import (
    CBC,
    CTR,
    ECB,
    BlockCipherTransform,
)

AES_ECB_PKCS5 = "AES/ECB/PKCS5Padding"
AES_ECB_NOPADDING = "AES/ECB/NoPadding"
AES_CBC_PKCS5 = "AES/CBC/PKCS5Padding"
AES_CBC_NOPADDING = "AES/CBC/NoPadding"
AES_CTR_NOPADDING = "AES/CTR/NoPadding"
AES_GCM_NOPADDING = "AES/GCM/NoPadding"
CHACHA20_POLY1305 = "ChaCha20-Poly1305"


def _build_registry() -> Dict[str, CipherTransform]:
    transforms = [
        BlockCipherTransform(AES_ECB_PKCS5, ECB, padded=True),
        BlockCipherTransform(AES_ECB_NOPADDING, ECB, padded=False),
        BlockCipherTransform(AES_CBC_PKCS5, CBC, padded=True),
        BlockCipherTransform(AES_CBC_NOPADDING, CBC, padded=False),
        BlockCipherTransform(AES_CTR_NOPADDING, CTR, padded=False),
        aes_gcm(AES_GCM_NOPADDING),
        chacha20_poly1305(CHACHA20_POLY1305),
    ]
    registry = {t.name.upper(): t for t in transforms}
    # A bare algorithm name means that algorithm's default transform
    registry["AES"] = registry[AES_ECB_PKCS5.upper()]
    registry["CHACHA20"] = registry[CHACHA20_POLY1305.upper()]
    return registry


_REGISTRY: Mapping[str, CipherTransform] = MappingProxyType(_build_registry())

SUPPORTED_TRANSFORMS = frozenset(_REGISTRY)


def get_transform(name: str) -> CipherTransform:
    """
    Resolve a transform identifier.

    Raises:
        UnsupportedTransformError: If the identifier is not registered
    """
    if not isinstance(name, str):
        raise UnsupportedTransformError(
            f"Transform identifier must be a string, got {type(name).__name__}"
        )
    try:
        return _REGISTRY[name.strip().upper()]
    except KeyError:
        raise UnsupportedTransformError(f"Unsupported transform: {name!r}") from None


def is_supported(name: str) -> bool:
    return isinstance(name, str) and name.strip().upper() in _REGISTRY
