# tokencrypt/config.py
"""
Environment-driven settings.

    TOKENCRYPT_KEY_ENV        name of the variable holding the key (default TOKENCRYPT_KEY)
    TOKENCRYPT_KEY_ALGORITHM  algorithm of that key (default AES)
    TOKENCRYPT_TRANSFORM      transform identifier (default: derived from the key)
    TOKENCRYPT_LOG_LEVEL      package log level (default WARNING)

Loading settings has no side effects: the log level only takes effect once
``apply_logging()`` is called.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from tokencrypt.Decrypter import Decrypter
from tokencrypt.Encrypter import Encrypter
from tokencrypt.errors import UnsupportedTransformError
from tokencrypt.transforms.registry import is_supported
from tokencrypt.util.key_providers import EnvKeyProvider
from tokencrypt.util.logger import configure_logging

ENV_PREFIX = "TOKENCRYPT_"


@dataclass(frozen=True)
class CipherSettings:
    key_env_var: str = "TOKENCRYPT_KEY"
    key_algorithm: str = "AES"
    transform: Optional[str] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.transform is not None and not is_supported(self.transform):
            raise UnsupportedTransformError(f"Unsupported transform: {self.transform!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CipherSettings":
        """Load settings from *environ* (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        return cls(
            key_env_var=env.get(f"{ENV_PREFIX}KEY_ENV", cls.key_env_var),
            key_algorithm=env.get(f"{ENV_PREFIX}KEY_ALGORITHM", cls.key_algorithm),
            transform=env.get(f"{ENV_PREFIX}TRANSFORM") or None,
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level),
        )

    def apply_logging(self) -> None:
        configure_logging(self.log_level)

    def key_provider(self) -> EnvKeyProvider:
        return EnvKeyProvider(self.key_env_var, algorithm=self.key_algorithm)

    def encrypter(self) -> Encrypter:
        return Encrypter.from_provider(self.key_provider(), transform=self.transform)

    def decrypter(self) -> Decrypter:
        return Decrypter.from_provider(self.key_provider(), transform=self.transform)
