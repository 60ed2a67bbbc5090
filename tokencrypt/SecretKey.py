# tokencrypt/SecretKey.py
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SecretKey:
    """
    Opaque key material plus the name of the algorithm it belongs to.

    The ``algorithm`` doubles as the default transform identifier when a
    caller does not name one explicitly (``"AES"`` resolves to AES/ECB with
    PKCS#7 padding). Key material is kept out of ``repr()``.
    """

    material: bytes = field(repr=False)
    algorithm: str = "AES"

    def __post_init__(self) -> None:
        if not isinstance(self.material, (bytes, bytearray)):
            raise TypeError(
                f"Key material must be bytes, got {type(self.material).__name__}"
            )
        if not self.algorithm:
            raise ValueError("Key algorithm must not be empty")
        # Copy bytearray input into immutable bytes
        object.__setattr__(self, "material", bytes(self.material))

    def __len__(self) -> int:
        return len(self.material)

    @property
    def bit_length(self) -> int:
        return len(self.material) * 8
