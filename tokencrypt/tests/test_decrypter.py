"""Tests for Decrypter, including the round-trip and tamper properties."""
import os

import pytest
from cryptography.exceptions import InvalidTag

from tokencrypt.Decrypter import Decrypter
from tokencrypt.Encrypter import Encrypter
from tokencrypt.SecretKey import SecretKey
from tokencrypt.errors import DecryptionError, KeyNotConfiguredError
from tokencrypt.util.key_providers import LocalKeyProvider

FIPS_KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")

ROUND_TRIP_TRANSFORMS = [
    "AES",
    "AES/ECB/PKCS5Padding",
    "AES/CBC/PKCS5Padding",
    "AES/CTR/NoPadding",
    "AES/GCM/NoPadding",
]


@pytest.fixture
def key() -> SecretKey:
    return SecretKey(os.urandom(16), "AES")


@pytest.fixture
def decrypter(key: SecretKey) -> Decrypter:
    return Decrypter(key)


def _mutate(token: str, index: int) -> str:
    replacement = "A" if token[index] != "A" else "B"
    return token[:index] + replacement + token[index + 1 :]


class TestDecrypterRoundTrip:
    """Test decrypting what Encrypter produced, across transforms."""

    def test_hello_world(self) -> None:
        key = SecretKey(FIPS_KEY, "AES")
        token = Encrypter().encrypt("hello world", key)
        assert Decrypter().decrypt(token, key) == "hello world"

    def test_known_token(self) -> None:
        key = SecretKey(FIPS_KEY, "AES")
        assert Decrypter(key).decrypt("knb984TzhRj6bIMQ8ZFnjQ==") == "hello world"

    @pytest.mark.parametrize("transform", ROUND_TRIP_TRANSFORMS)
    @pytest.mark.parametrize("key_size", [16, 24, 32])
    def test_string_round_trip(self, transform: str, key_size: int) -> None:
        key = SecretKey(os.urandom(key_size), "AES")
        plaintext = "unicode-data-日本語-🔐 " * 3
        token = Encrypter(key, transform).encrypt(plaintext)
        assert Decrypter(key, transform).decrypt(token) == plaintext

    @pytest.mark.parametrize("transform", ROUND_TRIP_TRANSFORMS)
    def test_bytes_round_trip(self, key: SecretKey, transform: str) -> None:
        plaintext = os.urandom(1000)
        token = Encrypter().encrypt(plaintext, key, transform)
        assert Decrypter().decrypt_as_bytes(token, key, transform) == plaintext

    @pytest.mark.parametrize("transform", ["AES/ECB/NoPadding", "AES/CBC/NoPadding"])
    def test_block_aligned_round_trip_without_padding(
        self, key: SecretKey, transform: str
    ) -> None:
        plaintext = os.urandom(64)
        token = Encrypter(key, transform).encrypt(plaintext)
        assert Decrypter(key, transform).decrypt_as_bytes(token) == plaintext

    def test_chacha20_round_trip(self) -> None:
        key = SecretKey(os.urandom(32), "ChaCha20")
        token = Encrypter(key).encrypt("stream cipher")
        assert Decrypter(key).decrypt(token) == "stream cipher"

    def test_empty_plaintext(self, key: SecretKey) -> None:
        token = Encrypter(key).encrypt(b"")
        assert Decrypter(key).decrypt_as_bytes(token) == b""
        assert Decrypter(key).decrypt(token) == ""

    def test_transform_lookup_ignores_case(self, key: SecretKey) -> None:
        token = Encrypter(key, "aes/cbc/pkcs5padding").encrypt("mixed case")
        assert Decrypter(key, "AES/CBC/PKCS5Padding").decrypt(token) == "mixed case"

    def test_default_key_matches_explicit_form(self, key: SecretKey) -> None:
        token = Encrypter(key).encrypt("x")
        assert Decrypter(key).decrypt(token) == Decrypter().decrypt(token, key, "AES")


class TestDecrypterWithoutKey:
    """Test the configuration error on a Decrypter without a key."""

    def test_decrypt_raises_configuration_error(self) -> None:
        with pytest.raises(KeyNotConfiguredError, match="no key defined for this Decrypter"):
            Decrypter().decrypt("AAAA")

    def test_decrypt_as_bytes_raises_configuration_error(self) -> None:
        with pytest.raises(KeyNotConfiguredError):
            Decrypter().decrypt_as_bytes("AAAA")

    def test_configuration_error_precedes_base64_checks(self) -> None:
        # Invalid Base64 must not be looked at before the key check
        with pytest.raises(KeyNotConfiguredError):
            Decrypter().decrypt("%%% not base64 %%%")


class TestDecrypterFailures:
    """Test that every failure surfaces as DecryptionError."""

    def test_wrong_key(self, key: SecretKey) -> None:
        token = Encrypter(key, "AES/GCM/NoPadding").encrypt("secret")
        other = SecretKey(os.urandom(16), "AES")
        with pytest.raises(DecryptionError, match="Failed decrypting data") as excinfo:
            Decrypter(other, "AES/GCM/NoPadding").decrypt(token)
        assert isinstance(excinfo.value.__cause__, InvalidTag)

    def test_malformed_base64(self, decrypter: Decrypter) -> None:
        with pytest.raises(DecryptionError):
            decrypter.decrypt("this-is-not-encrypted-data")

    def test_non_ascii_input(self, decrypter: Decrypter) -> None:
        with pytest.raises(DecryptionError):
            decrypter.decrypt("ÄÖÜ")

    def test_truncated_ciphertext(self, key: SecretKey) -> None:
        token = Encrypter(key).encrypt("truncate me please")
        with pytest.raises(DecryptionError):
            Decrypter(key).decrypt(token[:-4])

    def test_iv_shorter_than_expected(self, key: SecretKey) -> None:
        with pytest.raises(DecryptionError) as excinfo:
            Decrypter(key, "AES/CBC/PKCS5Padding").decrypt("AAAA")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_unsupported_transform(self, decrypter: Decrypter, key: SecretKey) -> None:
        with pytest.raises(DecryptionError):
            decrypter.decrypt("AAAA", key, "RC4")

    def test_non_utf8_plaintext(self, key: SecretKey) -> None:
        token = Encrypter(key).encrypt(b"\xff\xfe\xfd")
        assert Decrypter(key).decrypt_as_bytes(token) == b"\xff\xfe\xfd"
        with pytest.raises(DecryptionError) as excinfo:
            Decrypter(key).decrypt(token)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_error_message_does_not_leak_cause(self, key: SecretKey) -> None:
        token = Encrypter(key, "AES/GCM/NoPadding").encrypt("x")
        other = SecretKey(os.urandom(16), "AES")
        with pytest.raises(DecryptionError) as excinfo:
            Decrypter(other, "AES/GCM/NoPadding").decrypt(token)
        assert str(excinfo.value) == "Failed decrypting data"


class TestTampering:
    """Changing any character of a token must fail or change the plaintext."""

    @pytest.mark.parametrize(
        "plaintext, padding",
        [
            ("hello world", ""),  # 12 + 11 + 16 = 39 bytes
            ("x", "="),  # 12 + 1 + 16 = 29 bytes
            ("", "=="),  # 12 + 0 + 16 = 28 bytes
        ],
    )
    def test_every_character_of_gcm_token(
        self, key: SecretKey, plaintext: str, padding: str
    ) -> None:
        token = Encrypter(key, "AES/GCM/NoPadding").encrypt(plaintext)
        assert token.endswith(padding) and not token[: len(token) - len(padding)].endswith("=")
        decrypter = Decrypter(key, "AES/GCM/NoPadding")
        for index in range(len(token)):
            with pytest.raises(DecryptionError):
                decrypter.decrypt(_mutate(token, index))

    @pytest.mark.parametrize(
        "plaintext, padding",
        [
            ("hello world", "=="),  # one block, 16 bytes
            ("hello world, tamper", "="),  # two blocks, 32 bytes
            ("hello world, tamper with me, please", ""),  # three blocks, 48 bytes
        ],
    )
    def test_every_character_of_ecb_token(
        self, key: SecretKey, plaintext: str, padding: str
    ) -> None:
        token = Encrypter(key).encrypt(plaintext)
        assert token.endswith(padding) and not token[: len(token) - len(padding)].endswith("=")
        decrypter = Decrypter(key)
        for index in range(len(token)):
            try:
                result = decrypter.decrypt(_mutate(token, index))
            except DecryptionError:
                continue
            assert result != plaintext

    @pytest.mark.parametrize("transform", ["AES", "AES/CBC/PKCS5Padding", "AES/CTR/NoPadding"])
    def test_unauthenticated_modes_fail_or_change(self, key: SecretKey, transform: str) -> None:
        plaintext = "hello world, tamper with me"
        token = Encrypter(key, transform).encrypt(plaintext)
        decrypter = Decrypter(key, transform)
        for index in range(len(token)):
            try:
                result = decrypter.decrypt_as_bytes(_mutate(token, index))
            except DecryptionError:
                continue
            assert result != plaintext.encode("utf-8")

    def test_unused_trailing_bits_rejected(self) -> None:
        # "jQ==" and "jR==" decode to the same byte; only the first is canonical
        decrypter = Decrypter(SecretKey(FIPS_KEY, "AES"))
        assert decrypter.decrypt("knb984TzhRj6bIMQ8ZFnjQ==") == "hello world"
        with pytest.raises(DecryptionError) as excinfo:
            decrypter.decrypt("knb984TzhRj6bIMQ8ZFnjR==")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_unused_trailing_bits_rejected_for_gcm(self, key: SecretKey) -> None:
        token = Encrypter(key, "AES/GCM/NoPadding").encrypt("x")
        assert token.endswith("=") and not token.endswith("==")
        # The last data character of a one-pad token carries two unused bits
        last = token[-2]
        alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
        sibling = alphabet[alphabet.index(last) ^ 1]
        with pytest.raises(DecryptionError):
            Decrypter(key, "AES/GCM/NoPadding").decrypt(token[:-2] + sibling + "=")


class TestDecrypterFromProvider:
    """Test building a Decrypter from a key provider."""

    def test_from_provider(self) -> None:
        provider = LocalKeyProvider(FIPS_KEY)
        decrypter = Decrypter.from_provider(provider)
        assert decrypter.key == SecretKey(FIPS_KEY)
        assert decrypter.decrypt("knb984TzhRj6bIMQ8ZFnjQ==") == "hello world"
