"""Symmetric encryption and message authentication helpers.

Ciphertext, IVs and MACs travel as hex strings so they can be stored or sent
alongside other text fields. Encryption is AES-256-CBC with PKCS7 padding and
a fresh random IV per call; it is not authenticated, so pair it with
:func:`generate_hmac` when integrity matters.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import hmac
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from quiz_engine.constants.security_constants import (
    ENCRYPTION_IV_LENGTH,
    ENCRYPTION_KEY_LENGTH,
    HMAC_DIGEST,
)
from quiz_engine.core.errors import InvalidArgumentError

_BLOCK_SIZE_BITS = algorithms.AES.block_size


@dataclass(frozen=True, slots=True)
class EncryptedPayload:
    """Hex-encoded ciphertext together with the IV needed to decrypt it."""

    iv: str
    encrypted_data: str


def generate_encryption_key() -> bytes:
    return secrets.token_bytes(ENCRYPTION_KEY_LENGTH)


def encrypt(plaintext: str, key: bytes) -> EncryptedPayload:
    """Encrypt UTF-8 text with AES-256-CBC under a random IV."""
    _check_key(key)
    iv = secrets.token_bytes(ENCRYPTION_IV_LENGTH)

    padder = padding.PKCS7(_BLOCK_SIZE_BITS).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return EncryptedPayload(iv=iv.hex(), encrypted_data=ciphertext.hex())


def decrypt(encrypted_data: str, key: bytes, iv: str) -> str:
    """Reverse :func:`encrypt` given the hex ciphertext and hex IV."""
    _check_key(key)
    try:
        iv_bytes = bytes.fromhex(iv)
        ciphertext = bytes.fromhex(encrypted_data)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError("Ciphertext and IV must be hex strings.") from exc
    if len(iv_bytes) != ENCRYPTION_IV_LENGTH:
        raise InvalidArgumentError(f"Invalid IV: must be {ENCRYPTION_IV_LENGTH} bytes")

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv_bytes)).decryptor()
    unpadder = padding.PKCS7(_BLOCK_SIZE_BITS).unpadder()
    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except ValueError as exc:
        raise InvalidArgumentError("Ciphertext could not be decrypted with this key.") from exc


def generate_hmac(data: str | bytes, key: bytes) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hmac.new(key, data, digestmod=getattr(hashlib, HMAC_DIGEST)).hexdigest()


def verify_hmac(data: str | bytes, mac: str, key: bytes) -> bool:
    """Check ``mac`` against the HMAC of ``data`` without leaking timing."""
    expected = generate_hmac(data, key)
    return hmac.compare_digest(expected.encode("ascii"), mac.encode("utf-8"))


def _check_key(key: bytes) -> None:
    if not isinstance(key, (bytes, bytearray)) or len(key) != ENCRYPTION_KEY_LENGTH:
        raise InvalidArgumentError(f"Invalid key: must be {ENCRYPTION_KEY_LENGTH} bytes")
