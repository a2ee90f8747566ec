"""Generation, validation and hashing of quiz access keys."""

from __future__ import annotations

from dataclasses import dataclass, field
import hashlib
import re
import secrets

from quiz_engine.constants.security_constants import (
    QUIZ_KEY_ALLOWED_PATTERN,
    QUIZ_KEY_ALPHABET,
    QUIZ_KEY_DEFAULT_LENGTH,
    QUIZ_KEY_MAX_LENGTH,
    QUIZ_KEY_MIN_LENGTH,
)
from quiz_engine.core.errors import InvalidArgumentError

_ALLOWED_KEY = re.compile(QUIZ_KEY_ALLOWED_PATTERN)


@dataclass(slots=True)
class KeyValidationResult:
    """Outcome of :func:`validate_quiz_key` with one message per failed rule."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)


def generate_quiz_key(length: int = QUIZ_KEY_DEFAULT_LENGTH) -> str:
    """Return ``length`` characters drawn uniformly from the key alphabet."""
    if length < 1:
        raise InvalidArgumentError("Key length must be a positive integer.")
    # 256 is a multiple of the 64-character alphabet, so the modulo is unbiased.
    random_bytes = secrets.token_bytes(length)
    return "".join(QUIZ_KEY_ALPHABET[byte % len(QUIZ_KEY_ALPHABET)] for byte in random_bytes)


def validate_quiz_key(key: object) -> KeyValidationResult:
    if not isinstance(key, str):
        return KeyValidationResult(is_valid=False, errors=["Key must be a string"])

    errors: list[str] = []
    if len(key) < QUIZ_KEY_MIN_LENGTH:
        errors.append(f"Key must be at least {QUIZ_KEY_MIN_LENGTH} characters long")
    if len(key) > QUIZ_KEY_MAX_LENGTH:
        errors.append(f"Key must not exceed {QUIZ_KEY_MAX_LENGTH} characters")
    if not _ALLOWED_KEY.fullmatch(key):
        errors.append(
            "Key contains invalid characters. Only alphanumeric characters, "
            "hyphens, and underscores are allowed"
        )
    return KeyValidationResult(is_valid=not errors, errors=errors)


def hash_quiz_key(key: str) -> str:
    """SHA-256 hex digest of the key, suitable for storing instead of the key itself."""
    if not isinstance(key, str):
        raise InvalidArgumentError("Key must be a string")
    return hashlib.sha256(key.encode("utf-8")).hexdigest()
