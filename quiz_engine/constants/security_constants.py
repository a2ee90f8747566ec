"""Cipher and access-key constants."""

ENCRYPTION_KEY_LENGTH: int = 32  # 256 bits
ENCRYPTION_IV_LENGTH: int = 16  # 128 bits
HMAC_DIGEST: str = "sha256"

QUIZ_KEY_MIN_LENGTH: int = 8
QUIZ_KEY_MAX_LENGTH: int = 128
QUIZ_KEY_DEFAULT_LENGTH: int = 16
QUIZ_KEY_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
QUIZ_KEY_ALLOWED_PATTERN: str = r"[A-Za-z0-9_\-]+"
