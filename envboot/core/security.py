"""Application key material."""
from __future__ import annotations

import base64
import binascii
import secrets


KEY_PREFIX = "base64:"
KEY_LENGTH = 32


class SecurityError(RuntimeError):
    """Raised when key material is missing or malformed."""


class KeyGenerationError(SecurityError):
    """Raised when the secure random source cannot produce key material."""


def generate_key(nbytes: int = KEY_LENGTH) -> str:
    """Return ``base64:<encoded random bytes>`` suitable for ``APP_KEY``."""

    try:
        raw = secrets.token_bytes(nbytes)
    except (OSError, NotImplementedError) as exc:
        raise KeyGenerationError("Unable to read from the secure random source.") from exc
    return KEY_PREFIX + base64.b64encode(raw).decode("ascii")


def parse_key(value: str, *, length: int = KEY_LENGTH) -> bytes:
    """Decode an ``APP_KEY`` value back to its raw bytes."""

    encoded = value[len(KEY_PREFIX):] if value.startswith(KEY_PREFIX) else value
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SecurityError("APP_KEY is not valid base64.") from exc
    if len(raw) != length:
        raise SecurityError(
            f"APP_KEY must decode to {length} bytes, got {len(raw)}."
        )
    return raw


__all__ = [
    "KEY_LENGTH",
    "KEY_PREFIX",
    "KeyGenerationError",
    "SecurityError",
    "generate_key",
    "parse_key",
]
