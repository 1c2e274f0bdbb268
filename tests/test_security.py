"""Tests for application key material."""
from __future__ import annotations

import base64

import pytest

from envboot.core import security


def test_generated_keys_are_tagged_and_unique() -> None:
    first = security.generate_key()
    second = security.generate_key()

    assert first.startswith("base64:")
    assert second.startswith("base64:")
    assert first != second
    assert len(security.parse_key(first)) == 32
    assert len(security.parse_key(second)) == 32


def test_generated_key_decodes_with_base64() -> None:
    key = security.generate_key()

    raw = base64.b64decode(key[len("base64:"):])
    assert len(raw) == 32


def test_random_source_failure_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken(nbytes: int) -> bytes:
        raise OSError("entropy source unavailable")

    monkeypatch.setattr(security.secrets, "token_bytes", _broken)

    with pytest.raises(security.KeyGenerationError):
        security.generate_key()


@pytest.mark.parametrize(
    "value",
    ["base64:not-base64!", "base64:" + base64.b64encode(b"short").decode(), ""],
)
def test_parse_key_rejects_invalid_values(value: str) -> None:
    with pytest.raises(security.SecurityError):
        security.parse_key(value)
