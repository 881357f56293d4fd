"""Testes do carregamento da chave pública de verificação."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from app.infra.crypto import (
    InteractionSignatureVerifier,
    VerificationKeyError,
    decode_hex,
    load_verification_key,
)


def test_load_valid_key(public_key_hex: str) -> None:
    assert isinstance(load_verification_key(public_key_hex), Ed25519PublicKey)


@pytest.mark.parametrize(
    ("value", "reason"),
    [
        (None, "missing_public_key"),
        ("", "missing_public_key"),
        ("not-hex" * 9, "public_key_not_hex"),
        ("abc", "public_key_not_hex"),
        ("ab" * 16, "public_key_invalid_size"),
        ("ab" * 33, "public_key_invalid_size"),
    ],
)
def test_invalid_key_raises(value: str | None, reason: str) -> None:
    with pytest.raises(VerificationKeyError, match=reason):
        load_verification_key(value)


def test_verifier_from_invalid_hex_raises() -> None:
    with pytest.raises(VerificationKeyError):
        InteractionSignatureVerifier.from_hex("")


def test_verification_key_error_is_value_error() -> None:
    assert issubclass(VerificationKeyError, ValueError)


def test_decode_hex_is_strict() -> None:
    assert decode_hex("00ff") == b"\x00\xff"
    with pytest.raises(ValueError):
        decode_hex("00 ff")
    with pytest.raises(ValueError):
        decode_hex("0")
