"""Carregamento da chave pública Ed25519 de verificação."""

from __future__ import annotations

import binascii

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .constants import PUBLIC_KEY_SIZE
from .errors import VerificationKeyError


def decode_hex(value: str) -> bytes:
    """Decodifica hex estrito (sem espaços, comprimento par).

    Raises:
        ValueError: Se o valor não for hex válido
    """
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex: {exc}") from exc


def load_verification_key(public_key_hex: str | None) -> Ed25519PublicKey:
    """Decodifica a chave pública configurada (hex) uma única vez.

    Args:
        public_key_hex: Chave pública da aplicação Discord em hex

    Returns:
        Objeto de chave pública Ed25519

    Raises:
        VerificationKeyError: Se chave ausente, hex inválido ou tamanho errado
    """
    if not public_key_hex:
        raise VerificationKeyError("missing_public_key")

    try:
        raw_key = decode_hex(public_key_hex)
    except ValueError as exc:
        raise VerificationKeyError("public_key_not_hex") from exc

    if len(raw_key) != PUBLIC_KEY_SIZE:
        raise VerificationKeyError(f"public_key_invalid_size: {len(raw_key)}")

    try:
        return Ed25519PublicKey.from_public_bytes(raw_key)
    except ValueError as exc:
        raise VerificationKeyError(f"public_key_rejected: {exc}") from exc
