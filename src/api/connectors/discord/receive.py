"""Verificação e parsing inicial do webhook de interações (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord.interactions import (
    InteractionRequestError,
    decode_interaction_body,
)
from app.constants.discord import SIGNATURE_HEADER, TIMESTAMP_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.crypto import InteractionSignatureVerifier
    from app.protocols.models import Interaction


class InvalidSignatureError(InteractionRequestError):
    """Assinatura ausente ou inválida. Nunca detalhada ao chamador."""


def get_header(headers: Mapping[str, str], name: str) -> str:
    """Lê header sem depender de capitalização (vazio se ausente)."""
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    if value is None:
        lowered = name.lower()
        value = next((v for k, v in headers.items() if k.lower() == lowered), None)
    return value or ""


def parse_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: InteractionSignatureVerifier,
) -> Interaction:
    """Valida assinatura e decodifica a interação.

    A assinatura é verificada antes de qualquer leitura do body.

    Args:
        raw_body: Corpo bruto do request, exatamente como recebido
        headers: Headers recebidos
        verifier: Verificador construído no boot

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        MalformedInteractionError: Se o payload não for uma interação válida

    Returns:
        Variante da interação (Handshake ou CommandInvocation)
    """
    verified = verifier.verify(
        get_header(headers, SIGNATURE_HEADER),
        get_header(headers, TIMESTAMP_HEADER),
        raw_body,
    )
    if not verified:
        raise InvalidSignatureError("invalid_signature")

    return decode_interaction_body(raw_body)
