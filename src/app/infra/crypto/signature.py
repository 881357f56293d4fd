"""Verificação de assinatura Ed25519 das interações do Discord.

A mensagem assinada é a concatenação dos bytes do header de timestamp com
os bytes brutos do body, nessa ordem e sem delimitador. Qualquer
transformação (trim, re-encoding, re-serialização do JSON) quebra a
verificação contra o Discord.

Referência:
    https://discord.com/developers/docs/interactions/receiving-and-responding#security-and-authorization
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature

from .constants import SIGNATURE_SIZE
from .keys import decode_hex, load_verification_key

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

logger = logging.getLogger(__name__)


class InteractionSignatureVerifier:
    """Verifica assinaturas de interações contra uma chave pública fixa.

    Sem estado entre chamadas: a chave é decodificada na construção e só
    lida depois, então a mesma instância pode ser compartilhada por todas
    as requisições.
    """

    def __init__(self, public_key: Ed25519PublicKey) -> None:
        self._public_key = public_key

    @classmethod
    def from_hex(cls, public_key_hex: str | None) -> InteractionSignatureVerifier:
        """Cria verificador a partir da chave em hex.

        Raises:
            VerificationKeyError: Se a chave for inválida
        """
        return cls(load_verification_key(public_key_hex))

    def verify(
        self,
        signature: str | None,
        timestamp: str | bytes | None,
        body: bytes,
    ) -> bool:
        """Valida a assinatura de uma interação.

        Todas as falhas retornam apenas False. O motivo vai para o log
        interno e nunca para quem chamou o endpoint.

        Args:
            signature: Header X-Signature-Ed25519 (hex)
            timestamp: Header X-Signature-Timestamp (bytes opacos)
            body: Corpo bruto da requisição

        Returns:
            True se assinatura válida
        """
        if not signature:
            return _reject("signature_missing")

        try:
            raw_signature = decode_hex(signature)
        except ValueError:
            return _reject("signature_not_hex")

        if len(raw_signature) != SIGNATURE_SIZE:
            return _reject("signature_invalid_size", size=len(raw_signature))

        if not timestamp:
            return _reject("timestamp_missing")

        if isinstance(timestamp, str):
            # Headers HTTP chegam decodificados como latin-1
            try:
                timestamp = timestamp.encode("latin-1")
            except UnicodeEncodeError:
                return _reject("timestamp_not_latin1")

        try:
            self._public_key.verify(raw_signature, timestamp + body)
        except InvalidSignature:
            return _reject("signature_mismatch")

        return True


def verify_interaction_signature(
    signature: str | None,
    timestamp: str | bytes | None,
    body: bytes,
    public_key: Ed25519PublicKey,
) -> bool:
    """Atalho funcional para InteractionSignatureVerifier.verify."""
    return InteractionSignatureVerifier(public_key).verify(signature, timestamp, body)


def _reject(reason: str, **context: object) -> bool:
    logger.info(
        "interaction_signature_rejected",
        extra={"reason": reason, **context},
    )
    return False
