"""Módulo de criptografia para interações do Discord.

Verificação Ed25519 de requisições recebidas no webhook. Localizado em
app/infra/ para que bootstrap e rotas dependam da mesma implementação.
"""

from .constants import PUBLIC_KEY_SIZE, SIGNATURE_SIZE
from .errors import VerificationKeyError
from .keys import decode_hex, load_verification_key
from .signature import InteractionSignatureVerifier, verify_interaction_signature

__all__ = [
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "InteractionSignatureVerifier",
    "VerificationKeyError",
    "decode_hex",
    "load_verification_key",
    "verify_interaction_signature",
]
