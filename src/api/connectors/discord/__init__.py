"""Webhook de interações do Discord: assinatura e decodificação segura."""

from .interactions import (
    InteractionRequestError,
    MalformedInteractionError,
    decode_interaction_body,
    extract_interaction_type,
    parse_interaction,
)
from .receive import InvalidSignatureError, get_header, parse_interaction_request

__all__ = [
    "InteractionRequestError",
    "InvalidSignatureError",
    "MalformedInteractionError",
    "decode_interaction_body",
    "extract_interaction_type",
    "get_header",
    "parse_interaction",
    "parse_interaction_request",
]
