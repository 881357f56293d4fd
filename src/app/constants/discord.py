"""Enums e constantes de domínio para interações do Discord."""

from __future__ import annotations

from enum import IntEnum, StrEnum

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"

# Cores dos embeds (inteiro RGB, como a API do Discord espera)
COLOR_VALIDATION_ERROR = 14681092  # 0xE00404
COLOR_DELIVERY_ERROR = 15105570  # 0xE67E22


class InteractionType(IntEnum):
    """Discriminante `type` das interações recebidas."""

    PING = 1
    APPLICATION_COMMAND = 2


class FailureReason(StrEnum):
    """Categorias de falha de negócio do comando de SMS."""

    INVALID_TO = "invalid_to"
    INVALID_FROM = "invalid_from"
    INVALID_CONTENT = "invalid_content"
    UNKNOWN_COMMAND = "unknown_command"
    SEND_FAILED = "send_failed"
    INTERNAL_ERROR = "internal_error"
