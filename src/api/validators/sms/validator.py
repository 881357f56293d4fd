"""Validação de mensagens SMS antes do envio ao gateway."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from api.validators.sms.limits import E164_PATTERN, MAX_CONTENT_LENGTH
from app.constants.discord import FailureReason

if TYPE_CHECKING:
    from app.protocols.models import SmsMessage

_E164 = re.compile(E164_PATTERN)


def is_valid_phone_number(value: str) -> bool:
    """Retorna True se o número estiver em formato E.164."""
    return bool(_E164.fullmatch(value))


class SmsMessageValidator:
    """Valida remetente, destinatário e conteúdo de um SMS.

    Coleta todos os problemas em vez de parar no primeiro, para que a
    resposta ao usuário liste tudo de uma vez.
    """

    def __init__(self, max_content_length: int = MAX_CONTENT_LENGTH) -> None:
        self._max_content_length = max_content_length

    def validate(self, message: SmsMessage) -> list[FailureReason]:
        reasons: list[FailureReason] = []

        if not is_valid_phone_number(message.to_number):
            reasons.append(FailureReason.INVALID_TO)

        if not is_valid_phone_number(message.from_number):
            reasons.append(FailureReason.INVALID_FROM)

        if not message.content or len(message.content) > self._max_content_length:
            reasons.append(FailureReason.INVALID_CONTENT)

        return reasons
