"""Protocolos de validação do comando de SMS."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.constants.discord import FailureReason

    from .models import SmsMessage


class SmsMessageValidatorProtocol(Protocol):
    """Contrato mínimo para validar uma mensagem antes do envio.

    Retorna todos os motivos de falha encontrados (vazio = válida).
    """

    def validate(self, message: SmsMessage) -> list[FailureReason]: ...
