"""Protocolo de envio de SMS."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SmsMessage


class SmsSenderProtocol(Protocol):
    """Contrato mínimo para entregar um SMS ao gateway.

    Raises:
        SmsGatewayError: Se o gateway recusar ou estiver indisponível
    """

    async def send(self, message: SmsMessage) -> None: ...
