"""Cliente HTTP do gateway de SMS.

Uma tentativa por mensagem, sem retry: a resposta ao Discord precisa sair
dentro da janela síncrona da interação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from utils.errors import SmsGatewayError

if TYPE_CHECKING:
    from app.protocols.models import SmsMessage
    from config.settings import SmsSettings

logger = logging.getLogger(__name__)


class HttpSmsSender:
    """Envia SMS via POST JSON para o endpoint do gateway.

    Logs nunca carregam números, conteúdo ou a api key.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: SmsSettings) -> HttpSmsSender:
        return cls(
            endpoint=settings.send_endpoint,
            api_key=settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
        )

    async def send(self, message: SmsMessage) -> None:
        """Entrega a mensagem ao gateway.

        Raises:
            SmsGatewayError: Em erro de conexão, timeout ou status não-2xx
        """
        if not self._api_key:
            raise SmsGatewayError("sms_api_key_missing")

        payload = {
            "from": message.from_number,
            "to": message.to_number,
            "content": message.content,
        }
        headers = {"x-api-key": self._api_key, "Accept": "application/json"}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self._endpoint, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise SmsGatewayError("sms_gateway_timeout") from exc
        except httpx.HTTPError as exc:
            raise SmsGatewayError("sms_gateway_connection_error") from exc

        if response.is_success:
            logger.info("sms_gateway_accepted", extra={"status_code": response.status_code})
            return

        logger.warning("sms_gateway_rejected", extra={"status_code": response.status_code})
        raise SmsGatewayError("sms_gateway_rejected", status_code=response.status_code)
