"""Settings específicas de SMS.

Configurações do gateway HTTP usado para enviar as mensagens disparadas
pelo slash command.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SMS_API_BASE_URL: str = "https://api.httpsms.com"


@dataclass(frozen=True)
class SmsSettings:
    """Configurações do gateway de SMS.

    Attributes:
        api_base_url: URL base da API do gateway
        api_key: Chave de API enviada no header x-api-key
        request_timeout_seconds: Timeout para requisições HTTP
    """

    api_base_url: str = SMS_API_BASE_URL
    api_key: str = ""
    request_timeout_seconds: float = 10.0

    @property
    def send_endpoint(self) -> str:
        """URL completa do endpoint de envio."""
        return f"{self.api_base_url.rstrip('/')}/v1/messages/send"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SMS."""
        errors: list[str] = []

        if not self.api_key:
            errors.append("SMS_API_KEY não configurado")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("SMS_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SMS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SmsSettings:
    """Carrega SmsSettings de variáveis de ambiente."""
    return SmsSettings(
        api_base_url=os.getenv("SMS_API_BASE_URL", SMS_API_BASE_URL),
        api_key=os.getenv("SMS_API_KEY", ""),
        request_timeout_seconds=float(os.getenv("SMS_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings."""
    return _load_from_env()
