"""Settings específicas de Discord.

Configurações do endpoint de interações do Discord. A chave pública é
obrigatória em qualquer ambiente: sem ela o endpoint não pode verificar
assinaturas e o serviço não deve subir.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Tamanho da chave pública Ed25519 em hex (32 bytes)
PUBLIC_KEY_HEX_LENGTH: int = 64

DEFAULT_COMMAND_NAME: str = "sms"


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública da aplicação (hex) para verificar interações
        command_name: Nome do slash command que dispara o envio de SMS
    """

    public_key: str = ""
    command_name: str = DEFAULT_COMMAND_NAME

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord."""
        errors: list[str] = []

        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif len(self.public_key) != PUBLIC_KEY_HEX_LENGTH:
            errors.append(
                f"DISCORD_PUBLIC_KEY deve ter {PUBLIC_KEY_HEX_LENGTH} caracteres hex"
            )

        if not self.command_name:
            errors.append("DISCORD_COMMAND_NAME não pode ser vazio")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        command_name=os.getenv("DISCORD_COMMAND_NAME", DEFAULT_COMMAND_NAME),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
