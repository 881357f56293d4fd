"""Contratos canônicos trocados entre api/ e app/.

Variantes de interação decodificadas do webhook, mensagem de SMS e
resultado do comando. Todos imutáveis e construídos por requisição.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.constants.discord import FailureReason


@dataclass(frozen=True, slots=True)
class Handshake:
    """Interação PING (type 1) enviada pelo Discord para validar o endpoint."""

    interaction_id: str = ""


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    """Interação APPLICATION_COMMAND (type 2).

    Attributes:
        interaction_id: ID da interação
        command_name: Nome do slash command invocado
        options: Opções do comando achatadas em nome -> valor
        user_id: ID do usuário que invocou (member.user ou user)
    """

    interaction_id: str = ""
    command_name: str = ""
    options: dict[str, Any] = field(default_factory=dict)
    user_id: str = ""

    def option(self, name: str) -> str:
        """Retorna a opção como string (vazia se ausente)."""
        value = self.options.get(name)
        return "" if value is None else str(value)


Interaction = Handshake | CommandInvocation


@dataclass(frozen=True, slots=True)
class SmsMessage:
    """Mensagem de SMS solicitada pelo comando."""

    from_number: str
    to_number: str
    content: str


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Resultado de uma execução do comando.

    Falhas de negócio não são exceções: viajam aqui como `reasons` e
    viram uma resposta type 4 estruturada.
    """

    success: bool
    message: SmsMessage
    reasons: tuple[FailureReason, ...] = ()

    @classmethod
    def succeeded(cls, message: SmsMessage) -> CommandOutcome:
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, message: SmsMessage, *reasons: FailureReason) -> CommandOutcome:
        if not reasons:
            raise ValueError("falha exige ao menos um motivo")
        return cls(success=False, message=message, reasons=tuple(reasons))
