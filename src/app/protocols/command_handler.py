"""Protocolo do handler de comandos invocado pelo dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.constants.discord import FailureReason

    from .models import CommandInvocation, CommandOutcome


class CommandHandlerProtocol(Protocol):
    """Contrato mínimo para executar um slash command.

    Falhas de negócio devem ser retornadas no CommandOutcome.
    """

    async def handle(self, command: CommandInvocation) -> CommandOutcome: ...

    def failure_outcome(
        self,
        command: CommandInvocation,
        *reasons: FailureReason,
    ) -> CommandOutcome:
        """Monta um resultado de falha com os campos lidos do comando."""
        ...
