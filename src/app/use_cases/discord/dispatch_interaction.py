"""Dispatcher de interações verificadas.

Máquina de estados sobre o discriminante já decodificado:

    Handshake          -> Acknowledge (type 1)
    CommandInvocation  -> aguarda o handler -> CommandResult (type 4)

Discriminantes desconhecidos nunca chegam aqui: a decodificação os rejeita
como requisição malformada. Todo caminho termina em exatamente uma resposta.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.discord import FailureReason, InteractionType
from app.observability import record_interaction
from app.protocols.models import CommandInvocation, Handshake

if TYPE_CHECKING:
    from app.protocols.command_handler import CommandHandlerProtocol
    from app.protocols.models import CommandOutcome, Interaction
    from app.protocols.response_builder import (
        EncodableResponse,
        InteractionResponseBuilderProtocol,
    )

logger = logging.getLogger(__name__)


class InteractionDispatcher:
    """Produz a resposta síncrona de cada interação verificada."""

    def __init__(
        self,
        command_handler: CommandHandlerProtocol,
        response_builder: InteractionResponseBuilderProtocol,
    ) -> None:
        self._command_handler = command_handler
        self._response_builder = response_builder

    async def dispatch(self, interaction: Interaction) -> EncodableResponse:
        """Executa a transição correspondente à variante.

        Args:
            interaction: Variante decodificada de uma requisição verificada

        Returns:
            Resposta pronta para serialização
        """
        if isinstance(interaction, Handshake):
            record_interaction(InteractionType.PING, "acknowledged")
            return self._response_builder.build_acknowledge()

        if isinstance(interaction, CommandInvocation):
            outcome = await self._run_command(interaction)
            record_interaction(
                InteractionType.APPLICATION_COMMAND,
                "command_succeeded" if outcome.success else "command_failed",
                [str(reason) for reason in outcome.reasons],
            )
            return self._response_builder.build_command_result(outcome)

        raise TypeError(f"variante de interação não suportada: {type(interaction).__name__}")

    async def _run_command(self, command: CommandInvocation) -> CommandOutcome:
        try:
            return await self._command_handler.handle(command)
        except Exception:
            # Falha inesperada vira resposta type 4, nunca erro de transporte
            logger.exception(
                "command_handler_failed",
                extra={
                    "interaction_id": command.interaction_id,
                    "command_name": command.command_name,
                },
            )
            return self._command_handler.failure_outcome(command, FailureReason.INTERNAL_ERROR)
