"""Use case do slash command que envia SMS."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.constants.discord import FailureReason
from app.observability import record_latency
from app.protocols.models import CommandOutcome, SmsMessage
from utils.errors import SmsGatewayError

if TYPE_CHECKING:
    from app.protocols.models import CommandInvocation
    from app.protocols.sms_sender import SmsSenderProtocol
    from app.protocols.validator import SmsMessageValidatorProtocol

logger = logging.getLogger(__name__)

OPTION_FROM = "from"
OPTION_TO = "to"
OPTION_MESSAGE = "message"


def sms_message_from_command(command: CommandInvocation) -> SmsMessage:
    """Lê from/to/message das opções do comando (vazias se ausentes)."""
    return SmsMessage(
        from_number=command.option(OPTION_FROM).strip(),
        to_number=command.option(OPTION_TO).strip(),
        content=command.option(OPTION_MESSAGE),
    )


class SendSmsCommandHandler:
    """Orquestra validação e envio do SMS pedido no comando.

    Falhas de validação e do gateway voltam como CommandOutcome, nunca
    como exceção.
    """

    def __init__(
        self,
        validator: SmsMessageValidatorProtocol,
        sender: SmsSenderProtocol,
        command_name: str,
    ) -> None:
        self._validator = validator
        self._sender = sender
        self._command_name = command_name

    def failure_outcome(
        self,
        command: CommandInvocation,
        *reasons: FailureReason,
    ) -> CommandOutcome:
        """Falha carregando from/to/message lidos do comando."""
        return CommandOutcome.failed(sms_message_from_command(command), *reasons)

    async def handle(self, command: CommandInvocation) -> CommandOutcome:
        message = sms_message_from_command(command)

        if command.command_name != self._command_name:
            logger.info(
                "sms_command_unknown",
                extra={
                    "command_name": command.command_name,
                    "interaction_id": command.interaction_id,
                },
            )
            return self.failure_outcome(command, FailureReason.UNKNOWN_COMMAND)

        reasons = self._validator.validate(message)
        if reasons:
            logger.info(
                "sms_command_invalid",
                extra={
                    "interaction_id": command.interaction_id,
                    "reasons": [str(reason) for reason in reasons],
                },
            )
            return CommandOutcome.failed(message, *reasons)

        started_at = time.perf_counter()
        try:
            await self._sender.send(message)
        except SmsGatewayError as exc:
            logger.warning(
                "sms_command_send_failed",
                extra={
                    "interaction_id": command.interaction_id,
                    "error": str(exc),
                    "status_code": exc.status_code,
                },
            )
            return CommandOutcome.failed(message, FailureReason.SEND_FAILED)
        finally:
            record_latency("sms_sender", "send", (time.perf_counter() - started_at) * 1000)

        logger.info(
            "sms_command_sent",
            extra={"interaction_id": command.interaction_id, "user_id": command.user_id},
        )
        return CommandOutcome.succeeded(message)
