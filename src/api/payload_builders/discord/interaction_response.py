"""Builder das respostas síncronas de interação.

Dado um resultado de comando (sucesso ou falha com motivos), produz sempre
o mesmo registro de resposta. Falhas viram embeds legíveis: um título com
cor por categoria e um embed com os campos From/To/Content da requisição.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.discord.models import (
    AcknowledgeResponse,
    CommandResultResponse,
    Embed,
    EmbedField,
    MessageData,
)
from app.constants.discord import (
    COLOR_DELIVERY_ERROR,
    COLOR_VALIDATION_ERROR,
    FailureReason,
)

if TYPE_CHECKING:
    from app.protocols.models import CommandOutcome, SmsMessage

SUCCESS_CONTENT = "*✔ SMS message sent*"
FAILURE_CONTENT = "*⚠ could not send SMS message*"

# Limite da API do Discord para valor de campo de embed
MAX_FIELD_VALUE_LENGTH = 1024
EMPTY_FIELD_VALUE = "-"

FAILURE_TITLES: dict[FailureReason, tuple[str, int]] = {
    FailureReason.INVALID_TO: (
        "The to field is not a valid phone number",
        COLOR_VALIDATION_ERROR,
    ),
    FailureReason.INVALID_FROM: (
        "The from field is not a valid phone number",
        COLOR_VALIDATION_ERROR,
    ),
    FailureReason.INVALID_CONTENT: (
        "The message field must contain between 1 and 1600 characters",
        COLOR_VALIDATION_ERROR,
    ),
    FailureReason.UNKNOWN_COMMAND: (
        "This command is not supported",
        COLOR_VALIDATION_ERROR,
    ),
    FailureReason.SEND_FAILED: (
        "The SMS gateway could not send the message",
        COLOR_DELIVERY_ERROR,
    ),
    FailureReason.INTERNAL_ERROR: (
        "An unexpected error happened while sending the message",
        COLOR_DELIVERY_ERROR,
    ),
}


class InteractionResponseBuilder:
    """Monta respostas Acknowledge e CommandResult."""

    def build_acknowledge(self) -> AcknowledgeResponse:
        return AcknowledgeResponse()

    def build_command_result(self, outcome: CommandOutcome) -> CommandResultResponse:
        """Constrói resposta type 4 a partir do resultado do comando.

        Args:
            outcome: Resultado do handler de comando

        Returns:
            Resposta com conteúdo e embeds (nunca vazia)
        """
        details = _message_fields_embed(outcome.message)

        if outcome.success:
            return CommandResultResponse(
                data=MessageData(content=SUCCESS_CONTENT, embeds=[details])
            )

        embeds = [_failure_embed(reason) for reason in outcome.reasons]
        embeds.append(details)
        return CommandResultResponse(
            data=MessageData(content=FAILURE_CONTENT, embeds=embeds)
        )


def _failure_embed(reason: FailureReason) -> Embed:
    title, color = FAILURE_TITLES[reason]
    return Embed(title=title, color=color)


def _message_fields_embed(message: SmsMessage) -> Embed:
    return Embed(
        fields=[
            EmbedField(name="From:", value=_field_value(message.from_number), inline=True),
            EmbedField(name="To:", value=_field_value(message.to_number), inline=True),
            EmbedField(name="Content:", value=_field_value(message.content)),
        ]
    )


def _field_value(value: str) -> str:
    # Discord rejeita campos com valor vazio
    if not value:
        return EMPTY_FIELD_VALUE
    if len(value) > MAX_FIELD_VALUE_LENGTH:
        return value[: MAX_FIELD_VALUE_LENGTH - 1] + "…"
    return value
