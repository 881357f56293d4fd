"""Builders das respostas síncronas do webhook de interações."""

from api.payload_builders.discord.interaction_response import (
    FAILURE_CONTENT,
    FAILURE_TITLES,
    SUCCESS_CONTENT,
    InteractionResponseBuilder,
)
from api.payload_builders.discord.models import (
    AcknowledgeResponse,
    CommandResultResponse,
    Embed,
    EmbedField,
    InteractionResponse,
    MessageData,
)

__all__ = [
    "FAILURE_CONTENT",
    "FAILURE_TITLES",
    "SUCCESS_CONTENT",
    "AcknowledgeResponse",
    "CommandResultResponse",
    "Embed",
    "EmbedField",
    "InteractionResponse",
    "InteractionResponseBuilder",
    "MessageData",
]
