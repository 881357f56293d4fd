"""Modelos das respostas síncronas de interação do Discord."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class EmbedField(BaseModel):
    """Campo rotulado dentro de um embed."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = False


class Embed(BaseModel):
    """Embed com par título/cor ou lista de campos."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    color: int | None = None
    fields: list[EmbedField] | None = None


class MessageData(BaseModel):
    """Conteúdo da mensagem enviada no canal."""

    model_config = ConfigDict(frozen=True)

    content: str
    embeds: list[Embed] = Field(default_factory=list)


class AcknowledgeResponse(BaseModel):
    """Resposta ao PING (type 1)."""

    model_config = ConfigDict(frozen=True)

    type: Literal[1] = 1

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class CommandResultResponse(BaseModel):
    """Resposta ao slash command (type 4, CHANNEL_MESSAGE_WITH_SOURCE)."""

    model_config = ConfigDict(frozen=True)

    type: Literal[4] = 4
    data: MessageData

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


InteractionResponse = AcknowledgeResponse | CommandResultResponse
