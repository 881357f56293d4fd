"""Protocolos de construção de respostas síncronas de interação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import CommandOutcome


class EncodableResponse(Protocol):
    """Resposta com um único passo explícito de serialização."""

    def to_payload(self) -> dict[str, Any]: ...


class InteractionResponseBuilderProtocol(Protocol):
    """Contrato mínimo para montar as respostas do dispatcher."""

    def build_acknowledge(self) -> EncodableResponse: ...

    def build_command_result(self, outcome: CommandOutcome) -> EncodableResponse: ...
