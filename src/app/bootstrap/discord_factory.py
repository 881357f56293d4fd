"""Factory de wiring para o webhook de interações do Discord (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.discord import InteractionResponseBuilder
from api.validators.sms import SmsMessageValidator
from app.infra.crypto import InteractionSignatureVerifier
from app.infra.sms import HttpSmsSender
from app.use_cases.discord import InteractionDispatcher, SendSmsCommandHandler

if TYPE_CHECKING:
    from app.protocols.command_handler import CommandHandlerProtocol
    from app.protocols.sms_sender import SmsSenderProtocol
    from config.settings import DiscordSettings, SmsSettings


def create_interaction_verifier(settings: DiscordSettings) -> InteractionSignatureVerifier:
    """Decodifica a chave pública uma única vez e cria o verificador.

    Raises:
        VerificationKeyError: Se DISCORD_PUBLIC_KEY estiver ausente ou inválida
    """
    return InteractionSignatureVerifier.from_hex(settings.public_key)


def create_sms_command_handler(
    discord_settings: DiscordSettings,
    sms_settings: SmsSettings,
    sender: SmsSenderProtocol | None = None,
) -> SendSmsCommandHandler:
    """Cria o handler do comando de SMS com validator e sender injetados."""
    return SendSmsCommandHandler(
        validator=SmsMessageValidator(),
        sender=sender or HttpSmsSender.from_settings(sms_settings),
        command_name=discord_settings.command_name,
    )


def create_interaction_dispatcher(command_handler: CommandHandlerProtocol) -> InteractionDispatcher:
    """Cria o dispatcher com o builder de respostas padrão."""
    return InteractionDispatcher(
        command_handler=command_handler,
        response_builder=InteractionResponseBuilder(),
    )
