"""Protocolos e contratos do core da aplicação."""

from .command_handler import CommandHandlerProtocol
from .models import (
    CommandInvocation,
    CommandOutcome,
    Handshake,
    Interaction,
    SmsMessage,
)
from .response_builder import EncodableResponse, InteractionResponseBuilderProtocol
from .sms_sender import SmsSenderProtocol
from .validator import SmsMessageValidatorProtocol

__all__ = [
    "CommandHandlerProtocol",
    "CommandInvocation",
    "CommandOutcome",
    "EncodableResponse",
    "Handshake",
    "Interaction",
    "InteractionResponseBuilderProtocol",
    "SmsMessage",
    "SmsMessageValidatorProtocol",
    "SmsSenderProtocol",
]
