"""Use cases do webhook de interações do Discord."""

from .dispatch_interaction import InteractionDispatcher
from .send_sms_command import (
    OPTION_FROM,
    OPTION_MESSAGE,
    OPTION_TO,
    SendSmsCommandHandler,
    sms_message_from_command,
)

__all__ = [
    "OPTION_FROM",
    "OPTION_MESSAGE",
    "OPTION_TO",
    "InteractionDispatcher",
    "SendSmsCommandHandler",
    "sms_message_from_command",
]
