"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.discord import (
    DEFAULT_COMMAND_NAME,
    PUBLIC_KEY_HEX_LENGTH,
    DiscordSettings,
    get_discord_settings,
)
from config.settings.sms import (
    SMS_API_BASE_URL,
    SmsSettings,
    get_sms_settings,
)

__all__ = [
    # Constants
    "DEFAULT_COMMAND_NAME",
    "PUBLIC_KEY_HEX_LENGTH",
    "SMS_API_BASE_URL",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    "SmsSettings",
    "get_base_settings",
    "get_discord_settings",
    "get_sms_settings",
]
