"""Decodificação tipada do payload de interação (após verificação).

O discriminante `type` é extraído e validado antes de qualquer outro campo;
depois só os campos da variante correspondente são lidos. Formatos
inesperados viram MalformedInteractionError, nunca um cast inválido.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from app.constants.discord import InteractionType
from app.protocols.models import CommandInvocation, Handshake, Interaction


class InteractionRequestError(ValueError):
    """Erro base para falhas de requisição de interação."""


class MalformedInteractionError(InteractionRequestError):
    """Payload ilegível ou com discriminante ausente/desconhecido.

    A mensagem é segura para ecoar ao chamador.
    """


def decode_interaction_body(raw_body: bytes) -> Interaction:
    """Parseia o body JSON e decodifica a variante da interação.

    Raises:
        MalformedInteractionError: Se o JSON for inválido ou a variante não
            for reconhecida
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedInteractionError(f"invalid_json: {exc}") from exc

    if not isinstance(payload, Mapping):
        raise MalformedInteractionError("payload_not_object")

    return parse_interaction(payload)


def parse_interaction(payload: Mapping[str, Any]) -> Interaction:
    """Decodifica um payload já parseado na variante correspondente."""
    interaction_type = extract_interaction_type(payload)
    interaction_id = _as_id(payload.get("id"))

    if interaction_type == InteractionType.PING:
        return Handshake(interaction_id=interaction_id)

    if interaction_type == InteractionType.APPLICATION_COMMAND:
        return _parse_command(payload, interaction_id)

    raise MalformedInteractionError(f"unknown_type: {interaction_type}")


def extract_interaction_type(payload: Mapping[str, Any]) -> int:
    """Extrai o discriminante numérico `type`.

    Aceita inteiros e floats integrais (1.0). Rejeita bool, string, null e
    números não integrais.
    """
    if "type" not in payload:
        raise MalformedInteractionError("missing_type")

    raw_type = payload["type"]
    if isinstance(raw_type, bool) or not isinstance(raw_type, int | float):
        raise MalformedInteractionError("type_not_numeric")

    if isinstance(raw_type, float):
        if not raw_type.is_integer():
            raise MalformedInteractionError("type_not_numeric")
        return int(raw_type)

    return raw_type


def _parse_command(payload: Mapping[str, Any], interaction_id: str) -> CommandInvocation:
    data = payload.get("data")
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise MalformedInteractionError("command_data_not_object")

    name = data.get("name", "")
    if not isinstance(name, str):
        raise MalformedInteractionError("command_name_not_string")

    return CommandInvocation(
        interaction_id=interaction_id,
        command_name=name,
        options=_flatten_options(data.get("options")),
        user_id=_extract_user_id(payload),
    )


def _flatten_options(raw_options: Any) -> dict[str, Any]:
    """Achata opções (inclusive de subcomandos) em nome -> valor."""
    if raw_options is None:
        return {}
    if not isinstance(raw_options, list):
        raise MalformedInteractionError("command_options_not_list")

    flattened: dict[str, Any] = {}
    for option in raw_options:
        if not isinstance(option, Mapping) or not isinstance(option.get("name"), str):
            raise MalformedInteractionError("command_option_invalid")
        if "options" in option:
            flattened.update(_flatten_options(option["options"]))
        elif "value" in option:
            flattened[option["name"]] = option["value"]
    return flattened


def _extract_user_id(payload: Mapping[str, Any]) -> str:
    # Em servidores o usuário vem em member.user; em DMs, em user
    member = payload.get("member")
    if isinstance(member, Mapping) and isinstance(member.get("user"), Mapping):
        return _as_id(member["user"].get("id"))
    user = payload.get("user")
    if isinstance(user, Mapping):
        return _as_id(user.get("id"))
    return ""


def _as_id(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, str | int):
        return ""
    return str(value)
