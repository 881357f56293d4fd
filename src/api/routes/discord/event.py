"""Endpoint de interações do Discord.

Endpoint:
- POST /discord/event: recebe interações (PING e slash commands)

Fluxo:
1. Verifica a assinatura Ed25519 sobre timestamp + body bruto
2. Decodifica a variante da interação
3. Dispatcher produz a resposta síncrona (type 1 ou type 4)

Segurança:
- Assinatura obrigatória, sem exceção por ambiente
- Falha de assinatura responde 401 genérico; o motivo fica só no log
- A resposta sai dentro da janela síncrona da interação
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.discord import (
    InvalidSignatureError,
    MalformedInteractionError,
    parse_interaction_request,
)
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    record_interaction,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/event", response_model=None)
async def receive_interaction(request: Request) -> Response:
    """Recebe uma interação, verifica e responde de forma síncrona.

    Returns:
        JSON da resposta de interação, 401 (assinatura) ou 400 (payload).
    """
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    started_at = time.perf_counter()

    try:
        verifier = getattr(request.app.state, "interaction_verifier", None)
        dispatcher = getattr(request.app.state, "interaction_dispatcher", None)
        if verifier is None or dispatcher is None:
            logger.error(
                "interaction_endpoint_not_configured",
                extra={"channel": "discord", "correlation_id": get_correlation_id()},
            )
            return Response(
                content="Service Unavailable",
                media_type="text/plain",
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        # Body bruto: a assinatura cobre exatamente estes bytes
        raw_body = await request.body()

        try:
            interaction = parse_interaction_request(raw_body, request.headers, verifier)
        except InvalidSignatureError:
            logger.warning(
                "interaction_signature_invalid",
                extra={"channel": "discord", "payload_size": len(raw_body)},
            )
            record_interaction(None, "unauthorized")
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except MalformedInteractionError as exc:
            logger.warning(
                "interaction_payload_invalid",
                extra={"channel": "discord", "error": str(exc)},
            )
            record_interaction(None, "malformed")
            return JSONResponse(
                content={"status": "error", "message": "bad request", "data": str(exc)},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        response = await dispatcher.dispatch(interaction)
        logger.info(
            "interaction_dispatched",
            extra={
                "channel": "discord",
                "interaction_kind": type(interaction).__name__,
                "interaction_id": interaction.interaction_id,
            },
        )
        return JSONResponse(content=response.to_payload(), status_code=status.HTTP_200_OK)

    finally:
        record_latency(
            "discord_webhook",
            "receive_interaction",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        reset_correlation_id(token)
