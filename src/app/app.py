"""Entrypoint da aplicação.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    create_interaction_dispatcher,
    create_interaction_verifier,
    create_sms_command_handler,
    initialize_app,
    validate_runtime_settings,
)
from app.infra.crypto import VerificationKeyError
from config.logging import get_logger
from config.settings import get_base_settings, get_discord_settings, get_sms_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Decodifica a chave pública uma única vez (fatal se inválida)
    - Monta dispatcher e handler de comando

    Raises:
        VerificationKeyError: Se DISCORD_PUBLIC_KEY estiver ausente ou inválida
    """
    logger.info("app_starting")
    validate_runtime_settings()

    discord_settings = get_discord_settings()
    try:
        verifier = create_interaction_verifier(discord_settings)
    except VerificationKeyError as exc:
        logger.critical("verification_key_invalid", extra={"error": str(exc)})
        raise

    app.state.interaction_verifier = verifier
    app.state.interaction_dispatcher = create_interaction_dispatcher(
        create_sms_command_handler(discord_settings, get_sms_settings())
    )

    yield

    logger.info("app_shutting_down")
    app.state.interaction_verifier = None
    app.state.interaction_dispatcher = None


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        debug=get_base_settings().debug,
        title="SMS Discord Bridge",
        description="Webhook de interações do Discord para envio de SMS",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting SMS Discord Bridge in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
