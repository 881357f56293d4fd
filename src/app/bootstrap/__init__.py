"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.bootstrap.discord_factory import (
    create_interaction_dispatcher,
    create_interaction_verifier,
    create_sms_command_handler,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_sms_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local. A chave
    pública do Discord é fatal em qualquer ambiente, mas isso é garantido
    por create_interaction_verifier no lifespan.

    Raises:
        RuntimeError: Se a configuração for inválida em ambiente estrito
    """
    base_settings = get_base_settings()

    errors = [f"base: {error}" for error in base_settings.validate()]
    errors.extend(f"discord: {error}" for error in get_discord_settings().validate())
    errors.extend(f"sms: {error}" for error in get_sms_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base_settings.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base_settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base_settings.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base_settings.environment}:\n{details}")


__all__ = [
    "create_interaction_dispatcher",
    "create_interaction_verifier",
    "create_sms_command_handler",
    "initialize_app",
    "validate_runtime_settings",
]
