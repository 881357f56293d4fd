"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois pelo
backend de logs (Cloud Logging, CloudWatch Insights, etc).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Interação: contador de interações por tipo e resultado

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("dispatcher", "dispatch", (time.perf_counter() - start) * 1000)
    record_interaction(interaction_type=2, result="command_failed")
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "dispatcher", "sms_sender")
        operation: Nome da operação (ex: "dispatch", "send")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id

    logger.info("metric_latency", extra=extra)


def record_interaction(
    interaction_type: int | None,
    result: str,
    reasons: list[str] | None = None,
) -> None:
    """Registra o resultado de uma interação recebida.

    Args:
        interaction_type: Discriminante recebido (None se ilegível)
        result: Resultado (ex: "acknowledged", "command_succeeded", "unauthorized")
        reasons: Motivos de falha do comando, quando houver
    """
    extra: dict[str, object] = {
        "metric_type": "interaction",
        "interaction_type": interaction_type,
        "result": result,
    }
    if reasons:
        extra["reasons"] = reasons

    logger.info("metric_interaction", extra=extra)
