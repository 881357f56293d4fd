"""Observabilidade — correlation_id e métricas em logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_interaction, record_latency
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_interaction, record_latency

__all__ = [
    "CORRELATION_HEADER",
    "get_correlation_id",
    "record_interaction",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
