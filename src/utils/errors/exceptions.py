"""Exceções de domínio para falhas de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura externas ao serviço."""


class SmsGatewayError(InfrastructureError):
    """Falha ao entregar mensagem ao gateway de SMS.

    Attributes:
        status_code: Status HTTP retornado pelo gateway (se houver)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
