"""Exceções utilitárias compartilhadas."""

from .exceptions import InfrastructureError, SmsGatewayError

__all__ = [
    "InfrastructureError",
    "SmsGatewayError",
]
