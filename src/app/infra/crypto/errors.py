"""Erros de criptografia para verificação de interações.

Definido em app/infra para manter boundaries corretas.
"""


class VerificationKeyError(ValueError):
    """Chave pública de verificação ausente ou inválida.

    Erro de configuração: deve impedir o boot do serviço, nunca ser
    tratado por requisição.
    """
