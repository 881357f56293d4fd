"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- discord/: respostas síncronas de interação (type 1 e type 4)
"""

__all__: list[str] = []
