"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- discord/: webhook de interações (verificação + decodificação)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
