"""Validators por canal — validação antes de chamar APIs externas.

Estrutura:
- sms/: números E.164 e limites de conteúdo
"""

__all__: list[str] = []
