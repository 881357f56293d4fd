"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: dispatcher de interações e comando de SMS
- infra/: implementações concretas de IO (crypto, gateway SMS)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em logs
- constants/: constantes da aplicação

Padrão: app executa; api adapta; utils apoia.
"""
