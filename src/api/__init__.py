"""API — camada de borda do webhook do Discord.

Responsabilidades:
- Receber interações do Discord (webhook)
- Validar assinaturas e decodificar payloads
- Construir as respostas síncronas de interação
- Aplicar validações e limites do SMS

Subpastas:
- connectors/: verificação + decodificação de interações
- payload_builders/: construção das respostas de interação
- validators/: validação de mensagens SMS
- routes/: endpoints HTTP (interações, health)

NÃO PODE conter: envio de SMS, orquestração de use cases.
"""
