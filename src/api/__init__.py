"""API: camada de borda com sistemas externos.

Responsabilidades:
- Montar requests para APIs de terceiros
- Autenticar chamadas
- Normalizar respostas para a plataforma chamadora

Subpastas:
- connectors/: adapters HTTP por sistema externo

NÃO PODE conter: configuração de processo, wiring ou logging global.
"""
