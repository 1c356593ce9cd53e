"""App: wiring, contratos e observabilidade.

Subpastas:
- bootstrap/: composition root (factories, inicialização de logging)
- protocols/: contratos/interfaces expostos à plataforma
- observability/: correlation_id para logs estruturados

Padrão: app conecta; api adapta; config configura; utils apoia.
"""
