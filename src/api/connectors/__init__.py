"""Connectors por sistema externo: adapters de borda para APIs de terceiros.

Estrutura:
- freescout/: FreeScout helpdesk REST API

Cada sistema tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
