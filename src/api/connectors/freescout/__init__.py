"""Conector FreeScout: adapter de borda para a REST API do helpdesk.

Este módulo é o único ponto de IO com o FreeScout.
Responsabilidades:
- Transporte HTTP autenticado por API key
- Operações CRUD para a plataforma low-code
- Paginação da listagem de conversas
- Modelos de query e envelope de página
"""

from .datasource import FreeScoutDataSource, build_conversations_url
from .errors import FreeScoutRequestError
from .http_client import FreeScoutHttpClient, decode_body, is_success_status
from .models import (
    ConversationPage,
    DeleteQuery,
    ReadQuery,
    RequestOptions,
    WriteQuery,
)

__all__ = [
    "ConversationPage",
    "DeleteQuery",
    "FreeScoutDataSource",
    "FreeScoutHttpClient",
    "FreeScoutRequestError",
    "ReadQuery",
    "RequestOptions",
    "WriteQuery",
    "build_conversations_url",
    "decode_body",
    "is_success_status",
]
