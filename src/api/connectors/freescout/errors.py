"""Erro de requisição rejeitada pela API do FreeScout."""

from __future__ import annotations

from utils.errors import IntegrationError


class FreeScoutRequestError(IntegrationError):
    """Resposta com status fora da faixa de sucesso.

    A mensagem é o corpo cru devolvido pelo servidor; a plataforma
    chamadora é responsável por apresentá-lo.
    """

    def __init__(self, body: str, status_code: int) -> None:
        super().__init__(body)
        self.body = body
        self.status_code = status_code
