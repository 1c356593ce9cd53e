"""Cliente HTTP do FreeScout: camada de transporte do datasource.

Uma chamada por invocação, sem retry:
- Injeta `X-FreeScout-API-Key` depois dos headers do chamador (sempre vence)
- Status <= 300 é sucesso; acima disso, FreeScoutRequestError com o corpo cru
- Corpo JSON quando o content-type indica json; texto cru caso contrário
  ou quando o JSON é inválido (fallback nunca propaga erro)
- Erros de rede do httpx propagam sem reclassificação
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from api.connectors.freescout.errors import FreeScoutRequestError
from api.connectors.freescout.freescout_logging import (
    log_request_failure,
    log_request_success,
)
from config.logging import log_fallback
from config.settings.freescout import API_KEY_HEADER

if TYPE_CHECKING:
    from types import TracebackType

    from api.connectors.freescout.models import DecodedBody, RequestOptions

logger = logging.getLogger(__name__)

# Maior status tratado como sucesso (inclui 300)
SUCCESS_STATUS_CEILING = 300


def is_success_status(status_code: int) -> bool:
    """Classifica status HTTP como sucesso (<= 300)."""
    return status_code <= SUCCESS_STATUS_CEILING


def decode_body(response: httpx.Response) -> DecodedBody:
    """Decodifica corpo de resposta bem-sucedida.

    Args:
        response: Resposta httpx já lida

    Returns:
        Valor JSON quando content-type contém "json" e o corpo é válido;
        texto cru em qualquer outro caso.
    """
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            log_fallback(
                logger,
                "freescout_decode",
                reason="invalid_json",
                status_code=response.status_code,
            )
    return response.text


class FreeScoutHttpClient:
    """Transporte autenticado para a API do FreeScout.

    O httpx.AsyncClient é criado sob demanda. Um cliente injetado pertence
    a quem o injetou e não é fechado por `close()`.
    """

    __slots__ = ("_api_key", "_http_client", "_owns_client", "_timeout", "_verify_ssl")

    def __init__(
        self,
        api_key: str,
        *,
        timeout_seconds: float | None = 30.0,
        verify_ssl: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout_seconds
        self._verify_ssl = verify_ssl
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify_ssl,
            )
            self._owns_client = True
        return self._http_client

    def _auth_headers(self, headers: dict[str, str]) -> dict[str, str]:
        return {**headers, API_KEY_HEADER: self._api_key}

    async def request(self, url: str, options: RequestOptions) -> DecodedBody:
        """Executa uma chamada HTTP e decodifica a resposta.

        Args:
            url: URL absoluta do endpoint
            options: Método, corpo e headers da chamada

        Returns:
            Corpo decodificado (JSON ou texto)

        Raises:
            FreeScoutRequestError: Se status > 300
            httpx.HTTPError: Falhas de rede/timeout, sem reclassificação
        """
        client = await self._get_http_client()
        response = await client.request(
            options.method,
            url,
            content=options.body,
            headers=self._auth_headers(options.headers),
        )

        if is_success_status(response.status_code):
            log_request_success(options.method, url, response.status_code)
            return decode_body(response)

        log_request_failure(options.method, url, response.status_code)
        raise FreeScoutRequestError(response.text, status_code=response.status_code)

    async def close(self) -> None:
        """Fecha cliente HTTP próprio."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> FreeScoutHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

