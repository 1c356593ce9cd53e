"""Datasource FreeScout: operações CRUD expostas à plataforma low-code.

Cada operação monta URL, método, headers e corpo e delega ao transporte.
A leitura sem `id` percorre a listagem de conversas página a página.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.freescout.freescout_logging import (
    log_page_fetched,
    log_page_limit_reached,
)
from api.connectors.freescout.http_client import FreeScoutHttpClient
from api.connectors.freescout.models import (
    ConversationPage,
    DeleteQuery,
    ReadQuery,
    RequestOptions,
    WriteQuery,
)
from app.observability import correlation_scope

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from api.connectors.freescout.models import DecodedBody
    from config.settings.freescout import FreeScoutSettings

_JSON_WRITE_HEADERS = {"Content-Type": "application/json"}

_JSON_READ_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json; charset=UTF-8",
}


def build_conversations_url(
    settings: FreeScoutSettings,
    query: ReadQuery,
) -> httpx.URL:
    """Monta URL de conversas (uma ou listagem) com a query string final.

    `params` substitui a query string inteira, inclusive `mailboxId`.
    """
    endpoint = settings.conversations_endpoint
    if query.conversation_id:
        endpoint = f"{endpoint}/{query.conversation_id}"

    if query.params:
        # Texto cru do chamador, sem reserializar.
        raw_query = query.params.lstrip("?")
        return httpx.URL(f"{endpoint}?{raw_query}")

    url = httpx.URL(endpoint)
    if query.mailbox_id:
        url = url.copy_set_param("mailboxId", query.mailbox_id)
    return url


class FreeScoutDataSource:
    """Adapter CRUD sobre a REST API do FreeScout.

    Implementa CrudDataSourceProtocol. Configuração imutável; nenhum estado
    é retido entre chamadas além do cliente HTTP.
    """

    __slots__ = ("_client", "_settings")

    def __init__(
        self,
        settings: FreeScoutSettings,
        client: FreeScoutHttpClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or FreeScoutHttpClient(
            settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
            verify_ssl=settings.verify_ssl,
        )

    @property
    def settings(self) -> FreeScoutSettings:
        return self._settings

    async def create(self, query: Mapping[str, Any]) -> DecodedBody:
        """POST do objeto `json` na URL base."""
        return await self._write("POST", WriteQuery.model_validate(query))

    async def update(self, query: Mapping[str, Any]) -> DecodedBody:
        """PUT do objeto `json` na URL base.

        A identidade do recurso deve estar na URL base ou no próprio corpo.
        """
        return await self._write("PUT", WriteQuery.model_validate(query))

    async def delete(self, query: Mapping[str, Any]) -> DecodedBody:
        """DELETE em `<base>/<id>`."""
        parsed = DeleteQuery.model_validate(query)
        url = f"{self._settings.normalized_base_url}/{parsed.resource_id}"
        with correlation_scope():
            return await self._client.request(url, RequestOptions(method="DELETE"))

    async def read(self, query: Mapping[str, Any]) -> DecodedBody | list[Any]:
        """Lê uma conversa (`id`) ou a listagem paginada de conversas.

        Args:
            query: `id`, `mailboxID`, `pageLimit` e `params`, todos opcionais

        Returns:
            Conversa com `threads` no topo, ou lista plana de conversas
            na ordem das páginas.
        """
        parsed = ReadQuery.model_validate(query)
        url = build_conversations_url(self._settings, parsed)
        with correlation_scope():
            if parsed.conversation_id:
                return await self._read_conversation(url)
            return await self._read_conversations(url, parsed)

    async def _write(self, method: str, query: WriteQuery) -> DecodedBody:
        body = json.dumps(query.payload) if query.has_payload else None
        options = RequestOptions(method=method, body=body, headers=dict(_JSON_WRITE_HEADERS))
        with correlation_scope():
            return await self._client.request(self._settings.base_url, options)

    async def _read_conversation(self, url: httpx.URL) -> DecodedBody:
        conversation = await self._client.request(str(url), self._read_options())
        # Sem `_embedded` a resposta não é uma conversa; KeyError/TypeError propagam.
        conversation["threads"] = conversation["_embedded"]["threads"]
        return conversation

    async def _read_conversations(self, url: httpx.URL, query: ReadQuery) -> list[Any]:
        conversations: list[Any] = []
        total_pages = 1
        current_page = 1

        while current_page <= total_pages:
            page_url = url.copy_set_param("page", str(current_page))
            data = await self._client.request(str(page_url), self._read_options())
            page = ConversationPage.model_validate(data)

            conversations.extend(page.embedded.conversations)
            total_pages = page.page.total_pages
            log_page_fetched(current_page, total_pages, len(conversations))

            if query.has_page_limit and current_page >= query.page_limit:
                if current_page < total_pages:
                    log_page_limit_reached(query.page_limit, total_pages)
                break
            current_page += 1

        return conversations

    @staticmethod
    def _read_options() -> RequestOptions:
        return RequestOptions(method="GET", headers=dict(_JSON_READ_HEADERS))

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> FreeScoutDataSource:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
