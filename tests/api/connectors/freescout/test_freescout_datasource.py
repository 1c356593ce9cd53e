"""Testes das operações CRUD do datasource FreeScout."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pydantic
import pytest

from api.connectors.freescout import (
    FreeScoutDataSource,
    FreeScoutHttpClient,
    FreeScoutRequestError,
    ReadQuery,
    build_conversations_url,
)
from app.protocols import CrudDataSourceProtocol
from config.settings import FreeScoutSettings

BASE_URL = "https://help.example.com"
SETTINGS = FreeScoutSettings(base_url=BASE_URL, api_key="secret-key")


class FakeFreeScoutServer:
    """Servidor fake que registra requests e responde por handler."""

    def __init__(self, handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def datasource(self) -> FreeScoutDataSource:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return FreeScoutDataSource(SETTINGS, FreeScoutHttpClient("secret-key", http_client=http))


def _paged_server(page_sizes: list[int]) -> FakeFreeScoutServer:
    """Listagem com `len(page_sizes)` páginas; ids sequenciais entre páginas."""

    def _handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params["page"])
        start = sum(page_sizes[: page - 1])
        items = [{"id": start + i + 1} for i in range(page_sizes[page - 1])]
        return httpx.Response(
            200,
            json={
                "_embedded": {"conversations": items},
                "page": {"size": 50, "totalElements": sum(page_sizes), "totalPages": len(page_sizes), "number": page},
            },
        )

    return FakeFreeScoutServer(_handler)


class TestCreateUpdateDelete:
    """Escrita e remoção na URL base."""

    @pytest.mark.asyncio
    async def test_create_posts_json_to_base_url(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(201, json={"id": 10}))
        datasource = server.datasource()

        result = await datasource.create({"json": {"subject": "Olá", "mailboxId": 1}})

        request = server.requests[0]
        assert result == {"id": 10}
        assert request.method == "POST"
        assert request.url == httpx.URL(BASE_URL)
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["X-FreeScout-API-Key"] == "secret-key"
        assert json.loads(request.content) == {"subject": "Olá", "mailboxId": 1}

    @pytest.mark.asyncio
    async def test_explicit_null_json_is_sent_as_null(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(200, text=""))
        datasource = server.datasource()

        await datasource.create({"json": None})

        assert server.requests[0].content == b"null"

    @pytest.mark.asyncio
    async def test_missing_json_sends_no_body(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(200, text=""))
        datasource = server.datasource()

        await datasource.update({})

        assert server.requests[0].content == b""

    @pytest.mark.asyncio
    async def test_update_puts_json_to_base_url(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(204))
        datasource = server.datasource()

        result = await datasource.update({"json": {"id": 3, "status": "closed"}})

        request = server.requests[0]
        assert result == ""
        assert request.method == "PUT"
        assert request.url == httpx.URL(BASE_URL)
        assert json.loads(request.content) == {"id": 3, "status": "closed"}

    @pytest.mark.asyncio
    async def test_delete_targets_id_path(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(200, text=""))
        datasource = server.datasource()

        await datasource.delete({"id": "42"})

        request = server.requests[0]
        assert request.method == "DELETE"
        assert str(request.url) == f"{BASE_URL}/42"
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_delete_coerces_numeric_id(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(200, text=""))
        datasource = server.datasource()

        await datasource.delete({"id": 42})

        assert server.requests[0].url.path == "/42"

    @pytest.mark.asyncio
    async def test_delete_without_id_is_rejected(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(200))
        datasource = server.datasource()

        with pytest.raises(pydantic.ValidationError):
            await datasource.delete({})

        assert server.requests == []

    @pytest.mark.asyncio
    async def test_write_error_propagates_unchanged(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(422, text="mailboxId is required"))
        datasource = server.datasource()

        with pytest.raises(FreeScoutRequestError, match="mailboxId is required"):
            await datasource.create({"json": {}})


class TestReadSingle:
    """Leitura de uma conversa com threads no topo."""

    @pytest.mark.asyncio
    async def test_threads_are_lifted(self) -> None:
        threads = [{"id": 1, "type": "customer"}, {"id": 2, "type": "message"}]
        server = FakeFreeScoutServer(
            lambda r: httpx.Response(200, json={"id": 5, "_embedded": {"threads": threads}})
        )
        datasource = server.datasource()

        result = await datasource.read({"id": "5"})

        request = server.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/conversations/5"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json; charset=UTF-8"
        assert result["threads"] == threads
        assert result["_embedded"]["threads"] == threads
        assert len(server.requests) == 1

    @pytest.mark.asyncio
    async def test_params_override_query_string(self) -> None:
        server = FakeFreeScoutServer(
            lambda r: httpx.Response(200, json={"_embedded": {"threads": []}})
        )
        datasource = server.datasource()

        await datasource.read({"id": "5", "params": "embed=threads"})

        assert server.requests[0].url.query == b"embed=threads"

    @pytest.mark.asyncio
    async def test_params_are_sent_verbatim(self) -> None:
        server = FakeFreeScoutServer(
            lambda r: httpx.Response(200, json={"_embedded": {"threads": []}})
        )
        datasource = server.datasource()

        await datasource.read({"id": "5", "params": "embed=threads&flag"})

        assert server.requests[0].url.query == b"embed=threads&flag"

    @pytest.mark.asyncio
    async def test_missing_embedded_propagates(self) -> None:
        server = FakeFreeScoutServer(lambda r: httpx.Response(200, json={"id": 5}))
        datasource = server.datasource()

        with pytest.raises(KeyError):
            await datasource.read({"id": "5"})


class TestReadList:
    """Paginação da listagem de conversas."""

    @pytest.mark.asyncio
    async def test_accumulates_all_pages_in_order(self) -> None:
        server = _paged_server([2, 2, 1])
        datasource = server.datasource()

        result = await datasource.read({})

        assert [item["id"] for item in result] == [1, 2, 3, 4, 5]
        assert [r.url.params["page"] for r in server.requests] == ["1", "2", "3"]
        assert all(r.url.path == "/api/conversations" for r in server.requests)

    @pytest.mark.asyncio
    async def test_page_limit_stops_early(self) -> None:
        server = _paged_server([2, 2, 1])
        datasource = server.datasource()

        result = await datasource.read({"pageLimit": 2})

        assert len(result) == 4
        assert [r.url.params["page"] for r in server.requests] == ["1", "2"]

    @pytest.mark.parametrize("limit", [0, -1, None, ""])
    @pytest.mark.asyncio
    async def test_non_positive_page_limit_is_ignored(self, limit: Any) -> None:
        server = _paged_server([1, 1, 1])
        datasource = server.datasource()

        result = await datasource.read({"pageLimit": limit})

        assert len(result) == 3

    @pytest.mark.asyncio
    async def test_fractional_page_limit_rounds_up(self) -> None:
        server = _paged_server([1, 1, 1, 1, 1])
        datasource = server.datasource()

        result = await datasource.read({"pageLimit": 2.5})

        assert len(result) == 3
        assert [r.url.params["page"] for r in server.requests] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_zero_id_reads_listing(self) -> None:
        server = _paged_server([2])
        datasource = server.datasource()

        result = await datasource.read({"id": 0})

        assert len(result) == 2
        assert server.requests[0].url.path == "/api/conversations"

    @pytest.mark.asyncio
    async def test_page_limit_above_total_pages(self) -> None:
        server = _paged_server([2, 1])
        datasource = server.datasource()

        result = await datasource.read({"pageLimit": 10})

        assert len(result) == 3
        assert len(server.requests) == 2

    @pytest.mark.asyncio
    async def test_total_pages_follows_latest_page(self) -> None:
        declared = {1: 2, 2: 3, 3: 3}

        def _handler(request: httpx.Request) -> httpx.Response:
            page = int(request.url.params["page"])
            return httpx.Response(
                200,
                json={
                    "_embedded": {"conversations": [{"id": page}]},
                    "page": {"totalPages": declared[page]},
                },
            )

        server = FakeFreeScoutServer(_handler)
        datasource = server.datasource()

        result = await datasource.read({})

        assert result == [{"id": 1}, {"id": 2}, {"id": 3}]

    @pytest.mark.asyncio
    async def test_empty_listing(self) -> None:
        server = FakeFreeScoutServer(
            lambda r: httpx.Response(
                200, json={"_embedded": {"conversations": []}, "page": {"totalPages": 0}}
            )
        )
        datasource = server.datasource()

        result = await datasource.read({})

        assert result == []
        assert len(server.requests) == 1

    @pytest.mark.asyncio
    async def test_mailbox_filter(self) -> None:
        server = _paged_server([1])
        datasource = server.datasource()

        await datasource.read({"mailboxID": "3"})

        params = server.requests[0].url.params
        assert params["mailboxId"] == "3"
        assert params["page"] == "1"

    @pytest.mark.asyncio
    async def test_params_replace_mailbox_filter(self) -> None:
        server = _paged_server([1])
        datasource = server.datasource()

        await datasource.read({"mailboxID": "3", "params": "status=active"})

        params = server.requests[0].url.params
        assert "mailboxId" not in params
        assert params["status"] == "active"
        assert params["page"] == "1"

    @pytest.mark.asyncio
    async def test_page_error_stops_pagination(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["page"] == "2":
                return httpx.Response(500, text="boom")
            return httpx.Response(
                200,
                json={"_embedded": {"conversations": [{"id": 1}]}, "page": {"totalPages": 3}},
            )

        server = FakeFreeScoutServer(_handler)
        datasource = server.datasource()

        with pytest.raises(FreeScoutRequestError, match="boom"):
            await datasource.read({})

        assert len(server.requests) == 2


class TestConversationsUrl:
    """Montagem da URL de conversas."""

    def test_trailing_slash_in_base_url(self) -> None:
        settings = FreeScoutSettings(base_url=f"{BASE_URL}/", api_key="k")

        url = build_conversations_url(settings, ReadQuery())

        assert str(url) == f"{BASE_URL}/api/conversations"

    def test_leading_question_mark_in_params(self) -> None:
        query = ReadQuery.model_validate({"params": "?mailboxId=1&status=all"})

        url = build_conversations_url(SETTINGS, query)

        assert url.params["mailboxId"] == "1"
        assert url.params["status"] == "all"


def test_datasource_satisfies_protocol() -> None:
    assert isinstance(FreeScoutDataSource(SETTINGS), CrudDataSourceProtocol)
