"""Modelos de request/response do datasource FreeScout.

As queries chegam da plataforma low-code como mapeamentos com chaves
camelCase (`id`, `mailboxID`, `pageLimit`, `params`, `json`); os modelos
validam e expõem nomes Python. Respostas da API são repassadas sem schema,
exceto pelos dois campos lidos na paginação.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Corpo decodificado: valor JSON qualquer ou texto cru
DecodedBody = Any


@dataclass(frozen=True)
class RequestOptions:
    """Descritor de uma única chamada HTTP."""

    method: str
    body: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


def _blank_to_none(value: Any) -> Any:
    if value is None or value == "":
        return None
    return value


class WriteQuery(BaseModel):
    """Query de create/update: objeto serializado como corpo JSON.

    Sem a chave `json` nenhum corpo é enviado; `{"json": None}` envia `null`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    payload: Any = Field(default=None, alias="json")

    @property
    def has_payload(self) -> bool:
        """True quando a chave `json` veio na query, mesmo com valor nulo."""
        return "payload" in self.model_fields_set


class DeleteQuery(BaseModel):
    """Query de delete: identificador anexado à URL base."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    resource_id: str = Field(alias="id", min_length=1)

    @field_validator("resource_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return value if value is None or isinstance(value, str) else str(value)


class ReadQuery(BaseModel):
    """Query de leitura de conversas.

    Com `conversation_id` busca uma conversa; sem ele, pagina a listagem.
    `params` substitui a query string inteira (inclusive `mailboxId`).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    conversation_id: str | None = Field(default=None, alias="id")
    mailbox_id: str | None = Field(default=None, alias="mailboxID")
    page_limit: float | None = Field(default=None, alias="pageLimit")
    params: str | None = None

    @field_validator("conversation_id", "mailbox_id", "params", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # Valores falsy (0, False, "") contam como ausentes.
        if not value:
            return None
        return value if isinstance(value, str) else str(value)

    @field_validator("page_limit", mode="before")
    @classmethod
    def _coerce_limit(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def has_page_limit(self) -> bool:
        """True quando um limite positivo de páginas foi informado."""
        return self.page_limit is not None and self.page_limit > 0


class EmbeddedConversations(BaseModel):
    """Bloco `_embedded` de uma página de conversas."""

    model_config = ConfigDict(extra="allow")

    conversations: list[Any]


class PageInfo(BaseModel):
    """Bloco `page` com a contagem de páginas declarada pelo servidor."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    total_pages: int = Field(alias="totalPages")


class ConversationPage(BaseModel):
    """Envelope mínimo de uma página da listagem de conversas."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    embedded: EmbeddedConversations = Field(alias="_embedded")
    page: PageInfo
