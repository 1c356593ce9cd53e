"""Contrato CRUD consumido pela camada de dados da plataforma low-code.

Mantemos apenas o protocolo aqui para permitir trocar o helpdesk sem
impactar quem registra o datasource na plataforma.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class CrudDataSourceProtocol(Protocol):
    """Quatro operações genéricas sobre um recurso externo."""

    async def create(self, query: Mapping[str, Any]) -> Any:
        """Cria recurso a partir de `query["json"]`."""
        ...

    async def read(self, query: Mapping[str, Any]) -> Any:
        """Lê um recurso por `id` ou a coleção inteira."""
        ...

    async def update(self, query: Mapping[str, Any]) -> Any:
        """Atualiza recurso a partir de `query["json"]`."""
        ...

    async def delete(self, query: Mapping[str, Any]) -> Any:
        """Remove o recurso `query["id"]`."""
        ...
