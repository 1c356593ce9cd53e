"""Protocolos e contratos do core da aplicação."""

from .datasource import CrudDataSourceProtocol

__all__ = [
    "CrudDataSourceProtocol",
]
