"""Exceções utilitárias compartilhadas."""

from .exceptions import IntegrationError

__all__ = [
    "IntegrationError",
]
