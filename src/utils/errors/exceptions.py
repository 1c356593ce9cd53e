"""Exceções compartilhadas para falhas de integrações externas."""

from __future__ import annotations


class IntegrationError(RuntimeError):
    """Base para falhas reportadas por APIs de terceiros."""
