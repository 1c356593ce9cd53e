"""correlation_id por operação, propagado aos logs via ContextVar.

Todas as páginas de uma mesma leitura compartilham o mesmo id; quando a
plataforma já definiu um id no contexto, ele é reaproveitado.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto; gera UUID v4 se None."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope() -> Iterator[str]:
    """Garante um correlation_id durante o bloco.

    Reaproveita o id existente; senão gera um e o remove ao sair.
    """
    existing = get_correlation_id()
    if existing:
        yield existing
        return

    token = set_correlation_id()
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
