"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", secrets=[settings.api_key])

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("freescout_page_fetched", extra={"page": 2})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "freescout_connector"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    secrets: Iterable[str] = (),
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço publicado em todo record.
        correlation_id_getter: Função que retorna o correlation_id do contexto.
        secrets: Valores a mascarar na saída (ex: API key do FreeScout).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SecretRedactionFilter(secrets))
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    **fields: object,
) -> None:
    """Registra que um fallback determinístico foi aplicado (sem PII).

    Args:
        logger: Logger do módulo chamador.
        component: Nome do componente (ex: "freescout_decode").
        reason: Razão do fallback (ex: "invalid_json").
        **fields: Campos extras publicados no record.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component, **fields}
    if reason:
        extra["reason"] = reason

    logger.info("Fallback applied for %s", component, extra=extra)
