"""Bootstrap do conector: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
entrega o datasource pronto para a plataforma.

Uso:
    from app.bootstrap import initialize_app, get_datasource

    # Na inicialização do serviço
    initialize_app()

    datasource = get_datasource()
    conversations = await datasource.read({"mailboxID": "1", "pageLimit": 2})
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.bootstrap.datasource_factory import create_freescout_datasource
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_freescout_settings

if TYPE_CHECKING:
    from api.connectors.freescout import FreeScoutDataSource

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e API key mascarada.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level="DEBUG" if base.debug else base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        secrets=[get_freescout_settings().api_key],
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"freescout: {error}" for error in get_freescout_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_datasource() -> FreeScoutDataSource:
    """Obtém datasource FreeScout (singleton) a partir do ambiente."""
    return create_freescout_datasource()


__all__ = [
    "create_freescout_datasource",
    "get_datasource",
    "initialize_app",
    "validate_runtime_settings",
]
