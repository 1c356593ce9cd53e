"""Factory do datasource FreeScout a partir de settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.freescout import FreeScoutDataSource, FreeScoutHttpClient
from config.settings import get_freescout_settings

if TYPE_CHECKING:
    import httpx

    from config.settings import FreeScoutSettings

logger = logging.getLogger(__name__)


def create_freescout_datasource(
    settings: FreeScoutSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FreeScoutDataSource:
    """Cria datasource FreeScout validado.

    Args:
        settings: FreeScoutSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient opcional, compartilhado pelo chamador.

    Returns:
        Datasource pronto para uso.

    Raises:
        ValueError: Se URL ou API key não estiverem configuradas.
    """
    freescout = settings or get_freescout_settings()
    errors = freescout.validate()
    if errors:
        logger.error("freescout_settings_invalid", extra={"errors": errors})
        raise ValueError(f"Configuração FreeScout inválida: {'; '.join(errors)}")

    client = FreeScoutHttpClient(
        freescout.api_key,
        timeout_seconds=freescout.request_timeout_seconds,
        verify_ssl=freescout.verify_ssl,
        http_client=http_client,
    )
    logger.info(
        "freescout_datasource_created",
        extra={"base_url": freescout.normalized_base_url},
    )
    return FreeScoutDataSource(freescout, client=client)
