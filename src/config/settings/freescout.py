"""Settings específicas do FreeScout.

Configurações do datasource de helpdesk FreeScout via REST API.
A instância é imutável: lida uma vez e compartilhada entre chamadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Header de autenticação exigido pela API do FreeScout
API_KEY_HEADER: str = "X-FreeScout-API-Key"

# Recurso de conversas exposto pela API
CONVERSATIONS_PATH: str = "/api/conversations"


@dataclass(frozen=True)
class FreeScoutSettings:
    """Configurações de conexão com o FreeScout.

    Attributes:
        base_url: URL raiz da instalação FreeScout (ex: https://help.exemplo.com)
        api_key: Chave do módulo API & Webhooks
        request_timeout_seconds: Timeout das requisições HTTP (None = sem limite)
        verify_ssl: Validar certificado TLS do servidor
    """

    base_url: str = ""
    api_key: str = ""
    request_timeout_seconds: float | None = 30.0
    verify_ssl: bool = True

    @property
    def normalized_base_url(self) -> str:
        """URL base sem barra final."""
        return self.base_url.rstrip("/")

    @property
    def conversations_endpoint(self) -> str:
        """URL completa do recurso de conversas."""
        return f"{self.normalized_base_url}{CONVERSATIONS_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do FreeScout.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("FREESCOUT_URL não configurado")
        elif not self.base_url.startswith(("http://", "https://")):
            errors.append("FREESCOUT_URL deve começar com http:// ou https://")

        if not self.api_key:
            errors.append("FREESCOUT_API_KEY não configurado")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("FREESCOUT_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float | None:
    """Converte timeout da env; vazio ou 'none' desativa o limite."""
    if raw.strip().lower() in ("", "none"):
        return None
    return float(raw)


def _load_from_env() -> FreeScoutSettings:
    """Carrega FreeScoutSettings a partir de variáveis de ambiente."""
    return FreeScoutSettings(
        base_url=os.getenv("FREESCOUT_URL", ""),
        api_key=os.getenv("FREESCOUT_API_KEY", ""),
        request_timeout_seconds=_parse_timeout(
            os.getenv("FREESCOUT_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        verify_ssl=os.getenv("FREESCOUT_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_freescout_settings() -> FreeScoutSettings:
    """Retorna instância cacheada de FreeScoutSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
