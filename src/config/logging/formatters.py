"""Formatter JSON dos logs do conector.

Todo record sai com asctime, level, logger, message, correlation_id e
service; campos passados via `extra` são anexados ao JSON.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes publicados no JSON
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "DEBUG",
            "logger": "api.connectors.freescout.http_client",
            "message": "freescout_request_success",
            "correlation_id": "abc-123",
            "service": "freescout_connector",
            "method": "GET",
            "status_code": 200
        }
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
