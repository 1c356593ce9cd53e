"""Helpers de logging para a API FreeScout (sem API key e sem corpos)."""

from __future__ import annotations

import logging

from httpx import URL

logger = logging.getLogger(__name__)


def _path(url: str) -> str:
    return URL(url).path


def log_request_success(method: str, url: str, status_code: int) -> None:
    logger.debug(
        "freescout_request_success",
        extra={"method": method, "path": _path(url), "status_code": status_code},
    )


def log_request_failure(method: str, url: str, status_code: int) -> None:
    logger.warning(
        "freescout_request_failed",
        extra={"method": method, "path": _path(url), "status_code": status_code},
    )


def log_page_fetched(page: int, total_pages: int, accumulated: int) -> None:
    """Loga progresso da paginação de conversas."""
    logger.debug(
        "freescout_page_fetched",
        extra={"page": page, "total_pages": total_pages, "accumulated": accumulated},
    )


def log_page_limit_reached(page_limit: int, total_pages: int) -> None:
    logger.info(
        "freescout_page_limit_reached",
        extra={"page_limit": page_limit, "total_pages": total_pages},
    )
