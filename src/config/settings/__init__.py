"""Agregador de settings do freescout-connector.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Helpdesk settings
from config.settings.freescout import (
    API_KEY_HEADER,
    CONVERSATIONS_PATH,
    FreeScoutSettings,
    get_freescout_settings,
)

__all__ = [
    # Constants
    "API_KEY_HEADER",
    "CONVERSATIONS_PATH",
    # Base
    "BaseSettings",
    "Environment",
    # FreeScout
    "FreeScoutSettings",
    "get_base_settings",
    "get_freescout_settings",
]
