"""Agregador de settings do cliente Botmatic.

Re-exporta settings e constantes de cada módulo.
"""

from __future__ import annotations

from botmatic.config.settings.botmatic import (
    BOTMATIC_BASE_URL,
    CAMPAIGNS_PATH,
    CONTACTS_PATH,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    PROPERTIES_PATH,
    BotmaticSettings,
    get_botmatic_settings,
)

__all__ = [
    # Constants
    "BOTMATIC_BASE_URL",
    "CAMPAIGNS_PATH",
    "CONTACTS_PATH",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "PROPERTIES_PATH",
    # Settings
    "BotmaticSettings",
    "get_botmatic_settings",
]
